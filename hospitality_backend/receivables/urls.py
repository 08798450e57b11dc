# receivables/urls.py

from django.urls import path

from receivables.views import ARInvoiceDetailView, ARInvoiceListView

app_name = "receivables"

urlpatterns = [
    path("ar-invoices/", ARInvoiceListView.as_view(), name="ar-invoice-list"),
    path(
        "ar-invoices/<str:invoice_id>/",
        ARInvoiceDetailView.as_view(),
        name="ar-invoice-detail",
    ),
]
