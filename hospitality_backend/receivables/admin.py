# receivables/admin.py

from django.contrib import admin

from receivables.models import ARInvoice, ARInvoiceApplication


class ARInvoiceApplicationInline(admin.TabularInline):
    model = ARInvoiceApplication
    extra = 0


@admin.register(ARInvoice)
class ARInvoiceAdmin(admin.ModelAdmin):
    list_display = ("doc_num", "business_unit", "bp_code", "status", "posting_date", "total_amount")
    list_filter = ("status", "business_unit")
    search_fields = ("doc_num", "bp_code", "customer_name")
    inlines = (ARInvoiceApplicationInline,)
