# receivables/filters.py

import django_filters

from receivables.models import ARInvoice


class ARInvoiceFilter(django_filters.FilterSet):
    """
    ?customer=<bp_code>
    ?status=OPEN|CLOSED|CANCELLED  (unknown values are ignored, not rejected)
    """

    customer = django_filters.CharFilter(field_name="bp_code")
    status = django_filters.CharFilter(method="filter_status")

    class Meta:
        model = ARInvoice
        fields = ["customer", "status"]

    def filter_status(self, queryset, name, value):
        value = (value or "").strip().upper()
        if value not in ARInvoice.Status.values:
            return queryset
        return queryset.filter(status=value)
