# receivables/serializers.py

from rest_framework import serializers

from receivables.models import ARInvoice, ARInvoiceApplication


class ARInvoiceApplicationSerializer(serializers.ModelSerializer):
    paymentReference = serializers.CharField(source="payment_reference")
    amountApplied = serializers.DecimalField(
        source="amount_applied", max_digits=14, decimal_places=2
    )
    appliedAt = serializers.DateTimeField(source="applied_at")

    class Meta:
        model = ARInvoiceApplication
        fields = ["id", "paymentReference", "amountApplied", "appliedAt"]


class ARInvoiceSerializer(serializers.ModelSerializer):
    """
    Read shape for AR invoice listings (camelCase wire format).
    """

    businessUnitId = serializers.UUIDField(source="business_unit_id")
    docNum = serializers.CharField(source="doc_num")
    bpCode = serializers.CharField(source="bp_code")
    customerName = serializers.CharField(source="customer_name")
    documentDate = serializers.DateField(source="document_date")
    postingDate = serializers.DateField(source="posting_date")
    dueDate = serializers.DateField(source="due_date")
    totalAmount = serializers.DecimalField(
        source="total_amount", max_digits=14, decimal_places=2
    )
    applications = ARInvoiceApplicationSerializer(many=True)
    createdAt = serializers.DateTimeField(source="created_at")
    updatedAt = serializers.DateTimeField(source="updated_at")

    class Meta:
        model = ARInvoice
        fields = [
            "id",
            "businessUnitId",
            "docNum",
            "bpCode",
            "customerName",
            "status",
            "documentDate",
            "postingDate",
            "dueDate",
            "totalAmount",
            "remarks",
            "applications",
            "createdAt",
            "updatedAt",
        ]
