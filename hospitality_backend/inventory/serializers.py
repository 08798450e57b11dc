# inventory/serializers.py

from rest_framework import serializers

from inventory.models import InventoryCategory, UoM


class InventoryCategoryListSerializer(serializers.ModelSerializer):
    """
    Expects the queryset annotated with item_count.
    """

    itemCount = serializers.IntegerField(source="item_count")

    class Meta:
        model = InventoryCategory
        fields = ["id", "name", "itemCount"]


class UoMSerializer(serializers.ModelSerializer):
    createdAt = serializers.DateTimeField(source="created_at")
    updatedAt = serializers.DateTimeField(source="updated_at")

    class Meta:
        model = UoM
        fields = ["id", "name", "symbol", "createdAt", "updatedAt"]
