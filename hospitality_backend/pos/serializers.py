# pos/serializers.py

from rest_framework import serializers

from pos.models import MenuCategory, MenuItem


class MenuCategorySerializer(serializers.ModelSerializer):
    businessUnitId = serializers.UUIDField(source="business_unit_id", read_only=True)
    sortOrder = serializers.IntegerField(source="sort_order", read_only=True)
    isActive = serializers.BooleanField(source="is_active", read_only=True)

    class Meta:
        model = MenuCategory
        fields = ["id", "businessUnitId", "name", "description", "sortOrder", "isActive"]


class MenuItemCategorySerializer(serializers.Serializer):
    name = serializers.CharField()


class MenuItemSerializer(serializers.ModelSerializer):
    businessUnitId = serializers.UUIDField(source="business_unit_id", read_only=True)
    categoryId = serializers.UUIDField(source="category_id", read_only=True)
    category = MenuItemCategorySerializer(read_only=True)
    isActive = serializers.BooleanField(source="is_active", read_only=True)

    class Meta:
        model = MenuItem
        fields = [
            "id",
            "businessUnitId",
            "categoryId",
            "category",
            "name",
            "description",
            "price",
            "isActive",
        ]
