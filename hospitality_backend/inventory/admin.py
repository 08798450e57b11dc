# inventory/admin.py

from django.contrib import admin

from inventory.models import InventoryCategory, InventoryItem, UoM


@admin.register(UoM)
class UoMAdmin(admin.ModelAdmin):
    list_display = ("name", "symbol", "created_at")
    search_fields = ("name", "symbol")


@admin.register(InventoryCategory)
class InventoryCategoryAdmin(admin.ModelAdmin):
    list_display = ("name", "business_unit", "created_at")
    list_filter = ("business_unit",)
    search_fields = ("name",)


@admin.register(InventoryItem)
class InventoryItemAdmin(admin.ModelAdmin):
    list_display = ("name", "business_unit", "category", "uom", "is_active")
    list_filter = ("business_unit", "is_active")
    search_fields = ("name",)
