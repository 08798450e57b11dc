# pos/admin.py

from django.contrib import admin

from pos.models import MenuCategory, MenuItem


@admin.register(MenuCategory)
class MenuCategoryAdmin(admin.ModelAdmin):
    list_display = ("name", "business_unit", "sort_order", "is_active")
    list_filter = ("business_unit", "is_active")
    ordering = ("business_unit", "sort_order")


@admin.register(MenuItem)
class MenuItemAdmin(admin.ModelAdmin):
    list_display = ("name", "business_unit", "category", "price", "is_active")
    list_filter = ("business_unit", "is_active")
    search_fields = ("name",)
