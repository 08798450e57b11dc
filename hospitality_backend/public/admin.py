# public/admin.py

from django.contrib import admin

from public.models import Accommodation, HotelService


@admin.register(Accommodation)
class AccommodationAdmin(admin.ModelAdmin):
    list_display = ("name", "business_unit", "type", "price_per_night", "sort_order", "is_active")
    list_filter = ("business_unit", "type", "is_active")
    search_fields = ("name",)


@admin.register(HotelService)
class HotelServiceAdmin(admin.ModelAdmin):
    list_display = ("name", "business_unit", "category", "base_price", "currency", "is_active")
    list_filter = ("category", "is_active")
    search_fields = ("name", "category")
