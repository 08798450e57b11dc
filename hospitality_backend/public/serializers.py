# public/serializers.py

from rest_framework import serializers

from public.models import Accommodation, HotelService


class PublicBusinessUnitSerializer(serializers.Serializer):
    id = serializers.UUIDField()
    name = serializers.CharField()


class CatalogBusinessUnitSerializer(serializers.Serializer):
    id = serializers.UUIDField()
    name = serializers.CharField()
    location = serializers.CharField()


class AccommodationSerializer(serializers.ModelSerializer):
    shortDescription = serializers.CharField(source="short_description")
    pricePerNight = serializers.DecimalField(
        source="price_per_night",
        max_digits=12,
        decimal_places=2,
        coerce_to_string=False,
    )
    imageUrl = serializers.CharField(source="image_url")
    gallery = serializers.ListField(child=serializers.CharField())
    amenities = serializers.ListField(child=serializers.CharField())
    businessUnit = CatalogBusinessUnitSerializer(source="business_unit")

    class Meta:
        model = Accommodation
        fields = [
            "id",
            "name",
            "type",
            "description",
            "shortDescription",
            "capacity",
            "bedrooms",
            "bathrooms",
            "area",
            "pricePerNight",
            "imageUrl",
            "gallery",
            "amenities",
            "businessUnit",
        ]


class HotelServiceSerializer(serializers.ModelSerializer):
    basePrice = serializers.DecimalField(
        source="base_price",
        max_digits=12,
        decimal_places=2,
        coerce_to_string=False,
    )
    requiresBooking = serializers.BooleanField(source="requires_booking")
    businessUnit = CatalogBusinessUnitSerializer(source="business_unit")

    class Meta:
        model = HotelService
        fields = [
            "id",
            "name",
            "description",
            "category",
            "basePrice",
            "currency",
            "location",
            "requiresBooking",
            "duration",
            "capacity",
            "businessUnit",
        ]
