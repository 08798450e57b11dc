"""
PUBLIC CATALOG API TESTS

GUARANTEES:
- No authentication needed
- Business units endpoint carries the public CORS headers on success AND failure
- Services come back grouped by category, (category, name) ordered
"""

from __future__ import annotations

from decimal import Decimal
from unittest import mock

from django.test import TestCase, override_settings
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APIClient

from common.testing import create_business_unit
from public.catalog import group_by_category
from public.models import Accommodation, HotelService

PUBLIC_ORIGIN = "https://www.example-resort.com"
BACKOFFICE_ORIGIN = "https://backoffice.example-resort.com"


@override_settings(PUBLIC_CORS_ALLOWED_ORIGIN=PUBLIC_ORIGIN)
class PublicBusinessUnitTests(TestCase):
    def setUp(self):
        self.client = APIClient()
        create_business_unit(name="Seaside Villas", location="Palawan")
        create_business_unit(name="Mountain Lodge", location="Baguio")
        self.url = reverse("public:business-unit-list")

    def test_lists_units_by_name_with_cors(self):
        res = self.client.get(self.url)

        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertTrue(res.data["success"])
        self.assertEqual(
            [row["name"] for row in res.data["data"]],
            ["Mountain Lodge", "Seaside Villas"],
        )
        self.assertEqual(set(res.data["data"][0].keys()), {"id", "name"})
        self.assertEqual(res["Access-Control-Allow-Origin"], PUBLIC_ORIGIN)
        self.assertEqual(res["Access-Control-Allow-Methods"], "GET, POST, PUT, DELETE, OPTIONS")
        self.assertEqual(res["Access-Control-Allow-Headers"], "Content-Type, Authorization")

    def test_failure_keeps_cors_headers(self):
        with mock.patch(
            "public.views.business_units.list_public_business_units",
            side_effect=RuntimeError("db down"),
        ):
            with self.assertLogs("common.views", level="ERROR") as logs:
                res = self.client.get(self.url)

        self.assertEqual(res.status_code, status.HTTP_500_INTERNAL_SERVER_ERROR)
        self.assertEqual(res.data, {"success": False, "error": "Failed to fetch business units"})
        self.assertEqual(res["Access-Control-Allow-Origin"], PUBLIC_ORIGIN)
        self.assertIn("[PUBLIC_BUSINESS_UNITS_GET]", logs.output[0])

    @override_settings(CORS_ALLOWED_ORIGINS=[BACKOFFICE_ORIGIN])
    def test_backoffice_origin_does_not_replace_public_origin(self):
        res = self.client.get(self.url, HTTP_ORIGIN=BACKOFFICE_ORIGIN)

        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(res["Access-Control-Allow-Origin"], PUBLIC_ORIGIN)
        self.assertEqual(res["Access-Control-Allow-Methods"], "GET, POST, PUT, DELETE, OPTIONS")

    @override_settings(CORS_ALLOWED_ORIGINS=[BACKOFFICE_ORIGIN])
    def test_backoffice_origin_still_applies_to_staff_routes(self):
        res = self.client.get(reverse("health-check"), HTTP_ORIGIN=BACKOFFICE_ORIGIN)
        self.assertEqual(res["Access-Control-Allow-Origin"], BACKOFFICE_ORIGIN)


class AccommodationTests(TestCase):
    def setUp(self):
        self.client = APIClient()
        seaside = create_business_unit(name="Seaside Villas", location="Palawan")
        lodge = create_business_unit(name="Mountain Lodge", location="Baguio")

        def make(bu, name, sort_order, is_active=True):
            return Accommodation.objects.create(
                business_unit=bu,
                name=name,
                type="room",
                capacity=2,
                price_per_night=Decimal("4500.00"),
                gallery=["https://img.example.com/1.jpg"],
                amenities=["wifi", "aircon"],
                sort_order=sort_order,
                is_active=is_active,
            )

        make(seaside, "Beach Villa", 2)
        make(seaside, "Garden Room", 1)
        make(lodge, "Pine Cabin", 5)
        make(lodge, "Closed Wing", 1, is_active=False)

    def test_active_only_ordered_by_unit_then_sort_order(self):
        res = self.client.get(reverse("public:accommodation-list"))

        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(
            [row["name"] for row in res.data],
            ["Pine Cabin", "Garden Room", "Beach Villa"],
        )
        first = res.data[0]
        self.assertEqual(first["businessUnit"]["name"], "Mountain Lodge")
        self.assertEqual(first["businessUnit"]["location"], "Baguio")
        self.assertEqual(first["amenities"], ["wifi", "aircon"])

    def test_failure_returns_catalog_error(self):
        with mock.patch(
            "public.views.accommodations.list_active_accommodations",
            side_effect=RuntimeError("boom"),
        ):
            with self.assertLogs("common.views", level="ERROR"):
                res = self.client.get(reverse("public:accommodation-list"))

        self.assertEqual(res.status_code, status.HTTP_500_INTERNAL_SERVER_ERROR)
        self.assertEqual(res.data, {"error": "Failed to fetch accommodations"})


class HotelServiceTests(TestCase):
    def setUp(self):
        self.client = APIClient()
        bu = create_business_unit()

        for category, name, active in [
            ("Tours", "Island Hopping", True),
            ("Spa", "Hot Stone Massage", True),
            ("Spa", "Foot Spa", True),
            ("Dining", "Private Dinner", False),
            ("Tours", "Firefly Watching", True),
        ]:
            HotelService.objects.create(
                business_unit=bu,
                name=name,
                category=category,
                base_price=Decimal("1200.00"),
                duration=60,
                is_active=active,
            )

    def test_grouped_by_category_in_order(self):
        res = self.client.get(reverse("public:service-list"))

        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(list(res.data.keys()), ["Spa", "Tours"])
        self.assertEqual(
            [row["name"] for row in res.data["Spa"]],
            ["Foot Spa", "Hot Stone Massage"],
        )
        self.assertEqual(
            [row["name"] for row in res.data["Tours"]],
            ["Firefly Watching", "Island Hopping"],
        )
        self.assertEqual(res.data["Spa"][0]["duration"], 60)

    def test_no_active_services_is_empty_mapping(self):
        HotelService.objects.update(is_active=False)
        res = self.client.get(reverse("public:service-list"))
        self.assertEqual(res.data, {})


class GroupByCategoryTests(TestCase):
    def test_keeps_incoming_order(self):
        rows = [
            {"category": "A", "name": "1"},
            {"category": "B", "name": "2"},
            {"category": "A", "name": "3"},
        ]
        grouped = group_by_category(rows)

        self.assertEqual(list(grouped), ["A", "B"])
        self.assertEqual([r["name"] for r in grouped["A"]], ["1", "3"])
