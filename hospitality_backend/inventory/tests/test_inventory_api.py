"""
INVENTORY REFERENCE-DATA API TESTS

Covers:
- category listing (itemCount, name order, business unit scope)
- category delete (404 / 409 text / 200 text)
- UoM listing + delete (404 / 409 text / 200 text)
"""

from __future__ import annotations

import uuid
from unittest import mock

from django.test import TestCase
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APIClient

from common.testing import assign, create_business_unit, create_user, scope_headers
from inventory.models import InventoryCategory, InventoryItem, UoM


class InventoryAPITestCase(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.bu = create_business_unit()
        self.user = create_user()
        assign(self.user, self.bu)
        self.client.force_authenticate(user=self.user)

        self.piece = UoM.objects.create(name="Piece", symbol="pc")

    def url(self, name, **kwargs):
        return reverse(f"inventory:{name}", kwargs={"business_unit_id": str(self.bu.id), **kwargs})


class InventoryCategoryListTests(InventoryAPITestCase):
    def setUp(self):
        super().setUp()
        self.linens = InventoryCategory.objects.create(business_unit=self.bu, name="Linens")
        self.beverages = InventoryCategory.objects.create(business_unit=self.bu, name="Beverages")
        self.empty = InventoryCategory.objects.create(business_unit=self.bu, name="Cleaning")
        InventoryCategory.objects.create(business_unit=create_business_unit(name="Annex"), name="Annex Stock")

        for name in ("Cola", "Water", "Juice"):
            InventoryItem.objects.create(
                business_unit=self.bu, category=self.beverages, uom=self.piece, name=name
            )
        InventoryItem.objects.create(
            business_unit=self.bu, category=self.linens, uom=self.piece, name="Towel"
        )

    def test_requires_authentication(self):
        self.client.force_authenticate(user=None)
        res = self.client.get(self.url("category-list"), **scope_headers(self.bu))
        self.assertEqual(res.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_header_is_required(self):
        res = self.client.get(self.url("category-list"))
        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)

    def test_forbidden_for_unassigned_business_unit(self):
        other = create_business_unit(name="Elsewhere")
        res = self.client.get(self.url("category-list"), **scope_headers(other))
        self.assertEqual(res.status_code, status.HTTP_403_FORBIDDEN)

    def test_item_counts_and_name_order(self):
        res = self.client.get(self.url("category-list"), **scope_headers(self.bu))

        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(
            [(row["name"], row["itemCount"]) for row in res.data],
            [("Beverages", 3), ("Cleaning", 0), ("Linens", 1)],
        )

    def test_unexpected_failure_is_logged_and_generic(self):
        with mock.patch(
            "inventory.views.categories.categories_with_item_counts",
            side_effect=RuntimeError("boom"),
        ):
            with self.assertLogs("common.views", level="ERROR") as logs:
                res = self.client.get(self.url("category-list"), **scope_headers(self.bu))

        self.assertEqual(res.status_code, status.HTTP_500_INTERNAL_SERVER_ERROR)
        self.assertNotIn("boom", res.content.decode())
        self.assertIn("[INVENTORY_CATEGORIES_GET]", logs.output[0])


class InventoryCategoryDeleteTests(InventoryAPITestCase):
    def setUp(self):
        super().setUp()
        self.category = InventoryCategory.objects.create(business_unit=self.bu, name="Minibar")

    def test_unused_category_is_deleted(self):
        res = self.client.delete(
            self.url("category-detail", category_id=self.category.id), **scope_headers(self.bu)
        )

        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(res.content.decode(), "Inventory category deleted successfully")
        self.assertFalse(InventoryCategory.objects.filter(id=self.category.id).exists())

    def test_category_in_use_is_409(self):
        InventoryItem.objects.create(
            business_unit=self.bu, category=self.category, uom=self.piece, name="Peanuts"
        )

        res = self.client.delete(
            self.url("category-detail", category_id=self.category.id), **scope_headers(self.bu)
        )

        self.assertEqual(res.status_code, status.HTTP_409_CONFLICT)
        self.assertIn("in use", res.content.decode())
        self.assertTrue(InventoryCategory.objects.filter(id=self.category.id).exists())

    def test_missing_category_is_404(self):
        res = self.client.delete(
            self.url("category-detail", category_id=uuid.uuid4()), **scope_headers(self.bu)
        )
        self.assertEqual(res.status_code, status.HTTP_404_NOT_FOUND)

    def test_category_of_other_business_unit_is_404(self):
        other_bu = create_business_unit(name="Annex")
        foreign = InventoryCategory.objects.create(business_unit=other_bu, name="Annex Stock")

        res = self.client.delete(
            self.url("category-detail", category_id=foreign.id), **scope_headers(self.bu)
        )

        self.assertEqual(res.status_code, status.HTTP_404_NOT_FOUND)
        self.assertTrue(InventoryCategory.objects.filter(id=foreign.id).exists())

    def test_delete_requires_authentication(self):
        self.client.force_authenticate(user=None)
        res = self.client.delete(
            self.url("category-detail", category_id=self.category.id), **scope_headers(self.bu)
        )

        self.assertEqual(res.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertTrue(InventoryCategory.objects.filter(id=self.category.id).exists())

    def test_delete_forbidden_without_assignment(self):
        outsider = create_user(email="outsider@example.com")
        self.client.force_authenticate(user=outsider)

        res = self.client.delete(
            self.url("category-detail", category_id=self.category.id), **scope_headers(self.bu)
        )

        self.assertEqual(res.status_code, status.HTTP_403_FORBIDDEN)
        self.assertTrue(InventoryCategory.objects.filter(id=self.category.id).exists())


class UoMTests(InventoryAPITestCase):
    def test_list_is_global_and_name_ordered(self):
        UoM.objects.create(name="Kilogram", symbol="kg")
        UoM.objects.create(name="Liter", symbol="L")

        res = self.client.get(self.url("uom-list"), **scope_headers(self.bu))

        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual([row["name"] for row in res.data], ["Kilogram", "Liter", "Piece"])
        self.assertEqual(res.data[0]["symbol"], "kg")

    def test_list_forbidden_without_assignment(self):
        other = create_business_unit(name="Elsewhere")
        res = self.client.get(self.url("uom-list"), **scope_headers(other))
        self.assertEqual(res.status_code, status.HTTP_403_FORBIDDEN)

    def test_delete_requires_authentication(self):
        self.client.force_authenticate(user=None)
        res = self.client.delete(self.url("uom-detail", uom_id=self.piece.id), **scope_headers(self.bu))
        self.assertEqual(res.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertTrue(UoM.objects.filter(id=self.piece.id).exists())

    def test_delete_header_is_required(self):
        res = self.client.delete(self.url("uom-detail", uom_id=self.piece.id))
        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertTrue(UoM.objects.filter(id=self.piece.id).exists())

    def test_unreferenced_uom_is_deleted(self):
        res = self.client.delete(self.url("uom-detail", uom_id=self.piece.id), **scope_headers(self.bu))

        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(res["Content-Type"], "text/plain")
        self.assertEqual(res.content.decode(), "UoM deleted successfully")
        self.assertFalse(UoM.objects.filter(id=self.piece.id).exists())

    def test_referenced_uom_is_409(self):
        InventoryItem.objects.create(business_unit=self.bu, uom=self.piece, name="Soap")

        res = self.client.delete(self.url("uom-detail", uom_id=self.piece.id), **scope_headers(self.bu))

        self.assertEqual(res.status_code, status.HTTP_409_CONFLICT)
        self.assertEqual(
            res.content.decode(),
            "Cannot delete: This UoM is currently in use by one or more items.",
        )
        self.assertTrue(UoM.objects.filter(id=self.piece.id).exists())

    def test_missing_uom_is_404(self):
        res = self.client.delete(self.url("uom-detail", uom_id=uuid.uuid4()), **scope_headers(self.bu))
        self.assertEqual(res.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(res.content.decode(), "UoM not found")

    def test_delete_forbidden_without_assignment(self):
        outsider = create_user(email="outsider@example.com")
        self.client.force_authenticate(user=outsider)

        res = self.client.delete(self.url("uom-detail", uom_id=self.piece.id), **scope_headers(self.bu))

        self.assertEqual(res.status_code, status.HTTP_403_FORBIDDEN)
        self.assertTrue(UoM.objects.filter(id=self.piece.id).exists())

    def test_delete_forbidden_for_unassigned_business_unit_header(self):
        other = create_business_unit(name="Elsewhere")

        res = self.client.delete(self.url("uom-detail", uom_id=self.piece.id), **scope_headers(other))

        self.assertEqual(res.status_code, status.HTTP_403_FORBIDDEN)
        self.assertTrue(UoM.objects.filter(id=self.piece.id).exists())
