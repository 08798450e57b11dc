"""
ACCESS GUARD + SESSION TESTS

Run with:
    python manage.py test users -v 2
"""

from __future__ import annotations

import uuid

from django.test import SimpleTestCase, TestCase
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APIClient

from common.testing import assign, create_business_unit, create_user
from permissions.access import (
    DENIED_CAPABILITY_MISSING,
    DENIED_NOT_ASSIGNED,
    allow,
    authorize,
)
from permissions.roles import (
    CAP_POS_ACCESS,
    ROLE_ADMIN,
    ROLE_CASHIER,
    ROLE_MANAGER,
    has_any_capability,
)


class AllowPredicateTests(SimpleTestCase):
    """
    allow() is pure: no DB, never raises.
    """

    def test_matching_assignment_allows(self):
        bu = str(uuid.uuid4())
        self.assertTrue(allow(bu, [str(uuid.uuid4()), bu]))

    def test_no_matching_assignment_denies(self):
        self.assertFalse(allow(str(uuid.uuid4()), [str(uuid.uuid4())]))

    def test_empty_assignments_deny(self):
        self.assertFalse(allow(str(uuid.uuid4()), []))

    def test_blank_requested_id_denies(self):
        self.assertFalse(allow("", [""]))
        self.assertFalse(allow(None, []))

    def test_uuid_and_string_ids_compare_equal(self):
        bu = uuid.uuid4()
        self.assertTrue(allow(str(bu), [bu]))

    def test_role_whitelist(self):
        bu = str(uuid.uuid4())
        allowed = {ROLE_ADMIN, ROLE_CASHIER}
        self.assertTrue(allow(bu, [bu], role=ROLE_CASHIER, allowed_roles=allowed))
        self.assertFalse(allow(bu, [bu], role=ROLE_MANAGER, allowed_roles=allowed))
        self.assertFalse(allow(bu, [bu], role=None, allowed_roles=allowed))

    def test_role_whitelist_does_not_bypass_assignment(self):
        self.assertFalse(
            allow(str(uuid.uuid4()), [], role=ROLE_ADMIN, allowed_roles={ROLE_ADMIN})
        )


class CapabilityTests(SimpleTestCase):
    def test_pos_access_roles(self):
        self.assertTrue(has_any_capability(ROLE_ADMIN, {CAP_POS_ACCESS}))
        self.assertTrue(has_any_capability(ROLE_CASHIER, {CAP_POS_ACCESS}))
        self.assertFalse(has_any_capability(ROLE_MANAGER, {CAP_POS_ACCESS}))
        self.assertFalse(has_any_capability(None, {CAP_POS_ACCESS}))

    def test_empty_requirement_is_satisfied(self):
        self.assertTrue(has_any_capability(None, set()))


class AuthorizeTests(TestCase):
    def setUp(self):
        self.bu = create_business_unit()
        self.other_bu = create_business_unit(name="Annex")
        self.user = create_user()

    def test_denied_without_assignment(self):
        decision = authorize(self.user, str(self.bu.id))
        self.assertFalse(decision)
        self.assertEqual(decision.reason, DENIED_NOT_ASSIGNED)

    def test_allowed_with_assignment(self):
        assign(self.user, self.bu)
        self.assertTrue(authorize(self.user, str(self.bu.id)))

    def test_assignment_is_per_business_unit(self):
        assign(self.user, self.bu)
        self.assertFalse(authorize(self.user, str(self.other_bu.id)))

    def test_capability_checked_against_primary_role(self):
        assign(self.user, self.bu, role=ROLE_MANAGER)
        decision = authorize(
            self.user, str(self.bu.id), required_any_capabilities={CAP_POS_ACCESS}
        )
        self.assertFalse(decision)
        self.assertEqual(decision.reason, DENIED_CAPABILITY_MISSING)

    def test_user_role_wins_over_assignment_role(self):
        self.user.role = ROLE_CASHIER
        self.user.save()
        assign(self.user, self.bu, role=ROLE_MANAGER)
        self.assertTrue(
            authorize(self.user, str(self.bu.id), required_any_capabilities={CAP_POS_ACCESS})
        )


class PrimaryRoleTests(TestCase):
    def test_earliest_assignment_role_is_used(self):
        user = create_user()
        assign(user, create_business_unit(name="A"), role=ROLE_CASHIER)
        assign(user, create_business_unit(name="B"), role=ROLE_ADMIN)
        self.assertEqual(user.primary_role, ROLE_CASHIER)

    def test_no_role_anywhere(self):
        self.assertIsNone(create_user().primary_role)


class SessionEndpointTests(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.bu = create_business_unit()
        self.user = create_user(email="cashier@example.com", password="s3cret-pass")
        assign(self.user, self.bu, role=ROLE_CASHIER)

    def test_me_requires_authentication(self):
        res = self.client.get(reverse("users:me"))
        self.assertEqual(res.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_me_returns_identity_with_assignments(self):
        self.client.force_authenticate(user=self.user)
        res = self.client.get(reverse("users:me"))

        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(res.data["email"], "cashier@example.com")
        self.assertEqual(res.data["role"], ROLE_CASHIER)
        self.assertEqual(len(res.data["assignments"]), 1)
        self.assertEqual(
            str(res.data["assignments"][0]["businessUnitId"]), str(self.bu.id)
        )

    def test_login_returns_token_pair(self):
        res = self.client.post(
            reverse("users:login"),
            {"email": "cashier@example.com", "password": "s3cret-pass"},
            format="json",
        )
        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertIn("access", res.data)
        self.assertIn("refresh", res.data)

    def test_login_rejects_bad_password(self):
        res = self.client.post(
            reverse("users:login"),
            {"email": "cashier@example.com", "password": "wrong"},
            format="json",
        )
        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)

    def test_bearer_token_authenticates_scoped_request(self):
        login = self.client.post(
            reverse("users:login"),
            {"email": "cashier@example.com", "password": "s3cret-pass"},
            format="json",
        )
        self.client.credentials(HTTP_AUTHORIZATION=f"Bearer {login.data['access']}")
        res = self.client.get(reverse("users:me"))
        self.assertEqual(res.status_code, status.HTTP_200_OK)
