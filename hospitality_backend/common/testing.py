# common/testing.py

"""
Test fixtures shared by the app test suites.
"""

from __future__ import annotations

from django.contrib.auth import get_user_model

from business_units.models import BusinessUnit

User = get_user_model()


def create_business_unit(name="Main Hotel", location="Boracay"):
    return BusinessUnit.objects.create(name=name, location=location)


def create_user(*, email="staff@example.com", password="password123", role="", **extra):
    return User.objects.create_user(email=email, password=password, role=role, **extra)


def assign(user, business_unit, role="manager"):
    from users.models import Assignment

    return Assignment.objects.create(user=user, business_unit=business_unit, role=role)


def scope_headers(business_unit) -> dict:
    return {"HTTP_X_BUSINESS_UNIT_ID": str(business_unit.id)}
