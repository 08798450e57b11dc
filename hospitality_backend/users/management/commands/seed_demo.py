# users/management/commands/seed_demo.py

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand, CommandError
from django.db import transaction

from business_units.models import BusinessUnit
from inventory.models import UoM
from permissions.roles import ROLE_ACCOUNTANT, ROLE_ADMIN, ROLE_CASHIER, ROLE_MANAGER
from pos.models import MenuCategory, MenuItem
from users.models import Assignment


@dataclass(frozen=True)
class SeedUserSpec:
    label: str
    role: str
    email: str
    name: str


SEED_USERS = [
    SeedUserSpec("Admin", ROLE_ADMIN, "admin@example.com", "System Admin"),
    SeedUserSpec("Manager", ROLE_MANAGER, "manager@example.com", "Resort Manager"),
    SeedUserSpec("Accountant", ROLE_ACCOUNTANT, "accountant@example.com", "AR Accountant"),
    SeedUserSpec("Cashier", ROLE_CASHIER, "cashier@example.com", "Front Cashier"),
]

SEED_UOMS = [
    ("Piece", "pc"),
    ("Kilogram", "kg"),
    ("Liter", "L"),
]

SEED_MENU = {
    ("Mains", 1): [("Chicken Adobo", "280.00"), ("Grilled Fish", "350.00")],
    ("Drinks", 2): [("Iced Tea", "90.00"), ("Mango Shake", "150.00")],
}


class Command(BaseCommand):
    help = "Seed a demo business unit with staff users, UoMs and a POS menu (idempotent)."

    def add_arguments(self, parser):
        parser.add_argument(
            "--business-unit",
            type=str,
            default="Main Resort",
            help="Business unit name (default: Main Resort)",
        )
        parser.add_argument(
            "--password",
            type=str,
            default="Pass1234!",
            help="Password for newly created users (default: Pass1234!)",
        )
        parser.add_argument(
            "--force-password",
            action="store_true",
            help="Reset password for existing seeded users too.",
        )

    @transaction.atomic
    def handle(self, *args, **options):
        bu_name = (options.get("business_unit") or "").strip()
        password = options.get("password") or ""
        force_password = bool(options.get("force_password"))

        if not bu_name:
            raise CommandError("--business-unit must not be blank.")

        if len(password) < 6:
            raise CommandError("--password must be at least 6 characters.")

        business_unit, _ = BusinessUnit.objects.get_or_create(name=bu_name)
        self.stdout.write(f"Seeding business unit '{business_unit.name}' ({business_unit.id}) ...")

        for name, symbol in SEED_UOMS:
            UoM.objects.get_or_create(name=name, defaults={"symbol": symbol})

        self._seed_users(business_unit, password=password, force_password=force_password)
        self._seed_menu(business_unit)

        self.stdout.write(self.style.SUCCESS("Done."))

    def _seed_users(self, business_unit, *, password: str, force_password: bool) -> None:
        User = get_user_model()

        for spec in SEED_USERS:
            is_admin = spec.role == ROLE_ADMIN

            user, created = User.objects.get_or_create(
                email=spec.email,
                defaults={
                    "name": spec.name,
                    "role": spec.role,
                    "is_staff": True,
                    "is_superuser": is_admin,
                },
            )

            if created or force_password:
                user.set_password(password)
                user.save(update_fields=["password"])

            Assignment.objects.get_or_create(
                user=user,
                business_unit=business_unit,
                defaults={"role": spec.role},
            )

            state = "created" if created else "exists "
            self.stdout.write(f"  {state}: {spec.label} ({spec.role}) -> {spec.email}")

    def _seed_menu(self, business_unit) -> None:
        for (category_name, sort_order), items in SEED_MENU.items():
            category, _ = MenuCategory.objects.get_or_create(
                business_unit=business_unit,
                name=category_name,
                defaults={"sort_order": sort_order},
            )
            for item_name, price in items:
                MenuItem.objects.get_or_create(
                    business_unit=business_unit,
                    category=category,
                    name=item_name,
                    defaults={"price": Decimal(price)},
                )
