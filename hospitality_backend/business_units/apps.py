# business_units/apps.py

from django.apps import AppConfig


class BusinessUnitsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "business_units"
    verbose_name = "Business Units"
