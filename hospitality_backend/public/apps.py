# public/apps.py

"""
PUBLIC APP CONFIG

Unauthenticated marketing catalog:
- business units
- accommodations
- hotel services
"""

from django.apps import AppConfig


class PublicConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "public"
    verbose_name = "Public Catalog"
