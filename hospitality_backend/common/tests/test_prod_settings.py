import importlib
import os
import sys
from unittest import mock

from django.core.exceptions import ImproperlyConfigured
from django.test import SimpleTestCase

PROD_ENV = {
    "SECRET_KEY": "a-long-production-secret-value",
    "ALLOWED_HOSTS": "api.example-resort.com",
    "DATABASE_URL": "postgres://app:pw@db.example-resort.com:5432/app",
    "CORS_ALLOWED_ORIGINS": "https://backoffice.example-resort.com",
    "CSRF_TRUSTED_ORIGINS": "https://backoffice.example-resort.com",
    "PUBLIC_CORS_ALLOWED_ORIGIN": "https://www.example-resort.com",
}


def _load_prod(**overrides):
    sys.modules.pop("backend.settings.prod", None)
    with mock.patch.dict(os.environ, {**PROD_ENV, **overrides}):
        return importlib.import_module("backend.settings.prod")


class ProductionSettingsTests(SimpleTestCase):
    """
    GUARANTEES:
    - production refuses to boot on unsafe configuration
    """

    def tearDown(self):
        sys.modules.pop("backend.settings.prod", None)

    def test_complete_configuration_loads(self):
        prod = _load_prod()
        self.assertFalse(prod.DEBUG)
        self.assertEqual(prod.PUBLIC_CORS_ALLOWED_ORIGIN, "https://www.example-resort.com")
        self.assertIn("whitenoise.middleware.WhiteNoiseMiddleware", prod.MIDDLEWARE)

    def test_loading_does_not_touch_shared_middleware(self):
        from backend.settings import base

        _load_prod()
        self.assertNotIn("whitenoise.middleware.WhiteNoiseMiddleware", base.MIDDLEWARE)

    def test_sqlite_database_is_refused(self):
        with self.assertRaises(ImproperlyConfigured):
            _load_prod(DATABASE_URL="sqlite:///db.sqlite3")

    def test_dev_secret_is_refused(self):
        with self.assertRaises(ImproperlyConfigured):
            _load_prod(SECRET_KEY="dev-insecure-change-me")

    def test_http_origin_is_refused(self):
        with self.assertRaises(ImproperlyConfigured):
            _load_prod(CORS_ALLOWED_ORIGINS="http://backoffice.example-resort.com")

    def test_http_public_origin_is_refused(self):
        with self.assertRaises(ImproperlyConfigured):
            _load_prod(PUBLIC_CORS_ALLOWED_ORIGIN="http://www.example-resort.com")
