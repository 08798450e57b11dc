# backend/settings/prod.py
"""
PRODUCTION SETTINGS

Fails closed (ImproperlyConfigured) on:
- missing / dev SECRET_KEY
- missing ALLOWED_HOSTS
- missing or SQLite DATABASE_URL
- non-https or localhost CORS / CSRF origins
- non-https public marketing origin

Django's own defaults already cover nosniff, referrer policy,
X-Frame-Options DENY and Lax/HttpOnly cookies.
"""

from __future__ import annotations

from django.core.exceptions import ImproperlyConfigured

from .base import *  # noqa: F403
from .base import BASE_DIR, MIDDLEWARE, env

DEBUG = False

SECRET_KEY = (env("SECRET_KEY", default="") or "").strip()
if not SECRET_KEY or SECRET_KEY == "dev-insecure-change-me":
    raise ImproperlyConfigured("SECRET_KEY must be set to a strong value in production.")

ALLOWED_HOSTS = env.list("ALLOWED_HOSTS", default=[])
if not ALLOWED_HOSTS:
    raise ImproperlyConfigured("ALLOWED_HOSTS must be set in production.")

# ----------------------------
# Database (Postgres)
# ----------------------------
_database_url = (env("DATABASE_URL", default="") or "").strip()
if not _database_url.startswith(("postgres://", "postgresql://", "pgsql://")):
    raise ImproperlyConfigured("DATABASE_URL must point at Postgres in production.")

DATABASES = {"default": env.db("DATABASE_URL")}
DATABASES["default"]["CONN_MAX_AGE"] = env.int("DB_CONN_MAX_AGE", default=60)

# ----------------------------
# Static files (whitenoise)
# ----------------------------
STATIC_ROOT = env("STATIC_ROOT", default=str(BASE_DIR / "staticfiles"))
MIDDLEWARE = [MIDDLEWARE[0], "whitenoise.middleware.WhiteNoiseMiddleware", *MIDDLEWARE[1:]]
STORAGES = {
    "default": {"BACKEND": "django.core.files.storage.FileSystemStorage"},
    "staticfiles": {"BACKEND": "whitenoise.storage.CompressedManifestStaticFilesStorage"},
}

# ----------------------------
# TLS behind the proxy
# ----------------------------
SECURE_PROXY_SSL_HEADER = ("HTTP_X_FORWARDED_PROTO", "https")
SECURE_SSL_REDIRECT = env.bool("SECURE_SSL_REDIRECT", default=True)
SECURE_HSTS_SECONDS = env.int("SECURE_HSTS_SECONDS", default=3600)
SESSION_COOKIE_SECURE = True
CSRF_COOKIE_SECURE = True

# ----------------------------
# CORS / CSRF (explicit + https only)
# ----------------------------
def _require_https_origins(setting_name: str) -> list[str]:
    origins = env.list(setting_name, default=[])
    if not origins:
        raise ImproperlyConfigured(f"{setting_name} must be set in production.")
    for origin in origins:
        if "localhost" in origin or "127.0.0.1" in origin:
            raise ImproperlyConfigured(f"Remove localhost from {setting_name} in production.")
        if not origin.startswith("https://"):
            raise ImproperlyConfigured(f"{setting_name} must be https:// in production.")
    return origins


CORS_ALLOWED_ORIGINS = _require_https_origins("CORS_ALLOWED_ORIGINS")
CSRF_TRUSTED_ORIGINS = _require_https_origins("CSRF_TRUSTED_ORIGINS")

# Marketing site origin echoed by /api/public/business-units/
PUBLIC_CORS_ALLOWED_ORIGIN = (env("PUBLIC_CORS_ALLOWED_ORIGIN", default="") or "").strip()
if not PUBLIC_CORS_ALLOWED_ORIGIN.startswith("https://"):
    raise ImproperlyConfigured(
        "PUBLIC_CORS_ALLOWED_ORIGIN must be set to an https:// origin in production."
    )

CORS_ALLOW_CREDENTIALS = False
