# backend/settings/__init__.py
"""
Settings package. Nothing is loaded here: pick a concrete module with
DJANGO_SETTINGS_MODULE.
- backend.settings.dev   (local + tests)
- backend.settings.prod  (deployments)
"""
