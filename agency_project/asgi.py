"""ASGI entry point for agency_project."""

import os

from django.core.asgi import get_asgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "agency_project.settings")

application = get_asgi_application()
