"""WSGI entry point for agency_project."""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "agency_project.settings")

application = get_wsgi_application()
