from __future__ import annotations

from django.contrib import admin
from django.urls import include, path

urlpatterns = [
    path("", include("agency.urls")),
    # Same API under the /api/ prefix used by existing clients.
    path("api/", include(("agency.urls", "agency"), namespace="api")),
    path("admin/", admin.site.urls),
]

handler404 = "agency.views.json_not_found"
handler500 = "agency.views.json_server_error"
