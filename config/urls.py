"""
URL configuration for the incident tracker.
"""

from django.contrib import admin
from django.urls import include, path

urlpatterns = [
    path("admin/", admin.site.urls),
    path("incidents/", include("apps.incidents.urls")),
    path("intelligence/", include("apps.intelligence.urls")),
]
