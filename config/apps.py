"""Custom Django admin app configuration."""

from django.contrib.admin.apps import AdminConfig


class IncidentAdminConfig(AdminConfig):
    default_site = "config.admin.IncidentAdminSite"
