"""Django app configuration for the incidents app."""

from django.apps import AppConfig


class IncidentsConfig(AppConfig):
    """Configuration for the Incident Tracker app."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.incidents"
    verbose_name = "Incident Tracker"

    def ready(self):
        # Import checks module to register system checks with Django
        from apps.incidents import checks  # noqa: F401
