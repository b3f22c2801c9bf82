"""
Django system checks for the incidents app.

These run with `python manage.py check` and catch misconfigured incident
settings before the first request does.

Available check tags:
    - incidents: storage backend, provider and generation budget settings
"""

from django.core.checks import Error, Warning, register


@register("incidents")
def check_incident_settings(app_configs, **kwargs):
    """Validate INCIDENTS_* and INTELLIGENCE_* settings."""
    from django.conf import settings

    from apps.incidents.storage import list_stores
    from apps.intelligence.providers import list_providers

    errors = []

    store = getattr(settings, "INCIDENTS_STORE", "database")
    if store not in list_stores():
        errors.append(
            Error(
                f"Unknown incident store '{store}'",
                hint=f"Set INCIDENTS_STORE to one of: {', '.join(list_stores())}",
                id="incidents.E001",
            )
        )
    elif store == "memory" and not settings.DEBUG:
        errors.append(
            Warning(
                "Incidents are kept in process memory",
                hint="Data is lost on restart and not shared between workers. "
                "Use INCIDENTS_STORE=database outside development.",
                id="incidents.W001",
            )
        )

    provider = getattr(settings, "INTELLIGENCE_PROVIDER", "local")
    if provider not in list_providers():
        errors.append(
            Error(
                f"Unknown intelligence provider '{provider}'",
                hint=f"Set INTELLIGENCE_PROVIDER to one of: {', '.join(list_providers())}",
                id="incidents.E002",
            )
        )

    max_tokens = getattr(settings, "INCIDENTS_AI_MAX_TOKENS", 360)
    if not isinstance(max_tokens, int) or max_tokens <= 0:
        errors.append(
            Error(
                f"INCIDENTS_AI_MAX_TOKENS must be a positive integer, got {max_tokens!r}",
                id="incidents.E003",
            )
        )

    return errors
