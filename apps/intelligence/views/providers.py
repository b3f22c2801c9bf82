"""Providers list endpoint for the intelligence app."""

from django.http import JsonResponse
from django.views import View

from apps.intelligence.providers import PROVIDERS, get_active_provider, list_providers


class ProvidersListView(View):
    """
    List available text-generation providers.

    GET /intelligence/providers/
    """

    def get(self, request):
        """List all registered providers and the one currently active."""
        providers = list_providers()
        return JsonResponse(
            {
                "providers": [
                    {"name": name, "description": PROVIDERS[name].description}
                    for name in providers
                ],
                "active": get_active_provider().name,
                "count": len(providers),
            }
        )
