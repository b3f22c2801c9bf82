"""
Text-generation providers registry.

Providers turn a prompt into text. SDK-backed providers import their SDK
lazily, so every provider can be registered without its SDK installed.
"""

import logging

from apps.intelligence.providers.ai_base import BaseAIProvider
from apps.intelligence.providers.base import BaseProvider
from apps.intelligence.providers.claude import ClaudeTextProvider
from apps.intelligence.providers.gemini import GeminiTextProvider
from apps.intelligence.providers.grok import GrokTextProvider
from apps.intelligence.providers.local import LocalTextProvider
from apps.intelligence.providers.mistral import MistralTextProvider
from apps.intelligence.providers.ollama import OllamaTextProvider
from apps.intelligence.providers.openai import OpenAITextProvider
from apps.intelligence.providers.workers_ai import WorkersAITextProvider

logger = logging.getLogger(__name__)

# Registry of available providers
PROVIDERS: dict[str, type[BaseProvider]] = {
    "local": LocalTextProvider,
    "workers_ai": WorkersAITextProvider,
    "claude": ClaudeTextProvider,
    "openai": OpenAITextProvider,
    "gemini": GeminiTextProvider,
    "grok": GrokTextProvider,
    "ollama": OllamaTextProvider,
    "mistral": MistralTextProvider,
}


def get_provider(name: str = "local", **kwargs) -> BaseProvider:
    """
    Get a provider instance by name.

    Args:
        name: Provider name (e.g., 'local', 'claude').
        **kwargs: Provider-specific configuration.

    Returns:
        Configured provider instance.

    Raises:
        KeyError: If provider name is not registered.
    """
    if name not in PROVIDERS:
        raise KeyError(f"Unknown provider: {name}. Available: {list(PROVIDERS.keys())}")
    return PROVIDERS[name](**kwargs)


def get_active_provider(**kwargs) -> BaseProvider:
    """Resolve the provider used for artifact generation.

    Resolution order:
    1. The IntelligenceProvider row marked active, if its driver is registered.
    2. settings.INTELLIGENCE_PROVIDER with settings.INTELLIGENCE_PROVIDER_CONFIG.
    3. The local provider.
    """
    from django.conf import settings
    from django.db import OperationalError, ProgrammingError

    try:
        from apps.intelligence.models import IntelligenceProvider as ProviderModel

        db_provider = ProviderModel.objects.filter(is_active=True).first()
        if db_provider and db_provider.provider in PROVIDERS:
            logger.debug("Using active provider row %s", db_provider.name)
            return db_provider.build_provider(**kwargs)
    except (OperationalError, ProgrammingError) as exc:
        logger.warning(
            "DB unavailable when resolving active provider, falling back to settings: %s",
            exc,
            exc_info=True,
        )

    name = getattr(settings, "INTELLIGENCE_PROVIDER", "local") or "local"
    config = getattr(settings, "INTELLIGENCE_PROVIDER_CONFIG", {}) or {}
    if name in PROVIDERS:
        return PROVIDERS[name](**{**config, **kwargs})

    logger.warning("Unknown INTELLIGENCE_PROVIDER=%s, falling back to local", name)
    return LocalTextProvider(**kwargs)


def list_providers() -> list[str]:
    """List all registered provider names."""
    return list(PROVIDERS.keys())


__all__ = [
    "BaseAIProvider",
    "BaseProvider",
    "ClaudeTextProvider",
    "GeminiTextProvider",
    "GrokTextProvider",
    "LocalTextProvider",
    "MistralTextProvider",
    "OllamaTextProvider",
    "OpenAITextProvider",
    "PROVIDERS",
    "WorkersAITextProvider",
    "get_active_provider",
    "get_provider",
    "list_providers",
]
