"""
Grok (xAI) text-generation provider.

Uses OpenAI SDK with xAI's API endpoint.
"""

from typing import Any

from apps.intelligence.providers.openai import OpenAITextProvider


class GrokTextProvider(OpenAITextProvider):
    """Grok provider (OpenAI-compatible xAI endpoint)."""

    name = "grok"
    description = "Grok (xAI) text-generation provider"
    default_model = "grok-3-mini"

    def __init__(
        self,
        base_url: str = "https://api.x.ai/v1",
        **kwargs: Any,
    ) -> None:
        kwargs.setdefault("api_key", "")
        kwargs.setdefault("model", "")
        kwargs.setdefault("max_tokens", 0)
        super().__init__(base_url=base_url, **kwargs)
