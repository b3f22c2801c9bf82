"""
OpenAI text-generation provider.

Also serves as the base for OpenAI-compatible endpoints (see grok.py).
"""

import os
from typing import Any

from apps.intelligence.providers.ai_base import BaseAIProvider


class OpenAITextProvider(BaseAIProvider):
    """
    OpenAI-powered provider using the Chat Completions API.

    Credentials and model fall back to the OPENAI_API_KEY, OPENAI_MODEL and
    OPENAI_MAX_TOKENS environment variables. The client is created lazily so
    the SDK is only needed when the provider is actually used.
    """

    name = "openai"
    description = "OpenAI text-generation provider"
    default_model = "gpt-4o-mini"

    def __init__(self, base_url: str | None = None, **kwargs: Any) -> None:
        kwargs.setdefault("api_key", os.environ.get("OPENAI_API_KEY", ""))
        kwargs.setdefault("model", os.environ.get("OPENAI_MODEL", ""))
        kwargs.setdefault("max_tokens", int(os.environ.get("OPENAI_MAX_TOKENS", "0")))
        super().__init__(**kwargs)
        self.base_url = base_url
        self._client = None

    @property
    def client(self):
        """Lazy-initialize the OpenAI client."""
        if self._client is None:
            from openai import OpenAI  # nosemgrep

            client_kwargs: dict[str, Any] = {"api_key": self.api_key, "timeout": self.timeout_s}
            if self.base_url:
                client_kwargs["base_url"] = self.base_url
            self._client = OpenAI(**client_kwargs)  # nosec
        return self._client

    def _call_api(self, prompt: str, max_tokens: int) -> str:
        response = self.client.chat.completions.create(
            model=self.model,
            max_tokens=max_tokens,
            temperature=self.temperature,
            messages=[
                {"role": "system", "content": self.SYSTEM_PROMPT},
                {"role": "user", "content": prompt},
            ],
        )
        return response.choices[0].message.content or ""
