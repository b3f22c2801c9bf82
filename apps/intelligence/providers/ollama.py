"""
Ollama (local LLM) text-generation provider.

Uses the Ollama Python SDK to call a locally-hosted LLM.
"""

from typing import Any

from apps.intelligence.providers.ai_base import BaseAIProvider


class OllamaTextProvider(BaseAIProvider):
    """Ollama provider for local LLM inference."""

    name = "ollama"
    description = "Ollama local LLM text-generation provider"
    default_model = "llama3.1"

    def __init__(
        self,
        host: str = "http://localhost:11434",
        **kwargs: Any,
    ) -> None:
        super().__init__(**kwargs)
        self.host = host

    def _call_api(self, prompt: str, max_tokens: int) -> str:
        from ollama import Client

        client = Client(host=self.host, timeout=self.timeout_s)
        response = client.chat(
            model=self.model,
            messages=[
                {"role": "system", "content": self.SYSTEM_PROMPT},
                {"role": "user", "content": prompt},
            ],
            options={"num_predict": max_tokens, "temperature": self.temperature},
        )
        return response["message"]["content"]
