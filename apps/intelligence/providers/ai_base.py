"""
Base class for all LLM-backed text-generation providers.

Holds the shared credentials/model/timeout handling and the system prompt
so each concrete provider only implements the SDK call.
"""

from typing import Any

from apps.intelligence.providers.base import BaseProvider


class BaseAIProvider(BaseProvider):
    """Base class for all LLM-backed providers.

    Subclasses only need to implement ``_call_api``, the actual SDK call.
    """

    # Subclasses override these
    default_model: str = ""
    default_max_tokens: int = 1024
    default_timeout_s: int = 30

    SYSTEM_PROMPT = (
        "You are an experienced incident response assistant.\n"
        "You help an on-call engineer work through a single incident.\n"
        "Answer in plain text only, follow the formatting instructions in the "
        "request exactly, and never invent facts that are not in the incident "
        "details or context notes."
    )

    def __init__(
        self,
        api_key: str = "",
        model: str = "",
        max_tokens: int = 0,
        timeout_s: int = 0,
        temperature: float = 0.3,
        **kwargs: Any,
    ) -> None:
        self.api_key = api_key
        self.model = model or self.default_model
        self.max_tokens = max_tokens or self.default_max_tokens
        self.timeout_s = timeout_s or self.default_timeout_s
        self.temperature = temperature

    def generate(self, prompt: str, max_tokens: int | None = None) -> str:
        return super().generate(prompt, max_tokens or self.max_tokens)
