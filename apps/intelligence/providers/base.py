"""
Base provider interface for text-generation providers.

A provider turns a prompt into text. It is slow, fallible and has no side
effects on incident state; callers decide what to do with its output.
"""

import logging
import time
from abc import ABC, abstractmethod
from typing import Any

logger = logging.getLogger(__name__)

SENSITIVE_PATTERNS = {"key", "secret", "token", "password", "api"}


class BaseProvider(ABC):
    """
    Abstract base class for text-generation providers.

    Subclasses implement ``_call_api``; ``generate`` wraps it with timing and
    error logging and always re-raises.
    """

    name: str = "base"
    description: str = "Base text-generation provider"
    default_max_tokens: int = 1024

    @abstractmethod
    def _call_api(self, prompt: str, max_tokens: int) -> str:
        """Send the prompt to the backend and return the raw response text."""
        ...  # pragma: no cover

    def generate(self, prompt: str, max_tokens: int | None = None) -> str:
        """
        Generate text for a prompt.

        Args:
            prompt: The full prompt.
            max_tokens: Upper bound on generated tokens. Defaults to the
                provider's ``default_max_tokens``.

        Returns:
            Raw generated text (may be empty).

        Raises:
            Any exception from the backend, after logging it.
        """
        budget = max_tokens or self.default_max_tokens
        start = time.monotonic()
        try:
            text = self._call_api(prompt, budget)
        except Exception as e:
            logger.error(
                "%s generation failed after %.0fms: %s",
                self.name,
                (time.monotonic() - start) * 1000,
                e,
            )
            raise
        logger.info(
            "%s generated %d chars in %.0fms (max_tokens=%d)",
            self.name,
            len(text or ""),
            (time.monotonic() - start) * 1000,
            budget,
        )
        return text or ""

    def describe(self, config: dict[str, Any] | None = None) -> dict[str, Any]:
        """Public description of the provider with secrets redacted."""
        return {
            "name": self.name,
            "description": self.description,
            "config": self._redact_config(config or {}),
        }

    @staticmethod
    def _redact_config(config: dict[str, Any]) -> dict[str, Any]:
        """
        Redact sensitive values from provider configuration.

        Any key containing a word from SENSITIVE_PATTERNS (case-insensitive)
        will have its value replaced with '***'.

        Args:
            config: Raw provider configuration dict.

        Returns:
            New dict with sensitive values replaced.
        """
        redacted = {}
        for key, value in config.items():
            key_lower = key.lower()
            if any(pattern in key_lower for pattern in SENSITIVE_PATTERNS):
                redacted[key] = "***"
            else:
                redacted[key] = value
        return redacted
