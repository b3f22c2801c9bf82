"""
Mistral AI text-generation provider.

Uses the Mistral Python SDK.
"""

from apps.intelligence.providers.ai_base import BaseAIProvider


class MistralTextProvider(BaseAIProvider):
    """Mistral AI text-generation provider."""

    name = "mistral"
    description = "Mistral AI text-generation provider"
    default_model = "mistral-small-latest"

    def _call_api(self, prompt: str, max_tokens: int) -> str:
        from mistralai import (
            AssistantMessage,
            Mistral,
            SystemMessage,
            ToolMessage,
            UserMessage,
        )

        client = Mistral(api_key=self.api_key)
        messages: list[AssistantMessage | SystemMessage | ToolMessage | UserMessage] = [
            SystemMessage(content=self.SYSTEM_PROMPT),
            UserMessage(content=prompt),
        ]
        response = client.chat.complete(
            model=self.model,
            max_tokens=max_tokens,
            temperature=self.temperature,
            messages=messages,
        )
        content = response.choices[0].message.content
        if isinstance(content, str):
            return content
        return ""
