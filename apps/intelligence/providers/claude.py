"""
Claude (Anthropic) text-generation provider.

Uses the Anthropic Messages API.
"""

from apps.intelligence.providers.ai_base import BaseAIProvider


class ClaudeTextProvider(BaseAIProvider):
    """Claude-powered provider using Anthropic's Messages API."""

    name = "claude"
    description = "Claude (Anthropic) text-generation provider"
    default_model = "claude-sonnet-4-20250514"

    def _call_api(self, prompt: str, max_tokens: int) -> str:
        import anthropic

        client = anthropic.Anthropic(api_key=self.api_key, timeout=self.timeout_s)
        message = client.messages.create(
            model=self.model,
            max_tokens=max_tokens,
            system=self.SYSTEM_PROMPT,
            messages=[{"role": "user", "content": prompt}],
        )
        return message.content[0].text  # type: ignore[union-attr]
