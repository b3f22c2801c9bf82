"""Tests for the ClaudeTextProvider."""

from unittest.mock import MagicMock, patch

from django.test import SimpleTestCase

from apps.intelligence.providers.claude import ClaudeTextProvider


def fake_anthropic(text="response"):
    message = MagicMock()
    message.content = [MagicMock()]
    message.content[0].text = text
    client = MagicMock()
    client.messages.create.return_value = message
    module = MagicMock()
    module.Anthropic.return_value = client
    return module, client


class TestClaudeProviderInitialization(SimpleTestCase):
    """Tests for Claude provider initialization."""

    def test_initialization_defaults(self):
        provider = ClaudeTextProvider(api_key="test-key")
        assert provider.api_key == "test-key"
        assert provider.model == "claude-sonnet-4-20250514"
        assert provider.max_tokens == 1024

    def test_initialization_custom_values(self):
        provider = ClaudeTextProvider(
            api_key="custom-key", model="claude-opus-4-20250514", max_tokens=2048
        )
        assert provider.model == "claude-opus-4-20250514"
        assert provider.max_tokens == 2048

    def test_provider_attributes(self):
        provider = ClaudeTextProvider(api_key="test-key")
        assert provider.name == "claude"
        assert provider.description == "Claude (Anthropic) text-generation provider"


class TestClaudeCallApi(SimpleTestCase):
    """Tests for Claude API calls."""

    def test_call_api_success(self):
        module, client = fake_anthropic("Summary text")

        with patch.dict("sys.modules", {"anthropic": module}):
            provider = ClaudeTextProvider(api_key="test-key")
            result = provider._call_api("Test prompt", 360)

        assert result == "Summary text"
        module.Anthropic.assert_called_once_with(api_key="test-key", timeout=30)
        call_kwargs = client.messages.create.call_args.kwargs
        assert call_kwargs["model"] == "claude-sonnet-4-20250514"
        assert call_kwargs["max_tokens"] == 360
        assert call_kwargs["system"] == ClaudeTextProvider.SYSTEM_PROMPT
        assert call_kwargs["messages"] == [{"role": "user", "content": "Test prompt"}]

    def test_generate_uses_provider_budget(self):
        module, client = fake_anthropic()

        with patch.dict("sys.modules", {"anthropic": module}):
            ClaudeTextProvider(api_key="k", max_tokens=4096).generate("prompt")

        assert client.messages.create.call_args.kwargs["max_tokens"] == 4096

    def test_api_error_propagates(self):
        module, client = fake_anthropic()
        client.messages.create.side_effect = RuntimeError("overloaded")

        with patch.dict("sys.modules", {"anthropic": module}):
            with self.assertRaises(RuntimeError):
                ClaudeTextProvider(api_key="k").generate("prompt")
