"""Tests for the OpenAITextProvider."""

from unittest.mock import MagicMock, patch

from apps.intelligence.providers.openai import OpenAITextProvider


def fake_openai(content="response"):
    response = MagicMock()
    response.choices = [MagicMock()]
    response.choices[0].message.content = content
    client = MagicMock()
    client.chat.completions.create.return_value = response
    module = MagicMock()
    module.OpenAI.return_value = client
    return module, client


class TestOpenAIProviderInitialization:
    """Tests for OpenAI provider initialization."""

    def test_initialization_from_environment(self):
        with patch.dict(
            "os.environ",
            {"OPENAI_API_KEY": "test-key", "OPENAI_MODEL": "gpt-4o", "OPENAI_MAX_TOKENS": "2048"},
        ):
            provider = OpenAITextProvider()

        assert provider.api_key == "test-key"
        assert provider.model == "gpt-4o"
        assert provider.max_tokens == 2048

    def test_initialization_custom_values(self):
        provider = OpenAITextProvider(api_key="custom-key", model="gpt-4-turbo", max_tokens=4096)

        assert provider.api_key == "custom-key"
        assert provider.model == "gpt-4-turbo"
        assert provider.max_tokens == 4096

    def test_defaults_without_env(self):
        with patch.dict("os.environ", {}, clear=True):
            provider = OpenAITextProvider()

        assert provider.api_key == ""
        assert provider.model == "gpt-4o-mini"
        assert provider.max_tokens == 1024

    def test_lazy_client_initialization(self):
        provider = OpenAITextProvider(api_key="test-key")
        assert provider._client is None


class TestOpenAICallApi:
    """Tests for OpenAI API calls."""

    def test_client_created_once(self):
        module, client = fake_openai()

        with patch.dict("sys.modules", {"openai": module}):
            provider = OpenAITextProvider(api_key="test-key")
            assert provider.client is client
            assert provider.client is client

        module.OpenAI.assert_called_once_with(api_key="test-key", timeout=30)

    def test_call_api(self):
        module, client = fake_openai("Next steps text")

        with patch.dict("sys.modules", {"openai": module}):
            result = OpenAITextProvider(api_key="k").generate("prompt", max_tokens=360)

        assert result == "Next steps text"
        call_kwargs = client.chat.completions.create.call_args.kwargs
        assert call_kwargs["max_tokens"] == 360
        assert call_kwargs["temperature"] == 0.3
        assert call_kwargs["messages"] == [
            {"role": "system", "content": OpenAITextProvider.SYSTEM_PROMPT},
            {"role": "user", "content": "prompt"},
        ]

    def test_empty_content(self):
        module, _ = fake_openai(None)

        with patch.dict("sys.modules", {"openai": module}):
            assert OpenAITextProvider(api_key="k").generate("prompt") == ""
