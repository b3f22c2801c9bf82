"""Tests for the MistralTextProvider."""

from unittest.mock import MagicMock, patch

from django.test import SimpleTestCase

from apps.intelligence.providers.mistral import MistralTextProvider


def fake_mistral(content):
    module = MagicMock()
    response = MagicMock()
    response.choices = [MagicMock()]
    response.choices[0].message.content = content
    module.Mistral.return_value.chat.complete.return_value = response
    return module


class TestMistralProvider(SimpleTestCase):
    """Tests for Mistral provider."""

    def test_defaults(self):
        provider = MistralTextProvider(api_key="k")
        assert provider.name == "mistral"
        assert provider.model == "mistral-small-latest"

    def test_call_api(self):
        module = fake_mistral("Mistral text")

        with patch.dict("sys.modules", {"mistralai": module}):
            result = MistralTextProvider(api_key="k").generate("prompt", max_tokens=360)

        assert result == "Mistral text"
        module.Mistral.assert_called_once_with(api_key="k")
        call_kwargs = module.Mistral.return_value.chat.complete.call_args.kwargs
        assert call_kwargs["max_tokens"] == 360
        module.UserMessage.assert_called_once_with(content="prompt")

    def test_non_string_content_is_empty(self):
        module = fake_mistral([{"type": "text"}])

        with patch.dict("sys.modules", {"mistralai": module}):
            assert MistralTextProvider(api_key="k").generate("prompt") == ""
