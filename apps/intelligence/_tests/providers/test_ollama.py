"""Tests for the OllamaTextProvider."""

from unittest.mock import MagicMock, patch

from django.test import SimpleTestCase

from apps.intelligence.providers.ollama import OllamaTextProvider


class TestOllamaProvider(SimpleTestCase):
    """Tests for Ollama provider."""

    def test_defaults(self):
        provider = OllamaTextProvider()
        assert provider.host == "http://localhost:11434"
        assert provider.model == "llama3.1"

    def test_call_api(self):
        module = MagicMock()
        client = module.Client.return_value
        client.chat.return_value = {"message": {"content": "Local model text"}}

        with patch.dict("sys.modules", {"ollama": module}):
            result = OllamaTextProvider(host="http://ollama:11434").generate(
                "prompt", max_tokens=360
            )

        assert result == "Local model text"
        module.Client.assert_called_once_with(host="http://ollama:11434", timeout=30)
        call_kwargs = client.chat.call_args.kwargs
        assert call_kwargs["options"] == {"num_predict": 360, "temperature": 0.3}
        assert call_kwargs["messages"][1] == {"role": "user", "content": "prompt"}
