"""Tests for intelligence models."""

import pytest

from apps.intelligence.models import IntelligenceProvider


@pytest.mark.django_db
class TestIntelligenceProvider:
    """Tests for IntelligenceProvider model."""

    def test_str_active(self):
        provider = IntelligenceProvider.objects.create(
            name="prod-workers-ai",
            provider="workers_ai",
            is_active=True,
        )
        assert str(provider) == "prod-workers-ai (workers_ai) [active]"

    def test_str_inactive(self):
        provider = IntelligenceProvider.objects.create(
            name="test-openai",
            provider="openai",
            is_active=False,
        )
        assert str(provider) == "test-openai (openai) [inactive]"

    def test_ordering(self):
        IntelligenceProvider.objects.create(name="z-provider", provider="openai")
        IntelligenceProvider.objects.create(name="a-provider", provider="claude")
        IntelligenceProvider.objects.create(name="m-provider", provider="local")

        names = list(IntelligenceProvider.objects.values_list("name", flat=True))
        assert names == ["a-provider", "m-provider", "z-provider"]

    def test_save_deactivates_others(self):
        p1 = IntelligenceProvider.objects.create(name="first", provider="openai", is_active=True)
        p2 = IntelligenceProvider.objects.create(name="second", provider="claude", is_active=True)

        p1.refresh_from_db()
        assert p1.is_active is False
        assert p2.is_active is True

    def test_save_inactive_does_not_deactivate_others(self):
        p1 = IntelligenceProvider.objects.create(name="first", provider="openai", is_active=True)
        IntelligenceProvider.objects.create(name="second", provider="claude", is_active=False)

        p1.refresh_from_db()
        assert p1.is_active is True

    def test_resaving_active_provider_keeps_it_active(self):
        p1 = IntelligenceProvider.objects.create(name="only", provider="openai", is_active=True)
        p1.save()
        p1.refresh_from_db()
        assert p1.is_active is True

    def test_config_stores_json(self):
        provider = IntelligenceProvider.objects.create(
            name="edge",
            provider="workers_ai",
            config={"api_key": "cf-token", "account_id": "abc123"},
        )
        provider.refresh_from_db()
        assert provider.config == {"api_key": "cf-token", "account_id": "abc123"}

    def test_defaults(self):
        provider = IntelligenceProvider.objects.create(name="test", provider="local")
        assert provider.config == {}
        assert provider.description == ""
        assert provider.is_active is False

    def test_name_unique_constraint(self):
        from django.db import IntegrityError

        IntelligenceProvider.objects.create(name="unique", provider="openai")
        with pytest.raises(IntegrityError):
            IntelligenceProvider.objects.create(name="unique", provider="claude")

    def test_choices_match_registry(self):
        from apps.intelligence.providers import list_providers

        choices = {value for value, _ in IntelligenceProvider.PROVIDER_CHOICES}
        assert choices == set(list_providers())

    def test_redacted_config(self):
        provider = IntelligenceProvider(
            name="edge", provider="workers_ai", config={"api_key": "cf", "account_id": "acc"}
        )
        assert provider.redacted_config == {"api_key": "***", "account_id": "acc"}

    def test_build_provider(self):
        from apps.intelligence.providers.workers_ai import WorkersAITextProvider

        row = IntelligenceProvider(
            name="edge", provider="workers_ai", config={"api_key": "cf", "account_id": "acc"}
        )
        provider = row.build_provider(model="@cf/meta/llama-3.2-3b-instruct")

        assert isinstance(provider, WorkersAITextProvider)
        assert provider.account_id == "acc"
        assert provider.model == "@cf/meta/llama-3.2-3b-instruct"
