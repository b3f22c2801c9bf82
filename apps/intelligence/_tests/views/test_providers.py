"""Tests for the providers list view."""

import pytest
from django.test import Client

from apps.intelligence.models import IntelligenceProvider


@pytest.mark.django_db
class TestProvidersListView:
    """Tests for ProvidersListView."""

    def test_list_providers(self, settings):
        settings.INTELLIGENCE_PROVIDER = "local"
        client = Client()
        response = client.get("/intelligence/providers/")

        assert response.status_code == 200
        data = response.json()
        names = [p["name"] for p in data["providers"]]
        assert "local" in names
        assert "workers_ai" in names
        assert data["count"] == len(names)
        assert data["active"] == "local"

    def test_active_reflects_database_row(self):
        IntelligenceProvider.objects.create(
            name="prod-claude", provider="claude", config={"api_key": "k"}, is_active=True
        )

        response = Client().get("/intelligence/providers/")

        assert response.json()["active"] == "claude"

    def test_descriptions_included(self):
        data = Client().get("/intelligence/providers/").json()

        local = next(p for p in data["providers"] if p["name"] == "local")
        assert local["description"] == "Offline template-based text generation"
