"""Tests for the incidents management commands."""

import json
from io import StringIO
from unittest.mock import MagicMock, patch

import pytest
from django.core.management import call_command
from django.core.management.base import CommandError

from apps.incidents.services import IncidentService


@pytest.fixture(autouse=True)
def _settings(settings):
    settings.INCIDENTS_STORE = "database"
    settings.INTELLIGENCE_PROVIDER = "local"


@pytest.fixture
def seeded(db):
    service = IncidentService()
    service.create("INC-1", "Database down", "writes failing", "high")
    service.create("INC-2", "Cache slow", "p99 up", "low")
    service.change_status("INC-2", "Resolved")
    return service


def run(*args) -> str:
    out = StringIO()
    call_command(*args, stdout=out)
    return out.getvalue()


@pytest.mark.django_db
class TestListIncidentsCommand:
    def test_empty(self):
        assert "No incidents found." in run("list_incidents")

    def test_lists_all(self, seeded):
        output = run("list_incidents")

        assert "2 incident(s)" in output
        assert "INC-1" in output
        assert "Cache slow" in output

    def test_bucket_and_query(self, seeded):
        assert "INC-2" not in run("list_incidents", "--bucket=open")
        assert "INC-1" not in run("list_incidents", "--q=cache")

    def test_json(self, seeded):
        data = json.loads(run("list_incidents", "--json", "--bucket=resolved"))

        assert [i["id"] for i in data] == ["INC-2"]
        assert data[0]["resolved_at"] is not None


@pytest.mark.django_db
class TestIncidentMetricsCommand:
    def test_text_output(self, seeded):
        output = run("incident_metrics")

        assert "Total:          2" in output
        assert "Open:           1" in output
        assert "Resolved:       1" in output

    def test_json_output(self, seeded):
        data = json.loads(run("incident_metrics", "--json"))

        assert data["total"] == 2
        assert data["resolved"] == 1
        assert data["avg_resolution_seconds"] is not None


@pytest.mark.django_db
class TestGenerateArtifactCommand:
    def test_generates_with_active_provider(self, seeded):
        output = run("generate_artifact", "INC-1", "summary")

        assert "Summary for INC-1" in output
        assert "Update time:" in output
        assert len(seeded.get("INC-1").ai_output) == 1

    def test_json_output(self, seeded):
        data = json.loads(run("generate_artifact", "INC-1", "next_steps", "--json"))

        assert data["type"] == "next_steps"
        assert data["title"] == "Next Steps"

    def test_explicit_provider(self, seeded):
        fake = MagicMock()
        fake.name = "claude"
        fake.generate.return_value = "Stakeholders informed."

        with patch(
            "apps.incidents.management.commands.generate_artifact.get_provider",
            return_value=fake,
        ) as mock_get:
            output = run("generate_artifact", "INC-1", "stakeholder_update", "--provider=claude")

        mock_get.assert_called_once_with("claude")
        assert "Stakeholders informed." in output

    def test_unknown_provider(self, seeded):
        with pytest.raises(CommandError, match="Unknown provider"):
            run("generate_artifact", "INC-1", "summary", "--provider=nope")

    def test_missing_incident(self, seeded):
        with pytest.raises(CommandError, match="Incident NOPE not found"):
            run("generate_artifact", "NOPE", "summary")

    def test_invalid_mode_rejected_by_parser(self, seeded):
        with pytest.raises(CommandError):
            run("generate_artifact", "INC-1", "bogus_mode")
