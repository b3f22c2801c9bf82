"""Shared test fixtures for incidents app."""

from datetime import datetime, timedelta
from datetime import timezone as dt_timezone
from unittest.mock import MagicMock

import pytest

from apps.incidents.repository import IncidentRepository
from apps.incidents.services import IncidentService
from apps.incidents.storage import InMemoryStore, reset_stores

START = datetime(2024, 1, 8, 10, 0, tzinfo=dt_timezone.utc)


class FakeClock:
    """Clock that only moves when told to."""

    def __init__(self, start: datetime = START):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> datetime:
        self.now = self.now + timedelta(**kwargs)
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def memory_store():
    return InMemoryStore()


@pytest.fixture
def repository(memory_store):
    return IncidentRepository(store=memory_store, key="incidents")


@pytest.fixture
def provider():
    """Text-generation provider double returning a canned answer."""
    fake = MagicMock()
    fake.name = "fake"
    fake.generate.return_value = "**Summary**\n- Database writes are failing.\n\n\nFailover started."
    return fake


@pytest.fixture
def service(repository, provider, clock):
    return IncidentService(
        repository=repository,
        provider=provider,
        clock=clock,
        strict_status=False,
        max_tokens=360,
    )


@pytest.fixture
def incident(service):
    """A freshly created High severity incident."""
    return service.create("INC-1", "Database down", "Primary DB rejects writes", "high")


@pytest.fixture(autouse=True)
def _reset_store_cache():
    reset_stores()
    yield
    reset_stores()
