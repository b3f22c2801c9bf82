"""Shared test fixtures for intelligence app."""

import pytest

SAMPLE_PROMPT = """Incident: Database down
Description: Primary rejects writes
Severity: High
Status: Investigating

Additional context notes (most recent last):
- (2024-01-08T10:05:00+00:00) Restarted the primary
- (2024-01-08T10:20:00+00:00) Failover to replica started

Write a clear technical summary in plain text."""


@pytest.fixture
def sample_prompt():
    """A rendered artifact prompt with two context notes."""
    return SAMPLE_PROMPT


@pytest.fixture
def local_provider():
    """Create a LocalTextProvider instance for testing."""
    from apps.intelligence.providers import LocalTextProvider

    return LocalTextProvider()
