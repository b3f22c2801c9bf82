"""
Aggregate statistics over the incident collection.

Metrics are recomputed from the current incidents on every read and are
never stored.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import timedelta
from typing import Any, Iterable

from apps.incidents.dtos import Incident, IncidentStatus


@dataclass
class IncidentMetrics:
    """Dashboard counters for a set of incidents."""

    total: int = 0
    open: int = 0
    resolved: int = 0
    avg_resolution_time: timedelta | None = None

    def to_dict(self) -> dict[str, Any]:
        avg = self.avg_resolution_time
        return {
            "total": self.total,
            "open": self.open,
            "resolved": self.resolved,
            "avg_resolution_seconds": avg.total_seconds() if avg is not None else None,
            "avg_resolution_display": humanize_duration(avg) if avg is not None else None,
        }


def _status_is(incident: Incident, status: IncidentStatus) -> bool:
    return (incident.status or "").lower() == status.value.lower()


def compute_metrics(incidents: Iterable[Incident]) -> IncidentMetrics:
    """
    Compute total/open/resolved counts and the mean resolution time.

    Only incidents with both ``created_at`` and ``resolved_at`` and a
    non-negative difference count towards the mean. With none qualifying
    the mean is None rather than zero.
    """
    metrics = IncidentMetrics()
    durations: list[timedelta] = []

    for incident in incidents:
        metrics.total += 1
        if _status_is(incident, IncidentStatus.OPEN):
            metrics.open += 1
        if _status_is(incident, IncidentStatus.RESOLVED):
            metrics.resolved += 1

        if incident.resolved_at is None or incident.created_at is None:
            continue
        delta = incident.resolved_at - incident.created_at
        if delta >= timedelta(0):
            durations.append(delta)

    if durations:
        metrics.avg_resolution_time = sum(durations, timedelta(0)) / len(durations)

    return metrics


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def humanize_duration(delta: timedelta) -> str:
    """
    Render a duration as whole minutes, hours or days ("45m", "3h", "2d").

    Each unit is rounded from the previous rounded unit, so 89 minutes
    reads as "1h" and 36 hours as "2d".
    """
    minutes = _round_half_up(delta.total_seconds() / 60)
    if minutes < 60:
        return f"{minutes}m"
    hours = _round_half_up(minutes / 60)
    if hours < 24:
        return f"{hours}h"
    days = _round_half_up(hours / 24)
    return f"{days}d"
