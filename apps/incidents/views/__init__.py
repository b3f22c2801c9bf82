"""
Incident app views.

Thin JSON endpoints over IncidentService, organized by functionality.
"""

from apps.incidents.views.incidents import IncidentDetailView, IncidentListView
from apps.incidents.views.lifecycle import (
    ArtifactView,
    ContextNoteView,
    IncidentReopenView,
    IncidentStatusView,
)
from apps.incidents.views.metrics import MetricsView

__all__ = [
    "ArtifactView",
    "ContextNoteView",
    "IncidentDetailView",
    "IncidentListView",
    "IncidentReopenView",
    "IncidentStatusView",
    "MetricsView",
]
