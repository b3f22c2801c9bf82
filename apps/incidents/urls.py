"""
URL configuration for the incidents app.
"""

from django.urls import path

from apps.incidents.views import (
    ArtifactView,
    ContextNoteView,
    IncidentDetailView,
    IncidentListView,
    IncidentReopenView,
    IncidentStatusView,
    MetricsView,
)

app_name = "incidents"

urlpatterns = [
    path("", IncidentListView.as_view(), name="list"),
    # Registered before the detail route so "metrics" is never read as an id
    path("metrics/", MetricsView.as_view(), name="metrics"),
    path("<str:incident_id>/", IncidentDetailView.as_view(), name="detail"),
    path("<str:incident_id>/status/", IncidentStatusView.as_view(), name="status"),
    path("<str:incident_id>/reopen/", IncidentReopenView.as_view(), name="reopen"),
    path("<str:incident_id>/notes/", ContextNoteView.as_view(), name="notes"),
    path("<str:incident_id>/artifacts/", ArtifactView.as_view(), name="artifacts"),
]
