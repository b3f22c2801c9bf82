"""Custom admin site for the incident tracker."""

import logging

from django.contrib.admin import AdminSite

logger = logging.getLogger(__name__)


class IncidentAdminSite(AdminSite):
    site_header = "Incident Tracker"
    site_title = "Incident Tracker"
    index_title = "Dashboard"
    index_template = "admin/dashboard.html"

    def index(self, request, extra_context=None):
        extra_context = extra_context or {}
        extra_context.update(self._get_dashboard_context())
        return super().index(request, extra_context=extra_context)

    def _get_dashboard_context(self):
        from apps.incidents.exceptions import StorageError
        from apps.incidents.services import IncidentService

        try:
            service = IncidentService()
            metrics = service.metrics()
            open_incidents = service.list_incidents(bucket="open")
        except StorageError:
            logger.warning("Incident store unavailable for admin dashboard", exc_info=True)
            return {"incident_metrics": None, "open_incidents": []}

        return {
            "incident_metrics": metrics.to_dict(),
            "open_incidents": open_incidents[:10],
        }
