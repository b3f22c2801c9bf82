"""Collection and item endpoints for incidents."""

from django.utils.dateparse import parse_date, parse_datetime

from apps.incidents.exceptions import ValidationError
from apps.incidents.views._mixins import IncidentAPIView


def _parse_bound(value: str | None, name: str):
    if not value:
        return None
    # Bare dates must stay dates so "until" covers the whole day
    try:
        parsed = parse_date(value) or parse_datetime(value)
    except ValueError as e:
        raise ValidationError(f"Invalid '{name}' date: {value}") from e
    if parsed is None:
        raise ValidationError(f"Invalid '{name}' date: {value}")
    return parsed


class IncidentListView(IncidentAPIView):
    """
    List or create incidents.

    GET /incidents/?q=<title>&from=<date>&until=<date>&bucket=all|open|resolved
        Returns incidents in creation order.

    POST /incidents/
        Creates an incident from {id, title, description, severity}.
    """

    def get(self, request):
        incidents = self.get_service().list_incidents(
            query=request.GET.get("q"),
            created_from=_parse_bound(request.GET.get("from"), "from"),
            created_until=_parse_bound(request.GET.get("until"), "until"),
            bucket=request.GET.get("bucket", "all"),
        )
        return self.json_response(
            {
                "incidents": [incident.to_dict() for incident in incidents],
                "count": len(incidents),
            }
        )

    def post(self, request):
        body = self.parse_json_body(request)
        incident = self.get_service().create(
            incident_id=body.get("id"),
            title=body.get("title"),
            description=body.get("description"),
            severity=body.get("severity"),
        )
        return self.json_response({"ok": True, "incident": incident.to_dict()}, status=201)


class IncidentDetailView(IncidentAPIView):
    """
    Read or delete a single incident.

    GET /incidents/<id>/
    DELETE /incidents/<id>/
        Idempotent: deleting an unknown id still succeeds.
    """

    def get(self, request, incident_id):
        incident = self.get_service().get(incident_id)
        return self.json_response({"incident": incident.to_dict()})

    def delete(self, request, incident_id):
        removed = self.get_service().delete(incident_id)
        return self.json_response({"ok": True, "removed": removed})
