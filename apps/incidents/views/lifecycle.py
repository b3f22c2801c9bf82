"""Lifecycle endpoints: status changes, context notes and AI artifacts."""

from apps.incidents.views._mixins import IncidentAPIView


class IncidentStatusView(IncidentAPIView):
    """
    POST /incidents/<id>/status/
        Body: {"status": "Open" | "Investigating" | "Resolved"}
    """

    def post(self, request, incident_id):
        body = self.parse_json_body(request)
        incident = self.get_service().change_status(incident_id, body.get("status"))
        return self.json_response({"ok": True, "incident": incident.to_dict()})


class IncidentReopenView(IncidentAPIView):
    """
    POST /incidents/<id>/reopen/
        Moves a resolved incident back to Investigating.
    """

    def post(self, request, incident_id):
        incident = self.get_service().reopen(incident_id)
        return self.json_response({"ok": True, "incident": incident.to_dict()})


class ContextNoteView(IncidentAPIView):
    """
    POST /incidents/<id>/notes/
        Body: {"text": "..."}
    """

    def post(self, request, incident_id):
        body = self.parse_json_body(request)
        incident = self.get_service().append_note(incident_id, body.get("text"))
        return self.json_response(
            {"ok": True, "note": incident.context_notes[-1].to_dict()},
            status=201,
        )


class ArtifactView(IncidentAPIView):
    """
    POST /incidents/<id>/artifacts/
        Body: {"mode": "summary" | "next_steps" | "stakeholder_update"}

    Returns 502 when the text-generation provider fails.
    """

    def post(self, request, incident_id):
        body = self.parse_json_body(request)
        artifact = self.get_service().generate_artifact(incident_id, body.get("mode"))
        return self.json_response({"ok": True, "artifact": artifact.to_dict()}, status=201)
