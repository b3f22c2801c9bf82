"""Shared mixins for incident views."""

import json
import logging
from typing import Any

from django.http import JsonResponse
from django.utils.decorators import method_decorator
from django.views import View
from django.views.decorators.csrf import csrf_exempt

from apps.incidents.exceptions import IncidentError, ValidationError
from apps.incidents.services import IncidentService

logger = logging.getLogger(__name__)


class JSONResponseMixin:
    """Mixin for JSON responses."""

    def json_response(self, data: Any, status: int = 200, safe: bool = True) -> JsonResponse:
        return JsonResponse(data, status=status, safe=safe, json_dumps_params={"ensure_ascii": False})

    def error_response(self, message: str, status: int = 400) -> JsonResponse:
        return JsonResponse({"error": message}, status=status)

    def parse_json_body(self, request) -> dict[str, Any]:
        """Decode a JSON object body; an empty body is an empty object."""
        if not request.body:
            return {}
        try:
            body = json.loads(request.body)
        except json.JSONDecodeError as e:
            raise ValidationError(f"Invalid JSON body: {e}") from e
        if not isinstance(body, dict):
            raise ValidationError("JSON body must be an object")
        return body


@method_decorator(csrf_exempt, name="dispatch")
class IncidentAPIView(JSONResponseMixin, View):
    """
    Base view for the incident API.

    Translates IncidentError subclasses into JSON error responses with
    their status code; anything else is logged and answered with a 500.
    """

    def get_service(self) -> IncidentService:
        return IncidentService()

    def dispatch(self, request, *args, **kwargs):
        try:
            return super().dispatch(request, *args, **kwargs)
        except IncidentError as e:
            logger.info(
                "%s %s rejected (%s): %s",
                request.method,
                request.path,
                e.status_code,
                e.message,
            )
            return self.error_response(e.message, status=e.status_code)
        except Exception:
            logger.exception("Unexpected error handling %s %s", request.method, request.path)
            return self.error_response("Internal error", status=500)
