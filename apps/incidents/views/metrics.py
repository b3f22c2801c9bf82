"""Metrics endpoint for incidents."""

from apps.incidents.views._mixins import IncidentAPIView


class MetricsView(IncidentAPIView):
    """
    GET /incidents/metrics/
        Total/open/resolved counts and average resolution time.
    """

    def get(self, request):
        return self.json_response(self.get_service().metrics().to_dict())
