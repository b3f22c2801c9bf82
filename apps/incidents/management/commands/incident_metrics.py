"""
Management command to show incident metrics.

Usage:
    python manage.py incident_metrics
    python manage.py incident_metrics --json
"""

import json

from django.core.management.base import BaseCommand

from apps.incidents.services import IncidentService


class Command(BaseCommand):
    help = "Show total/open/resolved counts and average resolution time"

    def add_arguments(self, parser):
        parser.add_argument(
            "--json",
            action="store_true",
            help="Output as JSON",
        )

    def handle(self, *args, **options):
        metrics = IncidentService().metrics().to_dict()

        if options["json"]:
            self.stdout.write(json.dumps(metrics, indent=2))
            return

        self.stdout.write(f"Total:          {metrics['total']}")
        self.stdout.write(f"Open:           {metrics['open']}")
        self.stdout.write(f"Resolved:       {metrics['resolved']}")
        self.stdout.write(f"Avg resolution: {metrics['avg_resolution_display'] or 'n/a'}")
