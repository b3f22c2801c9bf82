"""
Management command to list incidents.

Usage:
    python manage.py list_incidents
    python manage.py list_incidents --bucket=open
    python manage.py list_incidents --q=database --json
"""

import json

from django.core.management.base import BaseCommand, CommandError

from apps.incidents.exceptions import IncidentError
from apps.incidents.services import LIST_BUCKETS, IncidentService


class Command(BaseCommand):
    help = "List tracked incidents"

    def add_arguments(self, parser):
        parser.add_argument(
            "--q",
            type=str,
            default="",
            help="Only incidents whose title contains this text",
        )
        parser.add_argument(
            "--bucket",
            type=str,
            choices=LIST_BUCKETS,
            default="all",
            help="all, open (not resolved) or resolved (default: all)",
        )
        parser.add_argument(
            "--json",
            action="store_true",
            help="Output as JSON",
        )

    def handle(self, *args, **options):
        try:
            incidents = IncidentService().list_incidents(
                query=options["q"], bucket=options["bucket"]
            )
        except IncidentError as e:
            raise CommandError(e.message) from e

        if options["json"]:
            self.stdout.write(
                json.dumps([i.to_dict() for i in incidents], indent=2, ensure_ascii=False)
            )
            return

        if not incidents:
            self.stdout.write("No incidents found.")
            return

        self.stdout.write(self.style.SUCCESS(f"{len(incidents)} incident(s)"))
        self.stdout.write("-" * 60)
        for incident in incidents:
            self.stdout.write(
                f"{incident.id:<16} [{incident.status:<13}] ({incident.severity}) {incident.title}"
            )
