"""
Management command to generate an AI artifact for an incident.

Usage:
    python manage.py generate_artifact INC-1 summary
    python manage.py generate_artifact INC-1 next_steps --provider=claude
    python manage.py generate_artifact INC-1 stakeholder_update --json
"""

import json

from django.core.management.base import BaseCommand, CommandError

from apps.incidents.dtos import ArtifactMode
from apps.incidents.exceptions import IncidentError
from apps.incidents.services import IncidentService
from apps.intelligence.providers import get_provider, list_providers


class Command(BaseCommand):
    help = "Generate a summary, next steps or stakeholder update for an incident"

    def add_arguments(self, parser):
        parser.add_argument("incident_id", type=str, help="Incident ID")
        parser.add_argument(
            "mode",
            type=str,
            choices=[m.value for m in ArtifactMode],
            help="Kind of artifact to generate",
        )
        parser.add_argument(
            "--provider",
            type=str,
            default=None,
            help=f"Provider to use instead of the active one ({', '.join(list_providers())})",
        )
        parser.add_argument(
            "--json",
            action="store_true",
            help="Output as JSON",
        )

    def handle(self, *args, **options):
        provider = None
        if options["provider"]:
            try:
                provider = get_provider(options["provider"])
            except KeyError as e:
                raise CommandError(str(e)) from e

        service = IncidentService(provider=provider)
        try:
            artifact = service.generate_artifact(options["incident_id"], options["mode"])
        except IncidentError as e:
            raise CommandError(e.message) from e

        if options["json"]:
            self.stdout.write(json.dumps(artifact.to_dict(), indent=2, ensure_ascii=False))
            return

        self.stdout.write(self.style.SUCCESS(f"{artifact.title} for {options['incident_id']}"))
        self.stdout.write("")
        self.stdout.write(artifact.text)
