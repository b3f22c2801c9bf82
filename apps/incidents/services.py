"""
Incident lifecycle services.

This module contains the business logic for creating incidents, moving them
through their lifecycle, recording context notes and attaching AI artifacts.

Every mutating operation is one read-modify-write against the repository:
load the collection, change a single incident, append exactly one timeline
entry, save the collection. A failed operation never saves.
"""

from __future__ import annotations

import logging
from datetime import date, datetime, time
from typing import Any, Callable

from django.conf import settings
from django.utils import timezone

from apps.incidents.dtos import (
    AIArtifact,
    ArtifactMode,
    ContextNote,
    Incident,
    IncidentStatus,
    Severity,
    TimelineEntry,
    format_timestamp,
)
from apps.incidents.exceptions import (
    ConflictError,
    GenerationError,
    NotFoundError,
    ValidationError,
)
from apps.incidents.metrics import IncidentMetrics, compute_metrics
from apps.incidents.prompts import build_prompt, clean_ai_text
from apps.incidents.repository import IncidentCollection, IncidentRepository

logger = logging.getLogger(__name__)

DEFAULT_AI_MAX_TOKENS = 360

CREATED_ICON = "🆕"
NOTE_ICON = "📝"
ARTIFACT_ICON = "🤖"

STATUS_ICONS: dict[IncidentStatus, str] = {
    IncidentStatus.RESOLVED: "✅",
    IncidentStatus.INVESTIGATING: "🔄",
    IncidentStatus.OPEN: "♻️",
}

LIST_BUCKETS = ("all", "open", "resolved")

# Ids that would collide with collection-level routes under /incidents/.
RESERVED_IDS = frozenset({"metrics"})


def _clean(value: Any) -> str:
    return str(value if value is not None else "").strip()


def _as_bound(value: date | datetime | None, end_of_day: bool) -> datetime | None:
    """Turn a filter bound into an aware datetime; bare dates cover the whole day."""
    if value is None:
        return None
    if not isinstance(value, datetime):
        value = datetime.combine(value, time.max if end_of_day else time.min)
    if timezone.is_naive(value):
        value = timezone.make_aware(value)
    return value


class IncidentService:
    """
    Operations on the incident collection.

    Usage:
        service = IncidentService()
        service.create("INC-1", "DB down", "writes failing", "high")
        service.change_status("INC-1", "Resolved")
    """

    def __init__(
        self,
        repository: IncidentRepository | None = None,
        provider: Any | None = None,
        clock: Callable[[], datetime] | None = None,
        strict_status: bool | None = None,
        max_tokens: int | None = None,
    ):
        """
        Args:
            repository: Incident repository. Defaults to one over the configured store.
            provider: Text-generation provider. Resolved lazily when None.
            clock: Source of the current time. Defaults to django.utils.timezone.now.
            strict_status: Reject unknown statuses instead of coercing them to Open.
                Defaults to settings.INCIDENTS_STRICT_STATUS.
            max_tokens: Generation budget. Defaults to settings.INCIDENTS_AI_MAX_TOKENS.
        """
        self.repository = repository if repository is not None else IncidentRepository()
        self._provider = provider
        self.clock = clock or timezone.now
        if strict_status is None:
            strict_status = getattr(settings, "INCIDENTS_STRICT_STATUS", False)
        self.strict_status = strict_status
        self.max_tokens = max_tokens or getattr(
            settings, "INCIDENTS_AI_MAX_TOKENS", DEFAULT_AI_MAX_TOKENS
        )

    @property
    def provider(self):
        if self._provider is None:
            from apps.intelligence.providers import get_active_provider

            self._provider = get_active_provider()
        return self._provider

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def list_incidents(
        self,
        query: str | None = None,
        created_from: date | datetime | None = None,
        created_until: date | datetime | None = None,
        bucket: str = "all",
    ) -> list[Incident]:
        """
        List incidents in collection order, optionally filtered.

        Args:
            query: Case-insensitive substring matched against the title.
            created_from: Inclusive lower bound on created_at.
            created_until: Inclusive upper bound on created_at. A bare date
                includes the whole day.
            bucket: "all", "open" (anything not Resolved) or "resolved".
        """
        bucket = (bucket or "all").lower()
        if bucket not in LIST_BUCKETS:
            raise ValidationError(f"Unknown bucket: {bucket}. Expected one of {LIST_BUCKETS}")

        needle = _clean(query).lower()
        lower = _as_bound(created_from, end_of_day=False)
        upper = _as_bound(created_until, end_of_day=True)

        results = []
        for incident in self.repository.get_all():
            if needle and needle not in (incident.title or "").lower():
                continue
            if lower is not None and (incident.created_at is None or incident.created_at < lower):
                continue
            if upper is not None and (incident.created_at is None or incident.created_at > upper):
                continue
            if bucket == "open" and incident.is_resolved:
                continue
            if bucket == "resolved" and not incident.is_resolved:
                continue
            results.append(incident)
        return results

    def get(self, incident_id: str) -> Incident:
        incident = self.repository.find_by_id(_clean(incident_id))
        if incident is None:
            raise NotFoundError(_clean(incident_id))
        return incident

    def metrics(self) -> IncidentMetrics:
        return compute_metrics(self.repository.get_all())

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def create(self, incident_id: str, title: str, description: str, severity: str) -> Incident:
        """
        Create a new Open incident.

        Raises:
            ValidationError: A field is empty, the id is reserved or contains "/",
                or the severity is unknown.
            ConflictError: An incident with this id already exists.
        """
        fields = {
            "id": _clean(incident_id),
            "title": _clean(title),
            "description": _clean(description),
            "severity": _clean(severity),
        }
        missing = [name for name, value in fields.items() if not value]
        if missing:
            raise ValidationError(f"Missing fields ({'/'.join(missing)})")
        if "/" in fields["id"] or fields["id"] in RESERVED_IDS:
            raise ValidationError(f"Invalid incident id: {fields['id']}")

        parsed_severity = Severity.parse(fields["severity"])
        if parsed_severity is None:
            raise ValidationError(
                f"Unknown severity: {fields['severity']}. "
                f"Expected one of {[s.value for s in Severity]}"
            )

        with self.repository.atomic():
            collection = self.repository.load()
            if fields["id"] in collection:
                raise ConflictError(fields["id"])

            now = self.clock()
            incident = Incident(
                id=fields["id"],
                title=fields["title"],
                description=fields["description"],
                severity=parsed_severity.value,
                status=IncidentStatus.OPEN.value,
                created_at=now,
                updated_at=now,
                resolved_at=None,
                timeline=[
                    TimelineEntry(
                        icon=CREATED_ICON,
                        title="Incident Created",
                        body=fields["title"],
                        created_at=now,
                    )
                ],
            )
            collection.append(incident)
            self.repository.save(collection)

        logger.info("Created incident %s (%s)", incident.id, incident.severity)
        return incident

    def change_status(self, incident_id: str, status: str) -> Incident:
        """
        Move an incident to another status.

        Unknown statuses become Open unless strict_status is set. Entering
        Resolved stamps resolved_at (if unset); any other status clears it.

        Raises:
            NotFoundError: No incident has this id.
            ValidationError: Unknown status while strict_status is set.
        """
        requested = IncidentStatus.parse(status)
        if requested is None:
            if self.strict_status:
                raise ValidationError(
                    f"Unknown status: {status}. Expected one of {[s.value for s in IncidentStatus]}"
                )
            logger.warning("Unknown status %r for incident %s, using Open", status, incident_id)
            requested = IncidentStatus.OPEN

        with self.repository.atomic():
            collection = self.repository.load()
            incident = self._require(collection, incident_id)
            previous = incident.status

            now = self.clock()
            incident.status = requested.value
            incident.updated_at = now
            incident.timeline.append(
                TimelineEntry(
                    icon=STATUS_ICONS[requested],
                    title="Status Changed",
                    body=f"→ {requested.value}",
                    created_at=now,
                )
            )
            if requested is IncidentStatus.RESOLVED:
                if incident.resolved_at is None:
                    incident.resolved_at = now
            else:
                incident.resolved_at = None

            self.repository.save(collection)

        logger.info("Incident %s status %s -> %s", incident.id, previous, incident.status)
        return incident

    def reopen(self, incident_id: str) -> Incident:
        """Reopen an incident by moving it back to Investigating."""
        return self.change_status(incident_id, IncidentStatus.INVESTIGATING.value)

    def append_note(self, incident_id: str, text: str) -> Incident:
        """
        Append a context note to an incident.

        Raises:
            NotFoundError: No incident has this id.
            ValidationError: The note text is blank.
        """
        with self.repository.atomic():
            collection = self.repository.load()
            incident = self._require(collection, incident_id)

            body = _clean(text)
            if not body:
                raise ValidationError("Missing text")

            now = self.clock()
            incident.context_notes.append(ContextNote(text=body, created_at=now))
            incident.timeline.append(
                TimelineEntry(icon=NOTE_ICON, title="Context Note Added", body=body, created_at=now)
            )
            incident.updated_at = now
            self.repository.save(collection)

        logger.info(
            "Added context note to incident %s (%d notes)", incident.id, len(incident.context_notes)
        )
        return incident

    def delete(self, incident_id: str) -> bool:
        """
        Delete an incident. Deleting an unknown id is not an error.

        Returns:
            Whether an incident was removed.
        """
        key = _clean(incident_id)
        with self.repository.atomic():
            collection = self.repository.load()
            removed = collection.remove(key)
            if removed:
                self.repository.save(collection)

        if removed:
            logger.info("Deleted incident %s", key)
        else:
            logger.debug("Delete of unknown incident %s ignored", key)
        return removed

    def generate_artifact(self, incident_id: str, mode: str) -> AIArtifact:
        """
        Generate an AI artifact for an incident and append it.

        The provider is called before anything is written, so a generation
        failure leaves the incident untouched.

        Raises:
            NotFoundError: No incident has this id.
            ValidationError: Unknown mode.
            GenerationError: The provider failed or produced no usable text.
        """
        snapshot = self.get(incident_id)

        artifact_mode = ArtifactMode.parse(mode)
        if artifact_mode is None:
            raise ValidationError(
                f"Unknown mode: {mode}. Expected one of {[m.value for m in ArtifactMode]}"
            )

        prompt = build_prompt(snapshot, artifact_mode)
        provider = self.provider
        provider_name = getattr(provider, "name", "unknown")
        try:
            raw = provider.generate(prompt, max_tokens=self.max_tokens)
        except Exception as e:
            logger.error(
                "Generation failed for incident %s mode=%s provider=%s: %s",
                snapshot.id,
                artifact_mode.value,
                provider_name,
                e,
            )
            raise GenerationError(f"Text generation failed: {e}", provider=provider_name) from e

        clean = clean_ai_text(raw)
        if not clean:
            raise GenerationError("Text generation returned no usable output", provider=provider_name)

        with self.repository.atomic():
            collection = self.repository.load()
            incident = self._require(collection, snapshot.id)

            now = self.clock()
            artifact = AIArtifact(
                type=artifact_mode.value,
                title=artifact_mode.title,
                text=f"Update time: {format_timestamp(now)}\n\n{clean}",
                created_at=now,
            )
            incident.ai_output.append(artifact)
            incident.timeline.append(
                TimelineEntry(
                    icon=ARTIFACT_ICON,
                    title=f"AI: {artifact_mode.title} Generated",
                    body=f"Action: {artifact_mode.value}",
                    created_at=now,
                )
            )
            incident.updated_at = now
            self.repository.save(collection)

        logger.info(
            "Generated %s for incident %s via %s", artifact_mode.value, incident.id, provider_name
        )
        return artifact

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _require(collection: IncidentCollection, incident_id: str) -> Incident:
        incident = collection.find_by_id(_clean(incident_id))
        if incident is None:
            raise NotFoundError(_clean(incident_id))
        return incident
