"""
Incident records and the value types they are built from.

An incident is persisted as a plain dict inside the stored collection; these
dataclasses are the typed view the service layer works with. ``to_dict`` and
``from_dict`` are the only places that know the stored layout.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any

from django.utils.dateparse import parse_datetime

# Number of most recent notes mirrored into the legacy additional_context field.
LEGACY_CONTEXT_NOTES = 16


class IncidentStatus(Enum):
    """Lifecycle states of an incident."""

    OPEN = "Open"
    INVESTIGATING = "Investigating"
    RESOLVED = "Resolved"

    @classmethod
    def parse(cls, value: Any) -> IncidentStatus | None:
        """Match a status name exactly ("resolved" is not Resolved); None when unknown."""
        for member in cls:
            if member.value == value:
                return member
        return None


class Severity(Enum):
    """Severity tiers, stored in capitalized form."""

    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"

    @classmethod
    def parse(cls, value: Any) -> Severity | None:
        text = capitalize(value)
        for member in cls:
            if member.value == text:
                return member
        return None


class ArtifactMode(Enum):
    """Kinds of AI artifact that can be generated for an incident."""

    SUMMARY = "summary"
    NEXT_STEPS = "next_steps"
    STAKEHOLDER_UPDATE = "stakeholder_update"

    @property
    def title(self) -> str:
        return ARTIFACT_TITLES[self]

    @classmethod
    def parse(cls, value: Any) -> ArtifactMode | None:
        try:
            return cls(value)
        except ValueError:
            return None


ARTIFACT_TITLES: dict[ArtifactMode, str] = {
    ArtifactMode.SUMMARY: "Summary",
    ArtifactMode.NEXT_STEPS: "Next Steps",
    ArtifactMode.STAKEHOLDER_UPDATE: "Stakeholder Update",
}


def capitalize(value: Any) -> str:
    """Upper-case the first character and lower-case the rest ("hIGH" -> "High")."""
    text = str(value or "").strip()
    if not text:
        return ""
    return text[0].upper() + text[1:].lower()


def format_timestamp(value: datetime | None) -> str | None:
    if value is None:
        return None
    return value.isoformat()


def parse_timestamp(value: Any) -> datetime | None:
    if not value:
        return None
    if isinstance(value, datetime):
        return value
    return parse_datetime(str(value))


@dataclass
class ContextNote:
    """A timestamped free-text note documenting investigation progress."""

    text: str
    created_at: datetime

    def to_dict(self) -> dict[str, Any]:
        return {"text": self.text, "created_at": format_timestamp(self.created_at)}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ContextNote:
        return cls(text=data.get("text", ""), created_at=parse_timestamp(data.get("created_at")))


@dataclass
class TimelineEntry:
    """One audit-trail entry describing a mutation of an incident."""

    icon: str
    title: str
    body: str
    created_at: datetime

    def to_dict(self) -> dict[str, Any]:
        return {
            "icon": self.icon,
            "title": self.title,
            "body": self.body,
            "created_at": format_timestamp(self.created_at),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> TimelineEntry:
        return cls(
            icon=data.get("icon", ""),
            title=data.get("title", ""),
            body=data.get("body", ""),
            created_at=parse_timestamp(data.get("created_at")),
        )


@dataclass
class AIArtifact:
    """Stored output of the text-generation provider."""

    type: str
    title: str
    text: str
    created_at: datetime

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.type,
            "title": self.title,
            "text": self.text,
            "created_at": format_timestamp(self.created_at),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> AIArtifact:
        return cls(
            type=data.get("type", ""),
            title=data.get("title", ""),
            text=data.get("text", ""),
            created_at=parse_timestamp(data.get("created_at")),
        )


@dataclass
class Incident:
    """
    The tracked unit of operational work.

    ``context_notes``, ``timeline`` and ``ai_output`` only ever grow.
    ``resolved_at`` is set while the incident sits in Resolved and cleared
    as soon as it leaves that state.
    """

    id: str
    title: str
    description: str
    severity: str
    status: str
    created_at: datetime
    updated_at: datetime
    resolved_at: datetime | None = None
    context_notes: list[ContextNote] = field(default_factory=list)
    timeline: list[TimelineEntry] = field(default_factory=list)
    ai_output: list[AIArtifact] = field(default_factory=list)

    @property
    def is_resolved(self) -> bool:
        return self.status == IncidentStatus.RESOLVED.value

    @property
    def additional_context(self) -> str:
        """Legacy flat summary of the most recent notes, kept for older consumers."""
        return "\n".join(
            f"({format_timestamp(note.created_at)}) {note.text}"
            for note in self.context_notes[-LEGACY_CONTEXT_NOTES:]
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "severity": self.severity,
            "status": self.status,
            "created_at": format_timestamp(self.created_at),
            "updated_at": format_timestamp(self.updated_at),
            "resolved_at": format_timestamp(self.resolved_at),
            "additional_context": self.additional_context,
            "context_notes": [note.to_dict() for note in self.context_notes],
            "timeline": [entry.to_dict() for entry in self.timeline],
            "ai_output": [artifact.to_dict() for artifact in self.ai_output],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Incident:
        # Records written by older clients may lack any of the list fields.
        created_at = parse_timestamp(data.get("created_at"))
        return cls(
            id=str(data["id"]),
            title=data.get("title", ""),
            description=data.get("description", ""),
            severity=data.get("severity", ""),
            status=data.get("status", IncidentStatus.OPEN.value),
            created_at=created_at,
            updated_at=parse_timestamp(data.get("updated_at")) or created_at,
            resolved_at=parse_timestamp(data.get("resolved_at")),
            context_notes=[ContextNote.from_dict(n) for n in data.get("context_notes") or []],
            timeline=[TimelineEntry.from_dict(t) for t in data.get("timeline") or []],
            ai_output=[AIArtifact.from_dict(a) for a in data.get("ai_output") or []],
        )
