"""
Prompt assembly and output cleanup for AI artifacts.

Both functions are pure: ``build_prompt`` renders the artifact prompt
template for an incident and mode, ``clean_ai_text`` normalises raw model
output into the plain-text form that is stored.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

import jinja2

from apps.incidents.dtos import ArtifactMode, Incident, Severity, format_timestamp

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).parent / "templates" / "incidents"
PROMPT_TEMPLATE = "artifact_prompt.txt.j2"

# Number of most recent notes included in the prompt.
PROMPT_CONTEXT_NOTES = 18

_JINJA_ENV = jinja2.Environment(
    loader=jinja2.FileSystemLoader(str(TEMPLATES_DIR)),
    autoescape=False,
    undefined=jinja2.StrictUndefined,
)

SEVERITY_GUIDANCE: dict[Severity, str] = {
    Severity.HIGH: "\n".join(
        [
            "Severity guidance (HIGH): treat as service-impacting / urgent.",
            "Prioritise immediate containment and stabilisation over deep root-cause.",
            "Include escalation/communications where appropriate "
            "(on-call, incident commander, stakeholder comms).",
            "Prefer safe, reversible changes. Suggest temporary mitigations first.",
            "Ask for the single most critical missing signal if needed "
            "(exact error, logs, time window).",
        ]
    ),
    Severity.MEDIUM: "\n".join(
        [
            "Severity guidance (MEDIUM): impact likely limited, but still time-sensitive.",
            "Balance mitigation with diagnosis. Suggest quick checks first, then deeper analysis.",
            "Ask 1–2 clarifying questions that unlock the next action.",
        ]
    ),
    Severity.LOW: "\n".join(
        [
            "Severity guidance (LOW): limited impact / lower urgency.",
            "Focus on diagnosis, reproducibility, and preventative fixes.",
            "Ask clarifying questions and propose low-risk experiments.",
        ]
    ),
}

MODE_INSTRUCTIONS: dict[ArtifactMode, str] = {
    ArtifactMode.SUMMARY: (
        "Write a clear technical summary in plain text. Acknowledge relevant actions already "
        "attempted if mentioned in the notes. Avoid 'we'. Keep it factual and concise."
    ),
    ArtifactMode.NEXT_STEPS: (
        "Give the user clear next steps. Use numbered steps (1, 2, 3...). Address the user as "
        "'you'. Do not say 'we'. Add one short reason after each step.\n\n"
        "IMPORTANT:\n"
        "- Explicitly acknowledge what the user has already tried based on the notes.\n"
        "- Do NOT repeat steps the user has already attempted.\n"
        "- Build on previous attempts.\n"
        "- After the steps, ask 1–3 short clarifying questions to refine the next actions.\n"
        "- Keep explanations brief (one short sentence per step)."
    ),
    ArtifactMode.STAKEHOLDER_UPDATE: (
        "Write a calm update for non-technical stakeholders in plain text. Acknowledge "
        "mitigation attempts already made if relevant. Avoid 'we'. Keep it short and "
        "reassuring. Ensure everything, including 'Next Steps' in the response, are kept "
        "between 'Dear Stakeholder' and 'Yours Sincerely,'."
    ),
}


def severity_guidance(severity: str) -> str:
    """Guidance block for a severity; unrecognised values get the Low tier."""
    tier = Severity.parse(severity) or Severity.LOW
    return SEVERITY_GUIDANCE[tier]


def format_notes(incident: Incident) -> str:
    notes = incident.context_notes[-PROMPT_CONTEXT_NOTES:]
    return "\n".join(f"- ({format_timestamp(note.created_at)}) {note.text}" for note in notes)


def build_prompt(incident: Incident, mode: ArtifactMode) -> str:
    """
    Build the generation prompt for an incident.

    Args:
        incident: Incident to describe.
        mode: Kind of artifact requested.

    Returns:
        The rendered prompt, trimmed.
    """
    template = _JINJA_ENV.get_template(PROMPT_TEMPLATE)
    rendered = template.render(
        title=incident.title,
        description=incident.description,
        severity=incident.severity,
        status=incident.status,
        notes=format_notes(incident),
        severity_guidance=severity_guidance(incident.severity),
        instruction=MODE_INSTRUCTIONS[mode],
    )
    logger.debug("build_prompt: incident=%s mode=%s len=%d", incident.id, mode.value, len(rendered))
    return rendered.strip()


_EMPHASIS_RE = re.compile(r"\*+")
_BULLET_RE = re.compile(r"^\s*[-•]\s+", re.MULTILINE)
_NEWLINES_RE = re.compile(r"\n+")


def clean_ai_text(text: str | None) -> str:
    """
    Strip markdown emphasis and bullet markers from model output.

    Every run of newlines becomes a single blank line so paragraphs are
    evenly spaced.
    """
    cleaned = _EMPHASIS_RE.sub("", str(text or ""))
    cleaned = _BULLET_RE.sub("", cleaned)
    cleaned = _NEWLINES_RE.sub("\n\n", cleaned)
    return cleaned.strip()
