"""
Local text-generation provider.

Produces deterministic plain text from the prompt itself, without calling
any model. Useful for development, demos and tests where no API key is
configured.
"""

import re

from apps.intelligence.providers.base import BaseProvider

_FIELD_RE = re.compile(r"^(Incident|Description|Severity|Status):\s*(.*)$", re.MULTILINE)
_NOTE_RE = re.compile(r"^- \((?P<stamp>[^)]*)\) (?P<text>.+)$", re.MULTILINE)


class LocalTextProvider(BaseProvider):
    """
    Offline provider that echoes the incident facts found in the prompt.

    The output respects the same plain-text conventions the prompt asks
    real models for, so it passes through the artifact cleanup unchanged.
    """

    name = "local"
    description = "Offline template-based text generation"
    default_max_tokens = 360

    def __init__(self, **kwargs) -> None:
        self.options = kwargs

    def _call_api(self, prompt: str, max_tokens: int) -> str:
        fields = {key: value.strip() for key, value in _FIELD_RE.findall(prompt)}
        notes = [match.group("text") for match in _NOTE_RE.finditer(prompt)]

        title = fields.get("Incident") or "Untitled incident"
        paragraphs = [
            f"{title} is a {fields.get('Severity', 'unknown').lower()} severity incident, "
            f"currently {fields.get('Status', 'unknown').lower()}.",
        ]
        if fields.get("Description"):
            paragraphs.append(f"Reported problem: {fields['Description']}")
        if notes:
            paragraphs.append(f"Latest context: {notes[-1]}")
            paragraphs.append(f"{len(notes)} context note(s) recorded so far.")
        else:
            paragraphs.append("No context notes have been recorded yet.")

        # Roughly four characters per token.
        return "\n\n".join(paragraphs)[: max_tokens * 4]
