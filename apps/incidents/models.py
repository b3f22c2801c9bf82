"""
Incident storage model.

The incident collection is persisted as a single JSON value under a fixed
key, so the only table this app needs is a small key/value store.
"""

from django.db import models


class StoredValue(models.Model):
    """A whole JSON value stored under a unique key."""

    key = models.CharField(
        max_length=255,
        unique=True,
        help_text="Storage key (e.g., 'incidents').",
    )
    value = models.JSONField(
        default=list,
        blank=True,
        help_text="The complete stored value.",
    )
    updated_at = models.DateTimeField(
        auto_now=True,
    )

    class Meta:
        ordering = ["key"]

    def __str__(self):
        return self.key

    @property
    def item_count(self) -> int:
        if isinstance(self.value, (list, dict)):
            return len(self.value)
        return 0
