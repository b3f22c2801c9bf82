"""
Django database storage backend.

Persists each value as a ``StoredValue`` row. Inside ``atomic()`` reads lock
the row, which gives the single-writer guarantee on backends that support
row locks.
"""

import logging
from contextlib import contextmanager
from typing import Any, Iterator

from django.db import DatabaseError, transaction

from apps.incidents.exceptions import StorageError
from apps.incidents.storage.base import BaseStore

logger = logging.getLogger(__name__)


class DatabaseStore(BaseStore):
    """Store backed by the ``StoredValue`` model."""

    name = "database"
    description = "Django ORM key/value store"

    def __init__(self, using: str = "default") -> None:
        self.using = using

    def get(self, key: str) -> Any | None:
        from apps.incidents.models import StoredValue

        queryset = StoredValue.objects.using(self.using).filter(key=key)
        if transaction.get_connection(self.using).in_atomic_block:
            queryset = queryset.select_for_update()
        try:
            row = queryset.first()
        except DatabaseError as e:
            logger.error("Failed to read key=%s: %s", key, e)
            raise StorageError(f"Could not read '{key}' from storage") from e
        return row.value if row is not None else None

    def put(self, key: str, value: Any) -> None:
        from apps.incidents.models import StoredValue

        try:
            StoredValue.objects.using(self.using).update_or_create(
                key=key, defaults={"value": value}
            )
        except DatabaseError as e:
            logger.error("Failed to write key=%s: %s", key, e)
            raise StorageError(f"Could not write '{key}' to storage") from e

    @contextmanager
    def atomic(self) -> Iterator[None]:
        with transaction.atomic(using=self.using):
            yield
