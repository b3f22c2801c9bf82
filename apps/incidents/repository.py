"""
Incident repository.

Owns the single incident collection stored under one key. Every operation
that changes incidents does exactly one ``load`` and one ``save`` inside
``atomic()``; nothing else in the project reads or writes the store.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator

from apps.incidents.dtos import Incident
from apps.incidents.exceptions import StorageError
from apps.incidents.storage import BaseStore, get_store

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_KEY = "incidents"


class IncidentCollection:
    """
    Ordered incidents with an id index.

    Iteration order is insertion order; lookups by id go through the index.
    """

    def __init__(self, incidents: list[Incident] | None = None) -> None:
        self._items: list[Incident] = []
        self._index: dict[str, int] = {}
        for incident in incidents or []:
            self.append(incident)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Incident]:
        return iter(self._items)

    def __contains__(self, incident_id: object) -> bool:
        return incident_id in self._index

    def get_all(self) -> list[Incident]:
        return list(self._items)

    def find_by_id(self, incident_id: str) -> Incident | None:
        position = self._index.get(incident_id)
        if position is None:
            return None
        return self._items[position]

    def append(self, incident: Incident) -> None:
        self._index[incident.id] = len(self._items)
        self._items.append(incident)

    def remove(self, incident_id: str) -> bool:
        """Remove an incident if present. Returns whether anything was removed."""
        if incident_id not in self._index:
            return False
        self._items = [i for i in self._items if i.id != incident_id]
        self._index = {incident.id: pos for pos, incident in enumerate(self._items)}
        return True

    def to_list(self) -> list[dict]:
        return [incident.to_dict() for incident in self._items]


class IncidentRepository:
    """
    Storage primitives for the incident collection.

    The backing store only offers whole-value get/put, so the collection is
    always read and written in full. Callers that mutate must wrap their
    ``load``/``save`` pair in ``atomic()``.
    """

    def __init__(self, store: BaseStore | None = None, key: str | None = None) -> None:
        if key is None:
            from django.conf import settings

            key = getattr(settings, "INCIDENTS_STORAGE_KEY", DEFAULT_STORAGE_KEY)
        self.store = store if store is not None else get_store()
        self.key = key

    @contextmanager
    def atomic(self) -> Iterator[None]:
        with self.store.atomic():
            yield

    def load(self) -> IncidentCollection:
        raw = self.store.get(self.key)
        if raw is None:
            return IncidentCollection()
        if not isinstance(raw, list):
            raise StorageError(f"Stored value under '{self.key}' is not a list")
        try:
            return IncidentCollection([Incident.from_dict(item) for item in raw])
        except (KeyError, TypeError, AttributeError) as e:
            logger.error("Corrupt incident record under key=%s: %s", self.key, e)
            raise StorageError(f"Stored value under '{self.key}' is corrupt") from e

    def save(self, collection: IncidentCollection) -> None:
        self.store.put(self.key, collection.to_list())

    # ------------------------------------------------------------------
    # Single-shot primitives
    # ------------------------------------------------------------------

    def get_all(self) -> list[Incident]:
        return self.load().get_all()

    def find_by_id(self, incident_id: str) -> Incident | None:
        return self.load().find_by_id(incident_id)

    def append(self, incident: Incident) -> None:
        with self.atomic():
            collection = self.load()
            collection.append(incident)
            self.save(collection)

    def replace_all(self, incidents: list[Incident]) -> None:
        with self.atomic():
            self.save(IncidentCollection(incidents))
