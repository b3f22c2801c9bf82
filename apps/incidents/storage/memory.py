"""
In-process storage backend.

Values are deep-copied on the way in and out so callers never hold a
reference into the store.
"""

import copy
import threading
from contextlib import contextmanager
from typing import Any, Iterator

from apps.incidents.storage.base import BaseStore


class InMemoryStore(BaseStore):
    """Dict-backed store, useful for tests and single-process development."""

    name = "memory"
    description = "Process-local in-memory store"

    def __init__(self, initial: dict[str, Any] | None = None) -> None:
        self._data: dict[str, Any] = copy.deepcopy(initial) if initial else {}
        self._lock = threading.RLock()

    def get(self, key: str) -> Any | None:
        with self._lock:
            if key not in self._data:
                return None
            return copy.deepcopy(self._data[key])

    def put(self, key: str, value: Any) -> None:
        with self._lock:
            self._data[key] = copy.deepcopy(value)

    @contextmanager
    def atomic(self) -> Iterator[None]:
        with self._lock:
            yield

    def clear(self) -> None:
        with self._lock:
            self._data.clear()
