"""
Base storage interface for the incident collection.

A store is a whole-value key/value collaborator: it can only read or replace
the value under a key. Backends must serialise writers themselves; the
repository relies on ``atomic()`` giving at most one in-flight
read-modify-write per key.
"""

import logging
from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import Any, Iterator

logger = logging.getLogger(__name__)


class BaseStore(ABC):
    """Abstract base class for storage backends."""

    name: str = "base"
    description: str = "Base storage backend"

    @abstractmethod
    def get(self, key: str) -> Any | None:
        """
        Read the value stored under ``key``.

        Returns:
            The stored value, or None if nothing is stored under the key.

        Raises:
            StorageError: If the backend could not be read.
        """
        ...

    @abstractmethod
    def put(self, key: str, value: Any) -> None:
        """
        Replace the value stored under ``key``.

        Raises:
            StorageError: If the backend could not be written.
        """
        ...

    @contextmanager
    def atomic(self) -> Iterator[None]:
        """Scope of one read-modify-write. Backends override to add isolation."""
        yield
