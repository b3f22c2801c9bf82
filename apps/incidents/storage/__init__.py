"""
Storage backends for the incident collection.

Backends expose whole-value get/put semantics under a key.
"""

from apps.incidents.storage.base import BaseStore
from apps.incidents.storage.database import DatabaseStore
from apps.incidents.storage.memory import InMemoryStore

__all__ = [
    "BaseStore",
    "DatabaseStore",
    "InMemoryStore",
    "STORE_REGISTRY",
    "get_store",
    "list_stores",
    "reset_stores",
]

# Registry of available storage backends
STORE_REGISTRY: dict[str, type[BaseStore]] = {
    "database": DatabaseStore,
    "memory": InMemoryStore,
}

# One instance per backend name, so process-local stores keep their data
# between requests.
_instances: dict[str, BaseStore] = {}


def get_store(name: str | None = None) -> BaseStore:
    """
    Get the storage backend by name.

    Args:
        name: Backend name. Defaults to settings.INCIDENTS_STORE.

    Returns:
        Shared backend instance.

    Raises:
        KeyError: If the backend name is not registered.
    """
    if name is None:
        from django.conf import settings

        name = getattr(settings, "INCIDENTS_STORE", "database")

    if name not in STORE_REGISTRY:
        raise KeyError(f"Unknown store: {name}. Available: {list(STORE_REGISTRY.keys())}")

    if name not in _instances:
        _instances[name] = STORE_REGISTRY[name]()
    return _instances[name]


def list_stores() -> list[str]:
    """List all registered storage backend names."""
    return list(STORE_REGISTRY.keys())


def reset_stores() -> None:
    """Drop cached backend instances (used by tests)."""
    _instances.clear()
