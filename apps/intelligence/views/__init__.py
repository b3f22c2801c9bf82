"""
Intelligence app views.

This package contains HTTP endpoints for the text-generation providers.
"""

from apps.intelligence.views.providers import ProvidersListView

__all__ = [
    "ProvidersListView",
]
