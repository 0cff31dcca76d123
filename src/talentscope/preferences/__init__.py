"""Sharing preferences and scout connection requests."""

from .store import DEFAULT_SHARING, PreferenceStore

__all__ = ["DEFAULT_SHARING", "PreferenceStore"]
