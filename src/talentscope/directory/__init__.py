"""Player directory (seeded, read-only)."""

from .catalog import PlayerDirectory, default_directory

__all__ = ["PlayerDirectory", "default_directory"]
