"""Data models, SQL repositories and helpers for a multi-user dungeon game backend."""

__version__ = "0.1.0"