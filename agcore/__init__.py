"""Helpers for game installations: versions, sizes, integrity checks, patch metadata and git-synced folders."""

__version__ = "0.1.0"