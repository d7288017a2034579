"""Storage errors."""

from __future__ import annotations


class StorageError(Exception):
    """Raised when the notes database cannot be read or written."""
