"""Structured errors raised by column schema lookups."""

from __future__ import annotations
from typing import Any

__all__ = ["TableError", "DuplicateColumnKeyError", "ColumnNotFoundError"]


class TableError(Exception):
    """Base class for table configuration issues."""

    def __init__(self, message: str, *, context: dict[str, Any] | None = None):
        super().__init__(message)
        self.context = context or {}


class DuplicateColumnKeyError(TableError, ValueError):
    """Raised when a schema contains two descriptors with the same key."""


class ColumnNotFoundError(TableError, KeyError):
    """Raised by explicit schema lookups for an unknown column key."""

    def __str__(self) -> str:  # KeyError would otherwise repr() the message
        return str(self.args[0]) if self.args else ""
