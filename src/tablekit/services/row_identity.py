"""Row identity resolution.

Selection tracks rows by identity rather than by position so it survives
re-sorting. A resolver is either a fixed field name (``FieldRowIdentity``,
defaulting to ``id``) or a caller-supplied function (``CallableRowIdentity``).
When the field is missing or None, the row's position in the view is used.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Protocol, Union, runtime_checkable

from tablekit import settings
from tablekit.services.column_schema import read_field

__all__ = [
    "RowIdentity",
    "RowIdentityResolver",
    "FieldRowIdentity",
    "CallableRowIdentity",
    "resolver_for",
]

RowIdentity = Union[str, int, float]


@runtime_checkable
class RowIdentityResolver(Protocol):
    def resolve(self, record: Any, index: int) -> RowIdentity: ...  # pragma: no cover


@dataclass(frozen=True)
class FieldRowIdentity:
    field: str = settings.DEFAULT_ROW_KEY_FIELD

    def resolve(self, record: Any, index: int) -> RowIdentity:
        value = read_field(record, self.field)
        return index if value is None else value


@dataclass(frozen=True)
class CallableRowIdentity:
    func: Callable[[Any], RowIdentity]

    def resolve(self, record: Any, index: int) -> RowIdentity:
        return self.func(record)


RowKey = Union[str, Callable[[Any], RowIdentity], RowIdentityResolver, None]


def resolver_for(row_key: RowKey = None) -> RowIdentityResolver:
    """Build a resolver from a field name, a function, or an existing resolver."""
    if row_key is None:
        return FieldRowIdentity()
    if isinstance(row_key, str):
        return FieldRowIdentity(row_key)
    if isinstance(row_key, RowIdentityResolver):
        return row_key
    if callable(row_key):
        return CallableRowIdentity(row_key)
    raise TypeError(f"Unsupported row key: {row_key!r}")
