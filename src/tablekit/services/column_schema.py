"""Column schema registry.

An ordered, immutable lookup table of ``ColumnDescriptor`` objects keyed by
column key. Views and controllers consult it to extract cell values and to
decide whether a header may trigger sorting.

Usage:
    schema = ColumnSchema([
        ColumnDescriptor("name", title="Name", sortable=True),
        ColumnDescriptor("email", title="Email", sortable=True),
    ])
    schema.find("name").value({"name": "Amy"})  # -> "Amy"

Lookups through ``find`` raise ``ColumnNotFoundError``; ``get`` is the
non-raising variant used by the controller so unknown keys degrade to no-ops.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, Iterator, Mapping, Optional, Tuple

from tablekit.errors import ColumnNotFoundError, DuplicateColumnKeyError

__all__ = [
    "ColumnDescriptor",
    "ColumnSchema",
    "read_field",
    "ALIGNMENTS",
]

Accessor = Callable[[Any], Any]
ValueRenderer = Callable[[Any, Any, int], Any]

ALIGNMENTS = ("left", "center", "right")


def read_field(record: Any, field: str) -> Any:
    """Read ``field`` from a mapping or an attribute-bearing object.

    Missing fields yield None rather than raising.
    """
    if isinstance(record, Mapping):
        return record.get(field)
    return getattr(record, field, None)


@dataclass(frozen=True)
class ColumnDescriptor:
    key: str
    title: Optional[str] = None
    field: Optional[str] = None
    accessor: Optional[Accessor] = None
    sortable: bool = False
    render: Optional[ValueRenderer] = None
    width: Optional[int] = None
    align: str = "left"

    def __post_init__(self) -> None:
        if self.align not in ALIGNMENTS:
            raise ValueError(f"Unsupported alignment '{self.align}' for column '{self.key}'")

    @property
    def label(self) -> str:
        return self.title if self.title is not None else self.key

    def value(self, record: Any) -> Any:
        if self.accessor is not None:
            return self.accessor(record)
        return read_field(record, self.field or self.key)

    def display(self, record: Any, index: int) -> Any:
        """Presentation value for a cell (value renderer applied if configured)."""
        raw = self.value(record)
        if self.render is None:
            return raw
        return self.render(raw, record, index)


class ColumnSchema:
    """Immutable, ordered registry of column descriptors."""

    def __init__(self, descriptors: Iterable[ColumnDescriptor]):
        ordered: Tuple[ColumnDescriptor, ...] = tuple(descriptors)
        index: Dict[str, ColumnDescriptor] = {}
        for descriptor in ordered:
            if descriptor.key in index:
                raise DuplicateColumnKeyError(
                    f"Column key '{descriptor.key}' defined more than once",
                    context={"key": descriptor.key},
                )
            index[descriptor.key] = descriptor
        self._descriptors = ordered
        self._index = index

    @classmethod
    def coerce(cls, columns: "ColumnSchema | Iterable[ColumnDescriptor]") -> "ColumnSchema":
        if isinstance(columns, ColumnSchema):
            return columns
        return cls(columns)

    def find(self, key: str) -> ColumnDescriptor:
        try:
            return self._index[key]
        except KeyError:
            raise ColumnNotFoundError(
                f"Unknown column key '{key}'", context={"key": key}
            ) from None

    def get(self, key: str) -> Optional[ColumnDescriptor]:
        return self._index.get(key)

    def keys(self) -> list[str]:
        return [d.key for d in self._descriptors]

    def __iter__(self) -> Iterator[ColumnDescriptor]:
        return iter(self._descriptors)

    def __len__(self) -> int:
        return len(self._descriptors)

    def __contains__(self, key: object) -> bool:
        return key in self._index

    def __repr__(self) -> str:  # pragma: no cover - debugging aid
        return f"ColumnSchema({self.keys()!r})"
