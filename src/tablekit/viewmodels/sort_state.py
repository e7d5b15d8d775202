"""Single-column sort state machine.

Header clicks cycle a column through unsorted -> ascending -> descending ->
unsorted. Clicking a different sortable column always restarts at
ascending. Unknown and non-sortable columns leave the state untouched.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from tablekit.services.column_schema import ColumnSchema

__all__ = ["SortDirection", "SortState", "UNSORTED", "next_sort_state"]


class SortDirection(str, Enum):
    ASCENDING = "asc"
    DESCENDING = "desc"


@dataclass(frozen=True)
class SortState:
    column_key: Optional[str] = None
    direction: Optional[SortDirection] = None

    @property
    def is_sorted(self) -> bool:
        return self.column_key is not None and self.direction is not None

    def indicator_for(self, column_key: str) -> str:
        """Return "asc", "desc" or "none" for the given column header."""
        if not self.is_sorted or self.column_key != column_key:
            return "none"
        return self.direction.value  # type: ignore[union-attr]

    def __str__(self) -> str:
        if not self.is_sorted:
            return "unsorted"
        return f"{self.column_key} {self.direction.value}"  # type: ignore[union-attr]


UNSORTED = SortState()


def next_sort_state(state: SortState, column_key: str, schema: ColumnSchema) -> SortState:
    column = schema.get(column_key)
    if column is None or not column.sortable:
        return state
    if not state.is_sorted or state.column_key != column_key:
        return SortState(column_key, SortDirection.ASCENDING)
    if state.direction is SortDirection.ASCENDING:
        return SortState(column_key, SortDirection.DESCENDING)
    return UNSORTED
