"""Table controller: sort and selection state for a tabular view.

Turns raw records plus a ``ColumnSchema`` into an ordered view and tracks a
selection set over row identities. Renderers read the view and aggregate
selection flags from here and call back only through ``request_sort``,
``toggle_selection`` and ``set_all_selected``.

``derive_view`` is the pure core: (records, sort state, schema) -> ordered
list. The controller caches its result until data or sort state changes.

Usage:
    controller = TableController(
        [ColumnDescriptor("name", sortable=True)],
        users,
        on_selection_change=lambda rows: print(len(rows)),
    )
    controller.request_sort("name")
    controller.set_all_selected(True)
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Generic, Iterable, List, Optional, Sequence, TypeVar

from tablekit.services.column_schema import ColumnDescriptor, ColumnSchema
from tablekit.services.event_bus import EventBus, TableEvent
from tablekit.services.row_identity import RowIdentity, RowKey, resolver_for
from tablekit.services.stable_sort import reversed_comparator, stable_sort
from tablekit.services.value_compare import compare_values
from tablekit.viewmodels.selection_model import SelectionModel
from tablekit.viewmodels.sort_state import (
    UNSORTED,
    SortDirection,
    SortState,
    next_sort_state,
)

__all__ = ["TableController", "derive_view", "SelectionCallback"]

_log = logging.getLogger(__name__)

T = TypeVar("T")
SelectionCallback = Callable[[List[Any]], None]


def derive_view(records: Sequence[T], sort_state: SortState, schema: ColumnSchema) -> List[T]:
    """Return ``records`` ordered according to ``sort_state``.

    Unsorted state (or a column no longer in the schema) yields the input
    order unchanged. The input sequence is never modified.
    """
    if not sort_state.is_sorted:
        return list(records)
    column = schema.get(sort_state.column_key)  # type: ignore[arg-type]
    if column is None:
        return list(records)

    def cmp(a: T, b: T) -> int:
        return compare_values(column.value(a), column.value(b))

    if sort_state.direction is SortDirection.DESCENDING:
        return stable_sort(records, reversed_comparator(cmp))
    return stable_sort(records, cmp)


class TableController(Generic[T]):
    """Owns sort and selection state for one table instance.

    Not thread-safe; share across threads only behind external locking.
    """

    def __init__(
        self,
        columns: ColumnSchema | Iterable[ColumnDescriptor],
        data: Iterable[T] = (),
        *,
        row_key: RowKey = None,
        on_selection_change: Optional[SelectionCallback] = None,
        event_bus: Optional[EventBus] = None,
    ):
        self._schema = ColumnSchema.coerce(columns)
        self._resolver = resolver_for(row_key)
        self._data: List[T] = list(data)
        self._sort_state: SortState = UNSORTED
        self._selection = SelectionModel()
        self._view: Optional[List[T]] = None
        self.on_selection_change = on_selection_change
        self._bus = event_bus

    # ------------------------------------------------------------------
    # Data & view
    # ------------------------------------------------------------------
    @property
    def columns(self) -> ColumnSchema:
        return self._schema

    @property
    def data(self) -> List[T]:
        return list(self._data)

    def set_data(self, records: Iterable[T]) -> None:
        """Replace the raw records; sort state and selection are kept."""
        self._data = list(records)
        self._view = None
        _log.debug("Table data replaced (%d rows)", len(self._data))
        self._publish(TableEvent.DATA_CHANGED, len(self._data))

    def view(self) -> List[T]:
        if self._view is None:
            self._view = derive_view(self._data, self._sort_state, self._schema)
        return list(self._view)

    def __len__(self) -> int:
        return len(self._data)

    # ------------------------------------------------------------------
    # Sorting
    # ------------------------------------------------------------------
    @property
    def sort_state(self) -> SortState:
        return self._sort_state

    def sort_indicator(self, column_key: str) -> str:
        return self._sort_state.indicator_for(column_key)

    def request_sort(self, column_key: str) -> SortState:
        new_state = next_sort_state(self._sort_state, column_key, self._schema)
        if new_state is self._sort_state:
            _log.debug("Ignoring sort request for column '%s'", column_key)
            return new_state
        _log.debug("Sort changed: %s -> %s", self._sort_state, new_state)
        self._sort_state = new_state
        self._view = None
        self._publish(TableEvent.SORT_CHANGED, new_state)
        return new_state

    # ------------------------------------------------------------------
    # Selection
    # ------------------------------------------------------------------
    def row_identity(self, record: T, index: int) -> RowIdentity:
        return self._resolver.resolve(record, index)

    def view_identities(self) -> List[RowIdentity]:
        return [self.row_identity(r, i) for i, r in enumerate(self.view())]

    def toggle_selection(self, identity: RowIdentity, checked: bool) -> None:
        changed = self._selection.toggle(identity, checked)
        if changed:
            _log.debug("Row %r %s", identity, "selected" if checked else "deselected")
        self._notify_selection(self.selected_records())

    def set_all_selected(self, checked: bool) -> None:
        if checked:
            view = self.view()
            self._selection.replace(self.row_identity(r, i) for i, r in enumerate(view))
            _log.debug("Selected all %d rows", len(view))
            self._notify_selection(view)
        else:
            self._selection.clear()
            _log.debug("Cleared selection")
            self._notify_selection([])

    def clear_selection(self) -> None:
        """Reset selection without notifying (e.g. after loading new data)."""
        self._selection.clear()

    def is_selected(self, identity: RowIdentity) -> bool:
        return identity in self._selection

    def is_row_selected(self, record: T, index: int) -> bool:
        return self.is_selected(self.row_identity(record, index))

    def selected_records(self) -> List[T]:
        return [r for i, r in enumerate(self.view()) if self.is_row_selected(r, i)]

    @property
    def selection_count(self) -> int:
        return self._selection.count()

    def selected_identities(self) -> List[RowIdentity]:
        return self._selection.identities()

    def is_all_selected(self) -> bool:
        return self._selection.is_all_selected(len(self._data))

    def is_partially_selected(self) -> bool:
        return self._selection.is_partially_selected(len(self._data))

    # ------------------------------------------------------------------
    # Notification
    # ------------------------------------------------------------------
    def _notify_selection(self, records: List[T]) -> None:
        if self.on_selection_change is not None:
            self.on_selection_change(list(records))
        self._publish(TableEvent.SELECTION_CHANGED, list(records))

    def _publish(self, event: TableEvent, payload: Any) -> None:
        if self._bus is not None:
            self._bus.publish(event, payload)
