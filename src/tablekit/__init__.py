"""Sortable, selectable table controllers with an optional PyQt6 renderer.

The Qt layer lives in ``tablekit.views`` and is imported on demand so the
controller stays usable headless.
"""

from tablekit.errors import ColumnNotFoundError, DuplicateColumnKeyError, TableError
from tablekit.services.column_schema import ColumnDescriptor, ColumnSchema
from tablekit.services.event_bus import EventBus, TableEvent
from tablekit.services.row_identity import (
    CallableRowIdentity,
    FieldRowIdentity,
    RowIdentityResolver,
    resolver_for,
)
from tablekit.viewmodels.sort_state import UNSORTED, SortDirection, SortState
from tablekit.viewmodels.table_controller import TableController, derive_view

__all__ = [
    "TableError",
    "DuplicateColumnKeyError",
    "ColumnNotFoundError",
    "ColumnDescriptor",
    "ColumnSchema",
    "EventBus",
    "TableEvent",
    "RowIdentityResolver",
    "FieldRowIdentity",
    "CallableRowIdentity",
    "resolver_for",
    "SortDirection",
    "SortState",
    "UNSORTED",
    "TableController",
    "derive_view",
]
