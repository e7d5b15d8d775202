"""Selection state for table rows.

Tracks the set of checked row identities. Aggregate queries (all selected,
partially selected) are derived from set cardinality versus the size of the
view they are asked about; there is no stored "indeterminate" state.

Identities that vanish from the data are deliberately not pruned, and a
resolver that yields duplicate identities simply collapses them in the set.
Callers that need a reset on data change call ``clear()`` themselves.
"""

from __future__ import annotations

from typing import Iterable, List, Set

from tablekit.services.row_identity import RowIdentity

__all__ = ["SelectionModel"]


class SelectionModel:
    def __init__(self) -> None:
        self._selected: Set[RowIdentity] = set()

    def toggle(self, identity: RowIdentity, checked: bool) -> bool:
        """Add or remove ``identity``; returns True if the set changed."""
        if checked:
            if identity in self._selected:
                return False
            self._selected.add(identity)
            return True
        if identity not in self._selected:
            return False
        self._selected.discard(identity)
        return True

    def replace(self, identities: Iterable[RowIdentity]) -> None:
        self._selected = set(identities)

    def clear(self) -> None:
        self._selected.clear()

    def contains(self, identity: RowIdentity) -> bool:
        return identity in self._selected

    __contains__ = contains

    def count(self) -> int:
        return len(self._selected)

    __len__ = count

    def identities(self) -> List[RowIdentity]:
        return list(self._selected)

    def is_all_selected(self, view_size: int) -> bool:
        return view_size > 0 and len(self._selected) == view_size

    def is_partially_selected(self, view_size: int) -> bool:
        return 0 < len(self._selected) < view_size
