"""Stable comparator-driven sorting for table views.

Rows are ordered with an explicit top-down merge sort rather than
``list.sort`` so that ordering is defined by a three-way comparator
(``compare_values``) and ties always keep their input order. Direction is
applied inside the comparator, never by reversing the output, so equal rows
keep their relative order in descending sorts too.
"""

from __future__ import annotations

from typing import Callable, List, Sequence, TypeVar

__all__ = ["Comparator", "stable_sort", "reversed_comparator"]

T = TypeVar("T")
Comparator = Callable[[T, T], int]


def reversed_comparator(cmp: Comparator) -> Comparator:
    def _reversed(a, b) -> int:
        return -cmp(a, b)

    return _reversed


def stable_sort(items: Sequence[T], cmp: Comparator) -> List[T]:
    """Return a new list with ``items`` ordered by ``cmp`` (input untouched)."""
    result = list(items)
    if len(result) < 2:
        return result
    buffer = list(result)
    _merge_sort(result, buffer, 0, len(result), cmp)
    return result


def _merge_sort(items: List[T], buffer: List[T], lo: int, hi: int, cmp: Comparator) -> None:
    if hi - lo < 2:
        return
    mid = (lo + hi) // 2
    _merge_sort(items, buffer, lo, mid, cmp)
    _merge_sort(items, buffer, mid, hi, cmp)
    # Already ordered across the seam
    if cmp(items[mid - 1], items[mid]) <= 0:
        return
    buffer[lo:hi] = items[lo:hi]
    left, right, out = lo, mid, lo
    while left < mid and right < hi:
        # Take from the left run on ties to keep the sort stable
        if cmp(buffer[right], buffer[left]) < 0:
            items[out] = buffer[right]
            right += 1
        else:
            items[out] = buffer[left]
            left += 1
        out += 1
    while left < mid:
        items[out] = buffer[left]
        left += 1
        out += 1
    while right < hi:
        items[out] = buffer[right]
        right += 1
        out += 1
