"""Cell value comparison used when sorting table views.

``compare_values`` returns -1, 0 or 1 and never raises for mixed types:

 - equal values of compatible types (or the same object) compare as 0
 - None sorts before anything else
 - strings use locale-aware collation
 - numbers compare numerically (bool is not treated as a number)
 - anything else is stringified and collated
"""

from __future__ import annotations

import locale
import unicodedata
from decimal import Decimal
from fractions import Fraction
from typing import Any

__all__ = ["compare_values", "compare_strings", "fold_key", "is_numeric"]

_NUMERIC_TYPES = (int, float, Decimal, Fraction)


def is_numeric(value: Any) -> bool:
    return isinstance(value, _NUMERIC_TYPES) and not isinstance(value, bool)


def _cmp(a: Any, b: Any) -> int:
    if a < b:
        return -1
    if a > b:
        return 1
    return 0


def fold_key(text: str) -> str:
    """Accent- and case-insensitive key: "Émile" -> "emile"."""
    decomposed = unicodedata.normalize("NFKD", text)
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return stripped.casefold()


def _collate(a: str, b: str) -> int:
    try:
        return _cmp(locale.strcoll(a, b), 0)
    except ValueError:  # embedded NUL characters are rejected by the C library
        return 0


def compare_strings(a: str, b: str) -> int:
    """Collate two strings.

    Letters are ordered ignoring accents and case first, so "Émile" sorts
    before "Frank" under any process locale. Remaining ties are broken by
    the current LC_COLLATE and finally by code point.
    """
    primary = _cmp(fold_key(a), fold_key(b))
    if primary:
        return primary
    secondary = _collate(a, b)
    if secondary:
        return secondary
    return _cmp(a, b)


def _comparable_types(a: Any, b: Any) -> bool:
    return type(a) is type(b) or (is_numeric(a) and is_numeric(b))


def compare_values(a: Any, b: Any) -> int:
    if a is b or (_comparable_types(a, b) and a == b):
        return 0
    if a is None:
        return -1
    if b is None:
        return 1
    if isinstance(a, str) and isinstance(b, str):
        return compare_strings(a, b)
    if is_numeric(a) and is_numeric(b):
        # NaN compares neither less nor greater and lands here as 0
        return _cmp(a, b)
    return compare_strings(str(a), str(b))
