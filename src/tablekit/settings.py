"""Global configuration and constants for table controllers and views."""

from __future__ import annotations

import locale
import logging
import os
from typing import Final

_log = logging.getLogger(__name__)

DEFAULT_ROW_KEY_FIELD: Final = "id"
DEFAULT_EMPTY_MESSAGE: Final = "No data available"
LOADING_MESSAGE: Final = "Loading..."

# Empty means "adopt the user's locale from LC_ALL / LC_COLLATE / LANG"
COLLATION_LOCALE: Final = os.environ.get("TABLEKIT_COLLATION_LOCALE", "")
LOG_LEVEL: Final = os.environ.get("TABLEKIT_LOG_LEVEL", "WARNING").upper()

_collation_applied = False


def apply_collation_locale() -> bool:
    """Switch LC_COLLATE to ``COLLATION_LOCALE`` (or the user's locale) once per process.

    Returns True when the locale was changed by this call. An unavailable
    locale is logged and leaves the process collation untouched.
    """
    global _collation_applied
    if _collation_applied:
        return False
    try:
        locale.setlocale(locale.LC_COLLATE, COLLATION_LOCALE)
    except locale.Error as exc:
        _log.warning("Collation locale %r unavailable: %s", COLLATION_LOCALE or "<user>", exc)
        return False
    _collation_applied = True
    return True
