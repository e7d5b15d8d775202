# Headless Qt setup plus a fallback 'qtbot' fixture if pytest-qt is not installed.
# Controller tests never touch Qt; only the view tests need a QApplication.

import contextlib
import os
import sys

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

try:  # If pytest-qt present, do nothing (its fixture will be used)
    import pytestqt  # type: ignore  # noqa: F401
except ImportError:  # pragma: no cover
    try:
        from PyQt6.QtWidgets import QApplication
    except ImportError:  # pragma: no cover
        QApplication = None  # type: ignore

    @pytest.fixture
    def qtbot():  # type: ignore
        if QApplication is None:
            pytest.skip("PyQt6 not available")
        QApplication.instance() or QApplication(sys.argv)  # type: ignore
        widgets = []

        class Bot:
            def addWidget(self, w):  # mimic pytest-qt API subset
                widgets.append(w)

            @contextlib.contextmanager
            def waitSignal(self, *args, **kwargs):  # no-op stub
                yield

        return Bot()


@pytest.fixture
def users():
    return [
        {"id": 1, "name": "John Doe", "email": "john@example.com", "role": "Admin"},
        {"id": 2, "name": "Jane Smith", "email": "jane@example.com", "role": "User"},
        {"id": 3, "name": "Bob Johnson", "email": "bob@example.com", "role": "Editor"},
    ]
