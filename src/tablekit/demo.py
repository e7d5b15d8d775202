"""Demo window showing a selectable, sortable user table."""

from __future__ import annotations

import logging
import sys
from typing import List

from PyQt6.QtWidgets import QApplication, QLabel, QPushButton, QVBoxLayout, QWidget
from PyQt6.QtCore import QTimer

from tablekit import settings
from tablekit.services.column_schema import ColumnDescriptor, ColumnSchema
from tablekit.viewmodels.table_controller import TableController
from tablekit.views.data_table_view import DataTableView

__all__ = ["SAMPLE_USERS", "user_columns", "DemoWindow", "main"]

SAMPLE_USERS: List[dict] = [
    {"id": 1, "name": "John Doe", "email": "john@example.com", "role": "Admin", "status": "active", "last_login": "2024-01-15"},
    {"id": 2, "name": "Jane Smith", "email": "jane@example.com", "role": "User", "status": "active", "last_login": "2024-01-14"},
    {"id": 3, "name": "Mike Johnson", "email": "mike@example.com", "role": "Editor", "status": "inactive", "last_login": "2024-01-10"},
    {"id": 4, "name": "Sarah Wilson", "email": "sarah@example.com", "role": "User", "status": "pending", "last_login": "2024-01-12"},
    {"id": 5, "name": "David Brown", "email": "david@example.com", "role": "Admin", "status": "active", "last_login": "2024-01-16"},
]


def user_columns() -> ColumnSchema:
    return ColumnSchema(
        [
            ColumnDescriptor("name", title="Name", sortable=True),
            ColumnDescriptor("email", title="Email", sortable=True),
            ColumnDescriptor("role", title="Role", sortable=True, render=lambda v, _r, _i: f"[{v}]"),
            ColumnDescriptor("status", title="Status", sortable=True, align="center", render=lambda v, _r, _i: str(v).upper()),
            ColumnDescriptor("last_login", title="Last Login", field="last_login", sortable=True, align="right"),
        ]
    )


class DemoWindow(QWidget):
    LOADING_DEMO_MS = 2000

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setWindowTitle("tablekit demo")
        self.controller = TableController(user_columns(), SAMPLE_USERS)
        root = QVBoxLayout(self)
        self.loading_button = QPushButton("Loading State")
        self.loading_button.clicked.connect(self._simulate_loading)  # type: ignore
        root.addWidget(self.loading_button)
        self.table_view = DataTableView(self.controller, selectable=True)
        self.table_view.selectionChanged.connect(self._on_selection_changed)  # type: ignore
        root.addWidget(self.table_view)
        self.selected_label = QLabel("")
        self.selected_label.setObjectName("selectedUsersLabel")
        root.addWidget(self.selected_label)

    def _on_selection_changed(self, rows: list):
        if not rows:
            self.selected_label.setText("")
            return
        self.selected_label.setText("Selected Users: " + ", ".join(r["name"] for r in rows))

    def _simulate_loading(self):  # pragma: no cover - timer driven
        self.table_view.set_loading(True)
        self.loading_button.setEnabled(False)
        QTimer.singleShot(self.LOADING_DEMO_MS, self._finish_loading)

    def _finish_loading(self):  # pragma: no cover - timer driven
        self.table_view.set_loading(False)
        self.loading_button.setEnabled(True)


def main():  # pragma: no cover - GUI runtime
    logging.basicConfig(level=getattr(logging, settings.LOG_LEVEL, logging.WARNING))
    settings.apply_collation_locale()
    app = QApplication(sys.argv)
    win = DemoWindow()
    win.resize(760, 420)
    win.show()
    sys.exit(app.exec())


if __name__ == "__main__":  # pragma: no cover
    main()
