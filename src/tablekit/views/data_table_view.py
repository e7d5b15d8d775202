"""DataTableView

QTableWidget-based renderer for a ``TableController``. The widget holds no
table state of its own: every repaint reads the controller's view, sort
indicators and selection flags, and user interaction is forwarded through
``request_sort``, ``toggle_selection`` and ``set_all_selected``.

Loading and empty states replace the table with a message label.
"""

from __future__ import annotations

from typing import Any, List, Optional

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtWidgets import (
    QCheckBox,
    QHeaderView,
    QLabel,
    QTableWidget,
    QTableWidgetItem,
    QVBoxLayout,
    QWidget,
)

from tablekit import settings
from tablekit.services.column_schema import ColumnDescriptor
from tablekit.viewmodels.table_controller import TableController

__all__ = ["DataTableView"]

_ALIGN_FLAGS = {
    "left": Qt.AlignmentFlag.AlignLeft,
    "center": Qt.AlignmentFlag.AlignHCenter,
    "right": Qt.AlignmentFlag.AlignRight,
}
_SORT_ARROWS = {"asc": " ▲", "desc": " ▼", "none": ""}


class DataTableView(QWidget):
    selectionChanged = pyqtSignal(list)

    def __init__(
        self,
        controller: TableController,
        *,
        selectable: bool = False,
        empty_message: str = settings.DEFAULT_EMPTY_MESSAGE,
        parent: Optional[QWidget] = None,
    ):
        super().__init__(parent)
        self.controller = controller
        self.selectable = selectable
        self.empty_message = empty_message
        self._loading = False
        self._populating = False
        self._empty_state_active = False
        self._build_ui()
        self.refresh()

    @property
    def column_offset(self) -> int:
        return 1 if self.selectable else 0

    def _build_ui(self):
        root = QVBoxLayout(self)
        self.select_all = QCheckBox("Select all rows")
        self.select_all.setObjectName("selectAllRows")
        self.select_all.setAccessibleName("Select all rows")
        self.select_all.clicked.connect(self._on_select_all_clicked)  # type: ignore
        self.select_all.setVisible(self.selectable)
        root.addWidget(self.select_all)

        columns = list(self.controller.columns)
        self.table = QTableWidget(0, len(columns) + self.column_offset)
        self.table.verticalHeader().setVisible(False)
        self.table.setEditTriggers(QTableWidget.EditTrigger.NoEditTriggers)
        header = self.table.horizontalHeader()
        header.setStretchLastSection(True)
        header.sectionClicked.connect(self._on_header_clicked)  # type: ignore
        for col, descriptor in enumerate(columns, start=self.column_offset):
            if descriptor.width is not None:
                header.setSectionResizeMode(col, QHeaderView.ResizeMode.Interactive)
                header.resizeSection(col, descriptor.width)
        self.table.itemChanged.connect(self._on_item_changed)  # type: ignore
        root.addWidget(self.table)

        self.message_label = QLabel("")
        self.message_label.setObjectName("dataTableMessage")
        self.message_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.message_label.hide()
        root.addWidget(self.message_label)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def set_loading(self, loading: bool) -> None:
        self._loading = loading
        self.refresh()

    def set_rows(self, records: List[Any]) -> None:
        self.controller.set_data(records)
        self.refresh()

    def refresh(self) -> None:
        self._update_headers()
        if self._loading:
            self._show_message(settings.LOADING_MESSAGE)
            self._empty_state_active = False
            return
        if len(self.controller) == 0:
            self._show_message(self.empty_message)
            self._empty_state_active = True
            return
        self._empty_state_active = False
        self.message_label.hide()
        self.table.show()
        self.select_all.setVisible(self.selectable)
        self._populate()

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------
    def _show_message(self, text: str) -> None:
        self.message_label.setText(text)
        self.message_label.show()
        self.table.hide()
        self.select_all.hide()

    def _update_headers(self) -> None:
        labels = ["" for _ in range(self.column_offset)]
        for descriptor in self.controller.columns:
            arrow = _SORT_ARROWS[self.controller.sort_indicator(descriptor.key)]
            labels.append(descriptor.label + (arrow if descriptor.sortable else ""))
        self.table.setHorizontalHeaderLabels(labels)

    def _populate(self) -> None:
        view = self.controller.view()
        columns = list(self.controller.columns)
        self._populating = True
        try:
            self.table.setRowCount(0)
            self.table.setRowCount(len(view))
            for r, record in enumerate(view):
                if self.selectable:
                    self.table.setItem(r, 0, self._checkbox_item(record, r))
                for c, descriptor in enumerate(columns, start=self.column_offset):
                    self._set_cell(r, c, descriptor, record)
            self._sync_select_all()
        finally:
            self._populating = False

    def _checkbox_item(self, record: Any, row: int) -> QTableWidgetItem:
        item = QTableWidgetItem("")
        item.setFlags(Qt.ItemFlag.ItemIsUserCheckable | Qt.ItemFlag.ItemIsEnabled)
        checked = self.controller.is_row_selected(record, row)
        item.setCheckState(Qt.CheckState.Checked if checked else Qt.CheckState.Unchecked)
        item.setData(Qt.ItemDataRole.AccessibleTextRole, f"Select row {row + 1}")
        return item

    def _set_cell(self, row: int, col: int, descriptor: ColumnDescriptor, record: Any) -> None:
        content = descriptor.display(record, row)
        if isinstance(content, QWidget):
            self.table.setCellWidget(row, col, content)
            return
        item = QTableWidgetItem("" if content is None else str(content))
        item.setTextAlignment(_ALIGN_FLAGS[descriptor.align] | Qt.AlignmentFlag.AlignVCenter)
        self.table.setItem(row, col, item)

    def _sync_row_checks(self) -> None:
        """Re-check every row against the selection; rows may share an identity."""
        view = self.controller.view()
        self._populating = True
        try:
            for r, record in enumerate(view):
                item = self.table.item(r, 0)
                if item is None:
                    continue
                checked = self.controller.is_row_selected(record, r)
                state = Qt.CheckState.Checked if checked else Qt.CheckState.Unchecked
                if item.checkState() != state:
                    item.setCheckState(state)
            self._sync_select_all()
        finally:
            self._populating = False

    def _sync_select_all(self) -> None:
        self.select_all.blockSignals(True)
        try:
            if self.controller.is_all_selected():
                self.select_all.setCheckState(Qt.CheckState.Checked)
            elif self.controller.is_partially_selected():
                self.select_all.setCheckState(Qt.CheckState.PartiallyChecked)
            else:
                self.select_all.setCheckState(Qt.CheckState.Unchecked)
        finally:
            self.select_all.blockSignals(False)

    # ------------------------------------------------------------------
    # Interaction
    # ------------------------------------------------------------------
    def _on_header_clicked(self, logical_index: int):
        col = logical_index - self.column_offset
        keys = self.controller.columns.keys()
        if 0 <= col < len(keys):
            self.request_sort(keys[col])

    def request_sort(self, column_key: str) -> None:
        self.controller.request_sort(column_key)
        self.refresh()

    def _on_item_changed(self, item: QTableWidgetItem):
        if self._populating or not self.selectable or item.column() != 0:
            return
        row = item.row()
        view = self.controller.view()
        if row >= len(view):
            return
        identity = self.controller.row_identity(view[row], row)
        self.controller.toggle_selection(identity, item.checkState() == Qt.CheckState.Checked)
        self._sync_row_checks()
        self.selectionChanged.emit(self.controller.selected_records())

    def _on_select_all_clicked(self, _checked: bool = False):
        self.controller.set_all_selected(not self.controller.is_all_selected())
        self.refresh()
        self.selectionChanged.emit(self.controller.selected_records())

    # Testing helpers -------------------------------------------------
    def set_row_checked(self, row: int, checked: bool) -> None:
        item = self.table.item(row, 0)
        if item is not None:
            item.setCheckState(Qt.CheckState.Checked if checked else Qt.CheckState.Unchecked)

    def header_labels(self) -> List[str]:
        labels = []
        for c in range(self.table.columnCount()):
            item = self.table.horizontalHeaderItem(c)
            labels.append(item.text() if item else "")
        return labels

    def column_texts(self, column_key: str) -> List[str]:
        col = self.controller.columns.keys().index(column_key) + self.column_offset
        texts = []
        for r in range(self.table.rowCount()):
            item = self.table.item(r, col)
            texts.append(item.text() if item else "")
        return texts

    def is_empty_state_active(self) -> bool:
        return self._empty_state_active

    def is_loading_state_active(self) -> bool:
        return self._loading
