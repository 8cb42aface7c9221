"""UserTableView

QTableWidget-based view rendering the demo users through ``TableModel``.
Header clicks advance the sort cycle (shift-click adds a secondary sort
when ``MAX_SORT_COLUMNS`` allows it); header labels carry ▲/▼ indicators.
"""

from __future__ import annotations
import logging
from typing import Any, List, Optional
from PyQt6.QtWidgets import (
    QWidget,
    QVBoxLayout,
    QLabel,
    QTableWidget,
    QTableWidgetItem,
    QHeaderView,
    QApplication,
)
from PyQt6.QtCore import Qt
from PyQt6.QtGui import QColor

from table_engine import ColumnDef, ConfigurationError, TableModel
from gui.demo_data import default_users, format_cell, user_columns, user_row_id

__all__ = ["UserTableView"]

log = logging.getLogger(__name__)


class UserTableView(QWidget):
    def __init__(
        self,
        parent: Optional[QWidget] = None,
        *,
        data: Optional[List[Any]] = None,
        columns: Optional[List[ColumnDef]] = None,
    ):
        super().__init__(parent)
        self.model = TableModel(
            default_users() if data is None else data,
            user_columns() if columns is None else columns,
            get_row_id=user_row_id if data is None else None,
        )
        self._build_ui()
        self._populate()

    def _build_ui(self):
        root = QVBoxLayout(self)
        self.title_label = QLabel("Users")
        self.title_label.setObjectName("viewTitleLabel")
        root.addWidget(self.title_label)
        self.table = QTableWidget(0, len(self.model.columns))
        self.table.setEditTriggers(QTableWidget.EditTrigger.NoEditTriggers)
        self.table.verticalHeader().setVisible(False)
        header = self.table.horizontalHeader()
        header.setSectionResizeMode(QHeaderView.ResizeMode.ResizeToContents)
        header.setStretchLastSection(True)
        header.sectionClicked.connect(self._on_header_clicked)  # type: ignore
        root.addWidget(self.table)
        self.error_label = QLabel("")
        self.error_label.setObjectName("sortErrorLabel")
        self.error_label.hide()
        root.addWidget(self.error_label)

    def _populate(self):
        self.table.setHorizontalHeaderLabels([h.text for h in self.model.headers()])
        columns = self.model.columns
        rows = self.model.rows()
        self.table.setRowCount(len(rows))
        for r, row in enumerate(rows):
            for c, col in enumerate(columns):
                item = QTableWidgetItem(format_cell(col, row.get_value(col.id)))
                if col.meta.get("is_numeric"):
                    item.setTextAlignment(
                        Qt.AlignmentFlag.AlignRight | Qt.AlignmentFlag.AlignVCenter
                    )
                elif col.meta.get("align") == "center":
                    item.setTextAlignment(Qt.AlignmentFlag.AlignCenter)
                badge = col.meta.get("badge")
                if badge and row.get_value(col.id) in badge:
                    item.setForeground(QColor(badge[row.get_value(col.id)]))
                self.table.setItem(r, c, item)

    def _on_header_clicked(self, logical_index: int):  # pragma: no cover - UI callback
        shift = bool(QApplication.keyboardModifiers() & Qt.KeyboardModifier.ShiftModifier)
        self.toggle_column(logical_index, multi=shift)

    def toggle_column(self, logical_index: int, *, multi: bool = False) -> None:
        """Advance the sort cycle for the column at ``logical_index``."""
        col = self.model.columns[logical_index]
        self.apply_sort_state_change(lambda: self.model.toggle_sorting(str(col.id), multi=multi))

    def apply_sort_state(self, state) -> None:
        """Programmatic API (tests, restore) to replace the sort state."""
        self.apply_sort_state_change(lambda: self.model.set_sort_state(state))

    def apply_sort_state_change(self, change) -> None:
        try:
            change()
        except ConfigurationError as exc:
            # Keep the last valid rows on screen and say why the sort was rejected
            log.error("Sort rejected: %s", exc)
            self.error_label.setText(str(exc))
            self.error_label.show()
            return
        self.error_label.hide()
        self._populate()

    def set_rows(self, data: List[Any]):
        self.model.set_data(data)
        self._populate()

    # Testing helpers -------------------------------------------------
    def column_texts(self, column_id: str) -> List[str]:
        idx = next(i for i, c in enumerate(self.model.columns) if c.id == column_id)
        out = []
        for r in range(self.table.rowCount()):
            item = self.table.item(r, idx)
            out.append(item.text() if item else "")
        return out

    def header_texts(self) -> List[str]:
        out = []
        for c in range(self.table.columnCount()):
            item = self.table.horizontalHeaderItem(c)
            out.append(item.text() if item else "")
        return out

    def error_text(self) -> str:
        return self.error_label.text() if self.error_label.isVisibleTo(self) else ""
