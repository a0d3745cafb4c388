from __future__ import annotations
from typing import List, Optional

from PySide6 import QtCore, QtGui, QtWidgets

from .. import config
from ..app_services.record_store import RecordStore
from .controllers.record_controller import RecordController
from .dialogs.record_form import RecordFormDialog
from .presenters.record_row_presenter import RecordRowViewModel


class MainWindow(QtWidgets.QMainWindow):
    def __init__(self, store: Optional[RecordStore] = None) -> None:
        super().__init__()
        self.setWindowTitle("Records")
        self.resize(config.WINDOW_WIDTH, config.WINDOW_HEIGHT)

        self.store = store if store is not None else RecordStore()
        self.controller = RecordController(self.store)

        self._setup_ui()
        self._connect_signals()

        self.controller.refresh()

    def _setup_ui(self) -> None:
        central = QtWidgets.QWidget()
        layout = QtWidgets.QVBoxLayout(central)
        layout.setContentsMargins(6, 6, 6, 6)
        layout.setSpacing(6)

        self.list_records = QtWidgets.QListWidget()
        self.list_records.setSelectionMode(QtWidgets.QAbstractItemView.ExtendedSelection)
        self.list_records.setAlternatingRowColors(True)

        buttons = QtWidgets.QHBoxLayout()
        self.btn_add = QtWidgets.QPushButton("Add")
        self.btn_delete = QtWidgets.QPushButton("Delete")
        buttons.addStretch(1)
        buttons.addWidget(self.btn_add)
        buttons.addWidget(self.btn_delete)

        layout.addWidget(self.list_records, 1)
        layout.addLayout(buttons)
        self.setCentralWidget(central)

        self._delete_shortcut = QtGui.QShortcut(QtGui.QKeySequence.Delete, self.list_records)

    def _connect_signals(self) -> None:
        self.controller.view_rows_updated.connect(self._render_rows)
        self.btn_add.clicked.connect(self._on_add_clicked)
        self.btn_delete.clicked.connect(self._on_delete_clicked)
        self._delete_shortcut.activated.connect(self._on_delete_clicked)
        self.list_records.itemDoubleClicked.connect(self._on_item_double_clicked)

    def _render_rows(self, rows: List[RecordRowViewModel]) -> None:
        self.list_records.clear()
        for row in rows:
            item = QtWidgets.QListWidgetItem(row.text)
            item.setData(QtCore.Qt.UserRole, row.record_id)
            self.list_records.addItem(item)

    def _open_form(self, index: Optional[int]) -> None:
        record = self.controller.record_at(index) if index is not None else None
        dlg = RecordFormDialog(self, is_edit=record is not None)
        dlg.set_fields(self.controller.fields_for(index))
        if dlg.exec() != QtWidgets.QDialog.Accepted:
            return
        self.controller.save_form(dlg.get_fields(), record.id if record is not None else None)

    def _on_add_clicked(self) -> None:
        self._open_form(None)

    def _on_item_double_clicked(self, item: QtWidgets.QListWidgetItem) -> None:
        self._open_form(self.list_records.row(item))

    def _on_delete_clicked(self) -> None:
        rows = [self.list_records.row(item) for item in self.list_records.selectedItems()]
        if rows:
            self.controller.delete_rows(rows)
