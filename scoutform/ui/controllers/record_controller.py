from __future__ import annotations
from typing import Iterable, List, Optional

from PySide6 import QtCore

from ...app_services.form_codec import FormFields, compose, decompose
from ...app_services.record_store import RecordStore
from ...domain.models import Record
from ..presenters.record_row_presenter import RecordRowPresenter


class RecordController(QtCore.QObject):
    """
    Controller for the record list and form.
    """
    # Signals for View
    view_rows_updated = QtCore.Signal(object)  # List[RecordRowViewModel]

    def __init__(self, store: RecordStore):
        super().__init__()
        self.store = store
        self.presenter = RecordRowPresenter()

        # Forward store changes as row view models
        self.store.records_changed.connect(self._on_records_changed)

    def _on_records_changed(self, records: List[Record]) -> None:
        self.view_rows_updated.emit(self.presenter.compute_rows(records))

    def refresh(self) -> None:
        self._on_records_changed(self.store.records)

    def record_at(self, index: int) -> Optional[Record]:
        records = self.store.records
        if 0 <= index < len(records):
            return records[index]
        return None

    def fields_for(self, index: Optional[int]) -> FormFields:
        """Form state for editing the row at index, or a blank form when None."""
        if index is None:
            return decompose(None)
        return decompose(self.record_at(index))

    def save_form(self, fields: FormFields, record_id: Optional[str] = None) -> Record:
        """Commit a form: update when editing (record_id given), add otherwise."""
        record = compose(fields, record_id)
        if record_id is not None:
            self.store.update(record)
        else:
            self.store.add(record)
        return record

    def delete_rows(self, indices: Iterable[int]) -> int:
        return self.store.delete(indices)
