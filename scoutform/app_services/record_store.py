from __future__ import annotations

import logging
from typing import Callable, Iterable, List, Optional

from PySide6 import QtCore

from .. import project_paths
from ..domain.models import DuplicateRecordError, Record
from .repositories.record_repository import RecordFileRepository

logger = logging.getLogger(__name__)

RecordsListener = Callable[[List[Record]], None]


class RecordStore(QtCore.QObject):
    """
    Authoritative in-memory collection of records backed by one JSON file.

    Every mutation writes the whole collection to disk, then notifies
    subscribers synchronously before returning. Disk failures are logged and
    swallowed; the in-memory collection stays the source of truth.
    """
    records_changed = QtCore.Signal(object)  # List[Record]

    def __init__(
        self,
        path: Optional[str] = None,
        *,
        repository: Optional[RecordFileRepository] = None,
        autoload: bool = True,
    ) -> None:
        super().__init__()
        if repository is None:
            repository = RecordFileRepository(path or project_paths.records_file_path())
        self._repo = repository
        self._records: List[Record] = []
        self._subscribers: List[RecordsListener] = []
        if autoload:
            self.load()

    @property
    def path(self) -> str:
        return str(self._repo.path)

    @property
    def records(self) -> List[Record]:
        return list(self._records)

    def __len__(self) -> int:
        return len(self._records)

    # --- Change notification ---

    def subscribe(self, callback: RecordsListener) -> Callable[[], None]:
        """Register a listener; returns a function that removes it again."""
        self._subscribers.append(callback)

        def _unsubscribe() -> None:
            try:
                self._subscribers.remove(callback)
            except ValueError:
                pass

        return _unsubscribe

    def _notify(self) -> None:
        snapshot = self.records
        for cb in list(self._subscribers):
            cb(snapshot)
        self.records_changed.emit(snapshot)

    # --- Persistence ---

    def load(self) -> bool:
        """
        Replace the collection with the file contents.

        Returns False (collection untouched) when the file is absent,
        unreadable, malformed or does not match the schema.
        """
        if not self._repo.exists():
            logger.debug("No records file at %s; starting with %d record(s)", self.path, len(self._records))
            return False
        try:
            loaded = self._repo.read_records()
        except Exception as exc:
            logger.warning("Could not load records from %s: %s", self.path, exc)
            return False
        self._records = loaded
        logger.info("Loaded %d record(s) from %s", len(loaded), self.path)
        self._notify()
        return True

    def save(self) -> bool:
        """Overwrite the file with the full collection. Returns False on failure."""
        try:
            self._repo.write_records(self._records)
        except Exception as exc:
            logger.warning("Could not save records to %s: %s", self.path, exc)
            return False
        return True

    # --- Mutations ---

    def find(self, record_id: str) -> Optional[Record]:
        for rec in self._records:
            if rec.id == record_id:
                return rec
        return None

    def add(self, record: Record) -> None:
        if self.find(record.id) is not None:
            raise DuplicateRecordError(f"Record {record.id} already exists")
        self._records.append(record)
        self.save()
        self._notify()

    def update(self, record: Record) -> bool:
        """Replace the record with the same id in place. Unknown ids are ignored."""
        for i, rec in enumerate(self._records):
            if rec.id == record.id:
                self._records[i] = record
                self.save()
                self._notify()
                return True
        logger.debug("Update ignored; no record with id %s", record.id)
        return False

    def delete(self, indices: Iterable[int]) -> int:
        """
        Remove the records at the given positions (as they were before the call).

        Out-of-range positions are ignored. Returns the number removed.
        """
        count = len(self._records)
        targets = sorted({int(i) for i in indices if 0 <= int(i) < count}, reverse=True)
        if not targets:
            return 0
        for i in targets:
            del self._records[i]
        self.save()
        self._notify()
        return len(targets)
