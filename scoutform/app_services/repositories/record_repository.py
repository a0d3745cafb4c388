from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Iterable, List, Union

from ...domain.models import Record, RecordSchemaError


def _read_json(path: Path) -> Any:
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def _write_json(path: Path, data: Any) -> None:
    # Serialize before opening so a bad payload never truncates the file
    text = json.dumps(data, indent=2, ensure_ascii=False, allow_nan=False)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write(text)


def decode_records(payload: Any) -> List[Record]:
    """
    Decode a whole records array. Fails as a unit: one bad element rejects
    the entire payload.
    """
    if not isinstance(payload, list):
        raise RecordSchemaError(f"records file must hold a JSON array, got {type(payload).__name__}")
    records: List[Record] = []
    seen: set[str] = set()
    for i, item in enumerate(payload):
        try:
            rec = Record.from_dict(item)
        except RecordSchemaError as exc:
            raise RecordSchemaError(f"record #{i}: {exc}") from exc
        if rec.id in seen:
            raise RecordSchemaError(f"record #{i}: duplicate id {rec.id}")
        seen.add(rec.id)
        records.append(rec)
    return records


class RecordFileRepository:
    """
    Reads and writes the full records array as a single JSON document.

    Errors propagate; the store decides what to swallow.
    """

    def __init__(self, path: Union[str, Path]) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def exists(self) -> bool:
        return self._path.is_file()

    def read_records(self) -> List[Record]:
        return decode_records(_read_json(self._path))

    def write_records(self, records: Iterable[Record]) -> None:
        _write_json(self._path, [r.to_dict() for r in records])
