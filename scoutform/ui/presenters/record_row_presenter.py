from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional

from ...app_services.form_codec import format_number, format_number_list
from ...domain.models import Record


def _yes_no(value: bool) -> str:
    return "Yes" if value else "No"


@dataclass
class RecordRowViewModel:
    record_id: str
    title: str
    detail: str
    numbers: Optional[str] = None

    @property
    def text(self) -> str:
        lines = [self.title, self.detail]
        if self.numbers:
            lines.append(self.numbers)
        return "\n".join(lines)


class RecordRowPresenter:
    """
    Turns records into list-row text.
    Keeps formatting rules out of the Qt widgets.
    """

    def compute_row(self, record: Record) -> RecordRowViewModel:
        detail = (
            f"Option: {record.selected_option}, "
            f"Scale1: {int(record.scale)}, "
            f"Scale2: {format_number(record.second_scale)}, "
            f"Yes/No1: {_yes_no(record.yes_or_no)}, "
            f"Yes/No2: {_yes_no(record.second_yes_or_no)}"
        )
        numbers = None
        if record.number_list:
            numbers = f"Numbers: {format_number_list(record.number_list)}"
        return RecordRowViewModel(
            record_id=record.id,
            title=record.name,
            detail=detail,
            numbers=numbers,
        )

    def compute_rows(self, records: List[Record]) -> List[RecordRowViewModel]:
        return [self.compute_row(r) for r in records]
