from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Iterable, List, Optional

from .. import config
from ..domain.models import (
    CustomOption,
    EnumeratedOption,
    OptionSelection,
    Record,
    ReservedOptionError,
    new_record_id,
)

# ASCII decimal literal: optional sign, digits with optional fraction, optional exponent.
# Rejects what float() tolerates beyond that (underscores, non-ASCII digits, nan/inf).
_DECIMAL_RE = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?")


@dataclass
class FormFields:
    """Editable widget state for one record form."""
    name: str = ""
    option: str = config.ROBOT_TYPES[0]  # picker label: a robot type or "Other"
    custom_option: str = ""
    scale: float = float(config.DEFAULT_SCALE)
    second_scale: float = config.DEFAULT_SECOND_SCALE
    additional_info: str = ""
    yes_or_no: bool = False
    second_yes_or_no: bool = False
    number_list_text: str = ""

    def validation_error(self) -> Optional[str]:
        """Message explaining why this form cannot be saved, or None."""
        try:
            self.selection()
        except ReservedOptionError:
            return f"Custom option cannot be \"{config.OPTION_OTHER}\"."
        return None

    def selection(self) -> OptionSelection:
        if self.option == config.OPTION_OTHER:
            return CustomOption(self.custom_option)
        if self.option in config.ROBOT_TYPES:
            return EnumeratedOption(self.option)
        return CustomOption(self.option)


def selection_for(stored_value: str) -> OptionSelection:
    if stored_value in config.ROBOT_TYPES:
        return EnumeratedOption(stored_value)
    return CustomOption(stored_value)


# --- Number lists ---

def parse_number_list(text: str) -> List[float]:
    """
    Parse comma-separated numbers, e.g. "1, 2.5, abc, 3" -> [1.0, 2.5, 3.0].

    Only plain ASCII decimal literals count; anything else ("abc", "1_000",
    full-width digits, "nan") is dropped silently, as are overflowing values.
    """
    out: List[float] = []
    for part in (text or "").split(","):
        token = part.strip()
        if not _DECIMAL_RE.fullmatch(token):
            continue
        value = float(token)
        if not math.isfinite(value):
            continue
        out.append(value)
    return out


def format_number(value: float) -> str:
    """
    Render one number for editing: integral values without a fractional
    part ("3"), everything else as the shortest round-tripping form ("2.5").
    """
    v = float(value)
    if v.is_integer() and abs(v) < 1e16:
        return str(int(v))
    return repr(v)


def format_number_list(values: Iterable[float]) -> str:
    return ", ".join(format_number(v) for v in values)


# --- Scales ---

def snap_to_step(value: float, minimum: float, maximum: float, step: float) -> float:
    """Clamp to [minimum, maximum] and round half-up to the nearest step from minimum."""
    try:
        v = float(value)
    except (TypeError, ValueError):
        return float(minimum)
    if math.isnan(v):
        return float(minimum)
    v = min(max(v, minimum), maximum)
    steps = math.floor((v - minimum) / step + 0.5)
    return float(min(max(minimum + steps * step, minimum), maximum))


def snap_scale(value: float) -> int:
    return int(snap_to_step(value, config.SCALE_MIN, config.SCALE_MAX, config.SCALE_STEP))


def snap_second_scale(value: float) -> float:
    return snap_to_step(value, config.SECOND_SCALE_MIN, config.SECOND_SCALE_MAX, config.SECOND_SCALE_STEP)


def format_second_scale(value: float) -> str:
    return f"{float(value):.2f}"


# --- Record <-> form ---

def decompose(record: Optional[Record] = None) -> FormFields:
    """Materialize form state from a record, or defaults for a new one."""
    if record is None:
        return FormFields()

    sel = selection_for(record.selected_option)
    if isinstance(sel, EnumeratedOption):
        option, custom = sel.value, ""
    else:
        option, custom = config.OPTION_OTHER, sel.text

    return FormFields(
        name=record.name,
        option=option,
        custom_option=custom,
        scale=float(record.scale),
        second_scale=float(record.second_scale),
        additional_info=record.additional_info,
        yes_or_no=bool(record.yes_or_no),
        second_yes_or_no=bool(record.second_yes_or_no),
        number_list_text=format_number_list(record.number_list),
    )


def compose(fields: FormFields, record_id: Optional[str] = None) -> Record:
    """
    Build a record from form state.

    Pass the existing id when editing; a fresh id is minted otherwise.
    Raises ReservedOptionError when the custom option text is "Other";
    check `fields.validation_error()` first.
    """
    return Record(
        id=record_id or new_record_id(),
        name=fields.name,
        selected_option=fields.selection().stored_value,
        scale=snap_scale(fields.scale),
        second_scale=snap_second_scale(fields.second_scale),
        additional_info=fields.additional_info,
        yes_or_no=bool(fields.yes_or_no),
        second_yes_or_no=bool(fields.second_yes_or_no),
        number_list=parse_number_list(fields.number_list_text),
    )
