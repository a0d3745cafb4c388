from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List, Union
import math
import uuid

from .. import config

# --- JSON keys ---
KEY_ID = "id"
KEY_NAME = "name"
KEY_SELECTED_OPTION = "selectedOption"
KEY_SCALE = "scale"
KEY_SECOND_SCALE = "secondScale"
KEY_ADDITIONAL_INFO = "additionalInfo"
KEY_YES_OR_NO = "yesOrNo"
KEY_SECOND_YES_OR_NO = "secondYesOrNo"
KEY_NUMBER_LIST = "numberList"

REQUIRED_KEYS = (
    KEY_ID,
    KEY_NAME,
    KEY_SELECTED_OPTION,
    KEY_SCALE,
    KEY_ADDITIONAL_INFO,
    KEY_YES_OR_NO,
    KEY_NUMBER_LIST,
)

# Keys added by the newer schema; filled with these values when absent.
OPTIONAL_DEFAULTS: Dict[str, Any] = {
    KEY_SECOND_SCALE: 0.0,
    KEY_SECOND_YES_OR_NO: False,
}


class RecordSchemaError(ValueError):
    """Raised when persisted data does not match the record schema."""


class DuplicateRecordError(ValueError):
    """Raised when adding a record whose id is already in the store."""


class ReservedOptionError(ValueError):
    """Raised when custom option text is the "Other" picker label itself."""


def new_record_id() -> str:
    # Upper-case, matching ids written by the mobile app
    return str(uuid.uuid4()).upper()


# --- Helper Functions ---
def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _require_str(data: Dict[str, Any], key: str) -> str:
    value = data[key]
    if not isinstance(value, str):
        raise RecordSchemaError(f"'{key}' must be a string, got {type(value).__name__}")
    return value


def _require_bool(data: Dict[str, Any], key: str) -> bool:
    value = data[key]
    if not isinstance(value, bool):
        raise RecordSchemaError(f"'{key}' must be a boolean, got {type(value).__name__}")
    return value


def _require_float(data: Dict[str, Any], key: str) -> float:
    value = data[key]
    if not _is_number(value) or not math.isfinite(value):
        raise RecordSchemaError(f"'{key}' must be a finite number, got {value!r}")
    return float(value)


def _require_int(data: Dict[str, Any], key: str) -> int:
    value = data[key]
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if not isinstance(value, int) or isinstance(value, bool):
        raise RecordSchemaError(f"'{key}' must be an integer, got {value!r}")
    return value


def _require_option(data: Dict[str, Any]) -> str:
    value = _require_str(data, KEY_SELECTED_OPTION)
    if value == config.OPTION_OTHER:
        raise RecordSchemaError(f"'{KEY_SELECTED_OPTION}' holds the reserved picker label {value!r}")
    return value


def _require_bounded_int(data: Dict[str, Any], key: str, minimum: int, maximum: int) -> int:
    value = _require_int(data, key)
    if not minimum <= value <= maximum:
        raise RecordSchemaError(f"'{key}' must be within [{minimum}, {maximum}], got {value}")
    return value


def _require_stepped_float(data: Dict[str, Any], key: str, minimum: float, maximum: float, step: float) -> float:
    value = _require_float(data, key)
    if not minimum <= value <= maximum:
        raise RecordSchemaError(f"'{key}' must be within [{minimum}, {maximum}], got {value}")
    steps = (value - minimum) / step
    if abs(steps - round(steps)) > 1e-9:
        raise RecordSchemaError(f"'{key}' must be a multiple of {step} from {minimum}, got {value}")
    return value


def _require_id(data: Dict[str, Any]) -> str:
    value = _require_str(data, KEY_ID)
    try:
        uuid.UUID(value)
    except ValueError as exc:
        raise RecordSchemaError(f"'{KEY_ID}' is not a UUID: {value!r}") from exc
    return value


def _require_number_list(data: Dict[str, Any], key: str) -> List[float]:
    value = data[key]
    if not isinstance(value, list):
        raise RecordSchemaError(f"'{key}' must be a list, got {type(value).__name__}")
    out: List[float] = []
    for item in value:
        if not _is_number(item) or not math.isfinite(item):
            raise RecordSchemaError(f"'{key}' entries must be finite numbers, got {item!r}")
        out.append(float(item))
    return out


# --- Option Selection ---

@dataclass(frozen=True)
class EnumeratedOption:
    """One of the fixed robot types."""
    value: str

    @property
    def stored_value(self) -> str:
        return self.value


@dataclass(frozen=True)
class CustomOption:
    """Free text typed by the user after picking "Other"."""
    text: str

    def __post_init__(self) -> None:
        if self.text == config.OPTION_OTHER:
            raise ReservedOptionError(f"{config.OPTION_OTHER!r} is a picker label, not a robot type")

    @property
    def stored_value(self) -> str:
        return self.text


OptionSelection = Union[EnumeratedOption, CustomOption]


# --- Record ---

@dataclass
class Record:
    """One scouting entry for a team."""
    id: str
    name: str
    selected_option: str
    scale: int
    additional_info: str
    yes_or_no: bool
    number_list: List[float] = field(default_factory=list)
    second_scale: float = config.DEFAULT_SECOND_SCALE
    second_yes_or_no: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            KEY_ID: self.id,
            KEY_NAME: self.name,
            KEY_SELECTED_OPTION: self.selected_option,
            KEY_SCALE: int(self.scale),
            KEY_SECOND_SCALE: float(self.second_scale),
            KEY_ADDITIONAL_INFO: self.additional_info,
            KEY_YES_OR_NO: bool(self.yes_or_no),
            KEY_SECOND_YES_OR_NO: bool(self.second_yes_or_no),
            KEY_NUMBER_LIST: [float(v) for v in self.number_list],
        }

    @classmethod
    def from_dict(cls, data: Any) -> "Record":
        """
        Decode one persisted record.

        Accepts both schema variants: `secondScale` and `secondYesOrNo` may be
        absent and then take their defaults. Anything else missing, mistyped,
        out of slider range or off the slider step raises RecordSchemaError,
        as does the "Other" picker label in place of a robot type.
        """
        if not isinstance(data, dict):
            raise RecordSchemaError(f"record must be an object, got {type(data).__name__}")
        missing = [k for k in REQUIRED_KEYS if k not in data]
        if missing:
            raise RecordSchemaError(f"record is missing required field(s): {', '.join(missing)}")

        merged = dict(OPTIONAL_DEFAULTS)
        merged.update(data)

        return cls(
            id=_require_id(merged),
            name=_require_str(merged, KEY_NAME),
            selected_option=_require_option(merged),
            scale=_require_bounded_int(merged, KEY_SCALE, config.SCALE_MIN, config.SCALE_MAX),
            additional_info=_require_str(merged, KEY_ADDITIONAL_INFO),
            yes_or_no=_require_bool(merged, KEY_YES_OR_NO),
            number_list=_require_number_list(merged, KEY_NUMBER_LIST),
            second_scale=_require_stepped_float(
                merged,
                KEY_SECOND_SCALE,
                config.SECOND_SCALE_MIN,
                config.SECOND_SCALE_MAX,
                config.SECOND_SCALE_STEP,
            ),
            second_yes_or_no=_require_bool(merged, KEY_SECOND_YES_OR_NO),
        )
