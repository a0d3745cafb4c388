import os
from typing import List


# Storage location
# The records file lives in the user's documents folder unless overridden.
RECORDS_DIR: str = os.environ.get("RECORDS_DIR", os.path.join(os.path.expanduser("~"), "Documents", "ScoutForm"))
RECORDS_FILE_NAME: str = os.environ.get("RECORDS_FILE_NAME", "records.json")

LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "INFO").strip().upper() or "INFO"


# Robot type picker
# "Other" is only a picker label; the custom text is stored in its place.
ROBOT_TYPES: List[str] = [
    "Hero Bot",
    "Improved Hero Bot",
    "Backroller w/ T Fling",
    "Backroller Bot",
    "Dual Flywheel",
    "Single Flywheel",
]
OPTION_OTHER: str = "Other"


# Intake speed slider (whole steps)
SCALE_MIN: int = 0
SCALE_MAX: int = 10
SCALE_STEP: int = 1
DEFAULT_SCALE: int = 5

# Maximum distance from the wall, in feet (quarter-foot steps)
SECOND_SCALE_MIN: float = 0.0
SECOND_SCALE_MAX: float = 3.0
SECOND_SCALE_STEP: float = 0.25
DEFAULT_SECOND_SCALE: float = 0.0


# Form labels
LABEL_NAME: str = "Team Number"
LABEL_OPTION: str = "Robot Type"
LABEL_CUSTOM_OPTION: str = "Custom Option"
LABEL_SCALE: str = "Intake Speed"
LABEL_SECOND_SCALE: str = "Maximum Distance from cl. wall (ft)"
LABEL_YES_OR_NO: str = "Able to China Load"
LABEL_SECOND_YES_OR_NO: str = "Can start in center"
NUMBER_LIST_PLACEHOLDER: str = "Comma-separated numbers (e.g. 1, 2.5, 3)"
ADDITIONAL_INFO_PLACEHOLDER: str = "More info"


# Window defaults
WINDOW_WIDTH: int = int(os.environ.get("WINDOW_WIDTH", "520"))
WINDOW_HEIGHT: int = int(os.environ.get("WINDOW_HEIGHT", "640"))
