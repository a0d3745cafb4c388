from __future__ import annotations

import os

from . import config


def records_dir() -> str:
    """
    Return the folder that holds the records file (does not create it).

    Defaults to the user's documents folder so the data survives reinstalls;
    `RECORDS_DIR` overrides it.
    """
    raw = (config.RECORDS_DIR or "").strip()
    if not raw:
        return os.path.join(os.getcwd(), "ScoutForm")
    return os.path.abspath(os.path.expanduser(raw))


def records_file_path() -> str:
    """Return the absolute path of the JSON records file."""
    name = (config.RECORDS_FILE_NAME or "").strip() or "records.json"
    return os.path.join(records_dir(), name)
