from __future__ import annotations

import sys
import logging

from . import config, project_paths

logging.basicConfig(
    level=getattr(logging, config.LOG_LEVEL, logging.INFO),
    format='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
    datefmt='%H:%M:%S'
)

_logger = logging.getLogger(__name__)


def run_qt() -> int:
    from PySide6 import QtWidgets  # type: ignore
    from .app_services.record_store import RecordStore
    from .ui.main_window import MainWindow

    app = QtWidgets.QApplication(sys.argv)
    app.setApplicationName("ScoutForm")

    path = project_paths.records_file_path()
    _logger.info("Records file: %s", path)
    store = RecordStore(path)

    win = MainWindow(store)
    win.show()

    rc = app.exec()
    _logger.info("Exiting with %d record(s)", len(store))
    return int(rc)


def main() -> int:
    try:
        import PySide6  # noqa: F401
    except ImportError as exc:
        raise RuntimeError("PySide6 is required to run the scouting form.") from exc
    return run_qt()


if __name__ == "__main__":
    raise SystemExit(main())
