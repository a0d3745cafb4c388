import os

import pytest

# Widgets are created in tests; no display is available on CI.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PySide6 import QtWidgets  # noqa: E402

from scoutform.app_services.record_store import RecordStore  # noqa: E402
from scoutform.domain.models import Record, new_record_id  # noqa: E402


@pytest.fixture(scope="session")
def qapp():
    app = QtWidgets.QApplication.instance()
    if app is None:
        app = QtWidgets.QApplication([])
    return app


@pytest.fixture
def records_path(tmp_path):
    return tmp_path / "records.json"


@pytest.fixture
def store(qapp, records_path):
    return RecordStore(str(records_path))


def make_record(name="1234", option="Hero Bot", **overrides):
    values = dict(
        id=new_record_id(),
        name=name,
        selected_option=option,
        scale=7,
        additional_info="",
        yes_or_no=True,
        number_list=[],
        second_scale=1.25,
        second_yes_or_no=False,
    )
    values.update(overrides)
    return Record(**values)


@pytest.fixture
def record_factory():
    return make_record
