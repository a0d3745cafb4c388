"""Tests for the JSON-backed record store."""

import json

import pytest

from scoutform.app_services.record_store import RecordStore
from scoutform.domain.models import DuplicateRecordError, Record


def _reload(path):
    """Simulate a fresh process reading the same file."""
    return RecordStore(str(path))


def _file_records(path):
    with open(path, "r", encoding="utf-8") as f:
        return [Record.from_dict(d) for d in json.load(f)]


class TestLoad:
    def test_missing_file_starts_empty(self, store, records_path):
        assert store.records == []
        assert not records_path.exists()

    def test_missing_file_does_not_create_it(self, store, records_path):
        assert store.load() is False
        assert not records_path.exists()

    def test_malformed_json_keeps_prior_collection(self, store, records_path, record_factory):
        rec = record_factory()
        store.add(rec)
        records_path.write_text("{not json", encoding="utf-8")
        assert store.load() is False
        assert store.records == [rec]

    def test_object_missing_name_is_total_failure(self, qapp, records_path, record_factory):
        good = record_factory(name="1111").to_dict()
        bad = record_factory(name="2222").to_dict()
        del bad["name"]
        records_path.write_text(json.dumps([good, bad]), encoding="utf-8")

        store = RecordStore(str(records_path))
        assert store.records == []

    def test_single_object_missing_name(self, qapp, records_path, record_factory):
        bad = record_factory().to_dict()
        del bad["name"]
        records_path.write_text(json.dumps([bad]), encoding="utf-8")
        assert RecordStore(str(records_path)).records == []

    @pytest.mark.parametrize(
        "key,value",
        [("selectedOption", "Other"), ("scale", 99), ("secondScale", 1.3)],
    )
    def test_invalid_values_fail_whole_load(self, qapp, records_path, record_factory, key, value):
        good = record_factory(name="1111").to_dict()
        bad = dict(record_factory(name="2222").to_dict(), **{key: value})
        records_path.write_text(json.dumps([good, bad]), encoding="utf-8")
        assert RecordStore(str(records_path)).records == []

    def test_old_schema_file_loads(self, qapp, records_path, record_factory):
        data = record_factory().to_dict()
        del data["secondScale"]
        del data["secondYesOrNo"]
        records_path.write_text(json.dumps([data]), encoding="utf-8")

        store = RecordStore(str(records_path))
        assert len(store) == 1
        assert store.records[0].second_scale == 0.0
        assert store.records[0].second_yes_or_no is False

    def test_autoload_disabled(self, qapp, records_path, record_factory):
        RecordStore(str(records_path)).add(record_factory())
        assert RecordStore(str(records_path), autoload=False).records == []


class TestAdd:
    def test_create_and_reload_scenario(self, store, records_path, record_factory):
        rec = record_factory(name="1234", option="Hero Bot", scale=7, yes_or_no=True, number_list=[])
        store.add(rec)

        assert len(store) == 1
        assert store.records[0] == rec

        reloaded = _reload(records_path)
        assert reloaded.records == [rec]
        assert reloaded.records[0].id == rec.id

    def test_appends_in_order(self, store, record_factory):
        names = ["100", "200", "300"]
        for n in names:
            store.add(record_factory(name=n))
        assert [r.name for r in store.records] == names

    def test_duplicate_id_rejected(self, store, record_factory):
        rec = record_factory()
        store.add(rec)
        with pytest.raises(DuplicateRecordError):
            store.add(record_factory(id=rec.id, name="other"))
        assert len(store) == 1

    def test_records_property_is_a_copy(self, store, record_factory):
        store.add(record_factory())
        store.records.clear()
        assert len(store) == 1


class TestUpdate:
    def test_replaces_in_place(self, store, records_path, record_factory):
        first, second, third = (record_factory(name=n) for n in ("1", "2", "3"))
        for r in (first, second, third):
            store.add(r)

        edited = record_factory(id=second.id, name="2b", option="Custom Thing", number_list=[4.0, 4.0])
        assert store.update(edited) is True

        assert [r.name for r in store.records] == ["1", "2b", "3"]
        assert store.records[1] == edited
        assert _file_records(records_path) == store.records

    def test_unknown_id_is_noop(self, store, records_path, record_factory):
        store.add(record_factory())
        before_mem = store.records
        before_file = records_path.read_text(encoding="utf-8")

        assert store.update(record_factory(name="ghost")) is False

        assert store.records == before_mem
        assert records_path.read_text(encoding="utf-8") == before_file


class TestDelete:
    @pytest.fixture
    def four(self, store, record_factory):
        recs = [record_factory(name=str(i)) for i in range(4)]
        for r in recs:
            store.add(r)
        return recs

    def test_multiple_indices(self, store, records_path, four):
        assert store.delete([0, 2]) == 2
        assert [r.id for r in store.records] == [four[1].id, four[3].id]
        assert _file_records(records_path) == store.records

    def test_order_of_indices_does_not_matter(self, store, four):
        store.delete([2, 0])
        assert [r.name for r in store.records] == ["1", "3"]

    def test_duplicates_and_out_of_range_ignored(self, store, four):
        assert store.delete([1, 1, 9, -1]) == 1
        assert [r.name for r in store.records] == ["0", "2", "3"]

    def test_nothing_to_delete_is_noop(self, store, four):
        calls = []
        store.subscribe(calls.append)
        assert store.delete([10]) == 0
        assert len(store) == 4
        assert calls == []

    def test_delete_all(self, store, records_path, four):
        store.delete(range(4))
        assert store.records == []
        assert _reload(records_path).records == []


class TestRoundTripFidelity:
    def test_file_matches_memory_after_each_operation(self, store, records_path, record_factory):
        a = record_factory(name="a", number_list=[1.5, -2.0, 1.5])
        b = record_factory(name="b", option="Swerve")
        c = record_factory(name="c", second_scale=2.75, second_yes_or_no=True)

        ops = [
            lambda: store.add(a),
            lambda: store.add(b),
            lambda: store.update(record_factory(id=a.id, name="a2", additional_info="notes")),
            lambda: store.add(c),
            lambda: store.delete([1]),
            lambda: store.update(record_factory(id=c.id, name="c2", scale=0)),
        ]
        for op in ops:
            op()
            assert _reload(records_path).records == store.records


class TestSaveFailure:
    def test_write_error_is_swallowed(self, qapp, tmp_path, record_factory):
        blocker = tmp_path / "blocker"
        blocker.write_text("", encoding="utf-8")
        store = RecordStore(str(blocker / "records.json"))

        rec = record_factory()
        store.add(rec)

        assert store.records == [rec]
        assert store.save() is False


class TestNotification:
    def test_subscribers_see_persisted_state(self, store, records_path, record_factory):
        seen = []

        def on_change(records):
            seen.append((len(records), _file_records(records_path)))

        store.subscribe(on_change)
        rec = record_factory()
        store.add(rec)

        assert seen == [(1, [rec])]

    def test_unsubscribe(self, store, record_factory):
        calls = []
        unsubscribe = store.subscribe(calls.append)
        store.add(record_factory())
        unsubscribe()
        unsubscribe()
        store.add(record_factory())
        assert len(calls) == 1

    def test_qt_signal_emitted(self, store, record_factory):
        received = []
        store.records_changed.connect(received.append)
        store.add(record_factory())
        store.delete([0])
        assert [len(r) for r in received] == [1, 0]

    def test_load_notifies(self, qapp, records_path, record_factory):
        RecordStore(str(records_path)).add(record_factory())
        store = RecordStore(str(records_path), autoload=False)
        calls = []
        store.subscribe(calls.append)
        assert store.load() is True
        assert len(calls) == 1
