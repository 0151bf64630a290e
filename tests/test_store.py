import dataclasses

import pytest

from call_report.errors import MalformedRecord, UnknownWeek
from call_report.models import WeeklyCallRecord
from call_report.store import RecordStore, map_row, normalize_column, parse_row


def test_seed_holds_reference_weeks(store):
    assert store.all_week_labels() == ["04/07-04/11", "04/14-04/18", "04/21-04/25"]
    assert store.get("04/14-04/18") == WeeklyCallRecord(
        "04/14-04/18", 1065, 671, 195, 196, 4.23, 2
    )


def test_seed_returns_independent_stores(make_row):
    first = RecordStore.seed()
    second = RecordStore.seed()
    first.import_rows([make_row()])

    assert len(first) == 4
    assert len(second) == 3


def test_get_unknown_week(store):
    with pytest.raises(UnknownWeek):
        store.get("12/01-12/05")


def test_records_are_immutable(store):
    record = store.get("04/07-04/11")
    with pytest.raises(dataclasses.FrozenInstanceError):
        record.inbound = 0


def test_import_existing_label_overwrites_in_place(store, make_row):
    original = store.get("04/07-04/11")

    result = store.import_rows([make_row(week="04/07-04/11", Inbound=1200)])

    assert result.ok
    assert result.updated == ["04/07-04/11"]
    assert result.added == []
    assert len(store) == 3
    assert store.all_week_labels() == ["04/07-04/11", "04/14-04/18", "04/21-04/25"]
    assert store.get("04/07-04/11").inbound == 1200
    assert store.get("04/14-04/18").inbound == 1065
    assert original.inbound == 1148


def test_import_new_label_appends(store, make_row):
    result = store.import_rows([make_row(week="04/28-05/02")])

    assert result.added == ["04/28-05/02"]
    assert len(store) == 4
    assert store.all_week_labels()[-1] == "04/28-05/02"
    assert store.version == 1


def test_import_preserves_file_order(store, make_row):
    store.import_rows([make_row(week="B"), make_row(week="A")])

    assert store.all_week_labels()[-2:] == ["B", "A"]


def test_import_last_write_wins_within_batch(store, make_row):
    result = store.import_rows([make_row(week="X", Inbound=10), make_row(week="X", Inbound=20)])

    assert store.get("X").inbound == 20
    assert result.added == ["X"]
    assert result.updated == []


def test_malformed_row_is_skipped_and_valid_row_applied(store, make_row):
    rows = [make_row(week="bad", Inbound="not-a-number"), make_row(week="good")]

    result = store.import_rows(rows)

    assert len(result.errors) == 1
    error = result.errors[0]
    assert isinstance(error, MalformedRecord)
    assert error.row_index == 0
    assert any("inbound" in problem for problem in error.problems)
    assert "good" in store
    assert "bad" not in store
    assert not result.ok


def test_missing_required_field(make_row):
    row = make_row()
    del row["Answered"]

    with pytest.raises(MalformedRecord) as exc_info:
        parse_row(row, row_index=4)

    assert exc_info.value.row_index == 4
    assert any(problem.startswith("answered") for problem in exc_info.value.problems)


@pytest.mark.parametrize(
    "overrides",
    [
        {"Missed": -1},
        {"Avg Handle Time": 0},
        {"Avg Handle Time": float("inf")},
        {"Inbound": 12.5},
        {"Week": "   "},
        {"Abandoned": None},
        {"Inbound": float("nan")},
        {"Inbound": True},
        {"Avg Handle Time": True},
    ],
)
def test_invalid_values_are_rejected(make_row, overrides):
    with pytest.raises(MalformedRecord):
        parse_row(make_row(**overrides), row_index=0)


def test_non_mapping_row_is_malformed():
    with pytest.raises(MalformedRecord):
        parse_row(["04/07-04/11", 1], row_index=2)


def test_numeric_strings_and_whole_floats_are_accepted(make_row):
    record = parse_row(make_row(Inbound="1100", Answered=700.0, **{"Avg Handle Time": "4.25"}), row_index=0)

    assert record.inbound == 1100
    assert record.answered == 700
    assert record.avg_handle_time == 4.25


def test_staff_needed_is_optional(make_row):
    row = make_row()
    del row["Staff Needed"]

    assert parse_row(row, row_index=0).staff_needed == 0


def test_numeric_week_label_becomes_text(make_row):
    assert parse_row(make_row(week=17), row_index=0).week_label == "17"


def test_column_aliases_are_case_and_punctuation_insensitive():
    row = {
        "week_label": "W1",
        "INBOUND CALLS": 10,
        "answered": 5,
        "Abandoned": 2,
        "missed": 1,
        "AHT": 3.5,
        "Notes": "ignored",
    }

    assert map_row(row) == {
        "week_label": "W1",
        "inbound": 10,
        "answered": 5,
        "abandoned": 2,
        "missed": 1,
        "avg_handle_time": 3.5,
    }


def test_normalize_column():
    assert normalize_column(" Avg. Handle-Time ") == "avghandletime"
    assert normalize_column("weekLabel") == "weeklabel"


def test_failed_batch_leaves_store_untouched(store, make_row):
    before = store.records()

    result = store.import_rows([make_row(Inbound="x"), {"Week": "only a label"}])

    assert len(result.errors) == 2
    assert result.records == []
    assert store.records() == before
    assert store.version == 0


def test_replace_import_rebuilds_store(store, make_row):
    store.import_rows([make_row(week="W1"), make_row(week="W2")], replace=True)

    assert store.all_week_labels() == ["W1", "W2"]


def test_replace_import_with_no_valid_rows_keeps_store(store, make_row):
    store.import_rows([make_row(Inbound="x")], replace=True)

    assert len(store) == 3
