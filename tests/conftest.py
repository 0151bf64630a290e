import pytest

from call_report.store import RecordStore


@pytest.fixture
def store():
    return RecordStore.seed()


@pytest.fixture
def empty_store():
    return RecordStore()


@pytest.fixture
def make_row():
    def _make_row(week="05/05-05/09", **overrides):
        row = {
            "Week": week,
            "Inbound": 1000,
            "Answered": 650,
            "Abandoned": 150,
            "Missed": 180,
            "Avg Handle Time": 4.0,
            "Staff Needed": 2,
        }
        row.update(overrides)
        return row

    return _make_row
