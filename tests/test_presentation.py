import json

from call_report.aggregator import aggregate
from call_report.constants import DISPOSITION_COLORS
from call_report.formatters import format_handle_time, format_minutes, format_rate
from call_report.presentation import (
    TREND_LINES,
    bar_series,
    build_report_view,
    executive_summary,
    pie_series,
    table_rows,
    trend_series,
)


def test_bar_series_lists_volume_totals(store):
    points = bar_series(aggregate(store))

    assert [(p.name, p.value) for p in points] == [
        ("Inbound", 3252),
        ("Answered", 1978),
        ("Abandoned", 594),
        ("Missed", 675),
    ]


def test_pie_series_colors_by_position(store):
    slices = pie_series(aggregate(store, "04/14-04/18"))

    assert [s.name for s in slices] == ["Answered", "Abandoned", "Missed"]
    assert [s.value for s in slices] == [671, 195, 196]
    assert [s.color for s in slices] == ["#4CAF50", "#F44336", "#FF9800"]
    assert tuple(s.color for s in slices) == DISPOSITION_COLORS


def test_trend_series_covers_every_week(store):
    view = build_report_view(store, "04/21-04/25")

    assert [p.week for p in view.trend] == store.all_week_labels()
    assert view.trend[0].answered == 703
    assert view.trend[1].abandoned == 195
    assert view.trend[2].missed == 223
    assert [line.key for line in TREND_LINES] == ["answered", "abandoned", "missed"]


def test_table_rows_match_records(store):
    rows = table_rows(store)

    assert len(rows) == 3
    assert rows[0].week == "04/07-04/11"
    assert rows[0].inbound == 1148
    assert rows[2].avg_handle_time == 3.76


def test_series_for_empty_store(empty_store):
    metrics = aggregate(empty_store)

    assert all(point.value == 0 for point in bar_series(metrics))
    assert all(slice_.value == 0 for slice_ in pie_series(metrics))
    assert trend_series(empty_store) == []
    assert table_rows(empty_store) == []


def test_executive_summary_mentions_key_figures(store):
    volume, staffing = executive_summary(aggregate(store))

    assert "over 3252 inbound calls" in volume
    assert "594 calls were abandoned and 675 were missed" in volume
    assert "4.03 minutes" in volume
    assert "7971 minutes of talk time" in staffing
    assert "minimum of 3 full-time dedicated operators" in staffing


def test_report_view_is_json_serializable(store):
    view = build_report_view(store)
    data = json.loads(json.dumps(view.to_dict()))

    assert data["selection"] == "All"
    assert data["metrics"]["required_agents"] == 3
    assert data["metrics"]["totals"]["inbound"] == 3252
    assert data["pie"][0]["color"] == "#4CAF50"
    assert len(data["action_plan"]) == 5


def test_formatters_round_ties_up():
    assert format_handle_time(4.125) == "4.13"
    assert format_minutes(2890.5) == "2891"
    assert format_rate(216.8) == "216.8"
