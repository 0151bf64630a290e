"""Shape aggregated metrics into the series and rows a chart/table layer renders."""

from dataclasses import asdict, dataclass
from typing import Any

from .aggregator import aggregate
from .constants import (
    ACTION_PLAN,
    ALL_WEEKS,
    DISPOSITION_COLORS,
    KEY_INSIGHTS,
    SeriesLabel,
)
from .formatters import format_handle_time, format_minutes
from .models import AggregatedMetrics
from .store import RecordStore


@dataclass(frozen=True)
class SeriesPoint:
    """A labeled bar."""

    name: str
    value: float


@dataclass(frozen=True)
class PieSlice:
    """A labeled pie slice with its palette color."""

    name: str
    value: float
    color: str


@dataclass(frozen=True)
class TrendLine:
    """One line of the weekly trend chart."""

    key: str
    name: str
    color: str


@dataclass(frozen=True)
class TrendPoint:
    """Per-week disposition counts for the trend chart."""

    week: str
    answered: int
    abandoned: int
    missed: int


@dataclass(frozen=True)
class TableRow:
    """One row of the detailed weekly performance table."""

    week: str
    inbound: int
    answered: int
    abandoned: int
    missed: int
    avg_handle_time: float


TREND_LINES: tuple[TrendLine, ...] = (
    TrendLine("answered", "Answered Calls", DISPOSITION_COLORS[0]),
    TrendLine("abandoned", "Abandoned Calls", DISPOSITION_COLORS[1]),
    TrendLine("missed", "Missed Calls", DISPOSITION_COLORS[2]),
)

TABLE_HEADERS: tuple[str, ...] = (
    "Week",
    "Inbound",
    "Answered",
    "Abandoned",
    "Missed",
    "Avg Handle Time",
)


def bar_series(metrics: AggregatedMetrics) -> list[SeriesPoint]:
    """Call volume breakdown: inbound, answered, abandoned, missed."""
    totals = metrics.totals
    return [
        SeriesPoint(SeriesLabel.INBOUND, totals.inbound),
        SeriesPoint(SeriesLabel.ANSWERED, totals.answered),
        SeriesPoint(SeriesLabel.ABANDONED, totals.abandoned),
        SeriesPoint(SeriesLabel.MISSED, totals.missed),
    ]


def pie_series(metrics: AggregatedMetrics) -> list[PieSlice]:
    """Call disposition summary, colored by position."""
    totals = metrics.totals
    values = [
        (SeriesLabel.ANSWERED, totals.answered),
        (SeriesLabel.ABANDONED, totals.abandoned),
        (SeriesLabel.MISSED, totals.missed),
    ]
    return [
        PieSlice(name, value, DISPOSITION_COLORS[index])
        for index, (name, value) in enumerate(values)
    ]


def trend_series(store: RecordStore) -> list[TrendPoint]:
    """Per-week dispositions across every week, whatever the current selection."""
    return [
        TrendPoint(
            week=record.week_label,
            answered=record.answered,
            abandoned=record.abandoned,
            missed=record.missed,
        )
        for record in store.records()
    ]


def table_rows(store: RecordStore) -> list[TableRow]:
    """Detailed weekly performance rows for every week."""
    return [
        TableRow(
            week=record.week_label,
            inbound=record.inbound,
            answered=record.answered,
            abandoned=record.abandoned,
            missed=record.missed,
            avg_handle_time=record.avg_handle_time,
        )
        for record in store.records()
    ]


def executive_summary(metrics: AggregatedMetrics) -> list[str]:
    """Narrative paragraphs summarizing the selected weeks.

    Args:
        metrics: Aggregated metrics for the current selection.

    Returns:
        list[str]: Volume paragraph followed by the staffing paragraph.
    """
    totals = metrics.totals
    volume = (
        f"During the analysis period, over {totals.inbound} inbound calls were received. "
        f"Approximately {totals.answered} were successfully answered, while "
        f"{totals.abandoned} calls were abandoned and {totals.missed} were missed. "
        f"Average handle time held steady at "
        f"{format_handle_time(metrics.average_handle_time)} minutes."
    )
    staffing = (
        f"To manage the current call load efficiently, agents would need to collectively "
        f"handle {format_minutes(metrics.total_minutes_needed)} minutes of talk time. "
        f"Based on weekday call averages and agent availability, we recommend a minimum "
        f"of {metrics.required_agents} full-time dedicated operators."
    )
    return [volume, staffing]


@dataclass(frozen=True)
class ReportView:
    """Everything the report renderers need for one selection."""

    selection: str
    week_labels: list[str]
    metrics: AggregatedMetrics
    bars: list[SeriesPoint]
    pie: list[PieSlice]
    trend: list[TrendPoint]
    table: list[TableRow]
    summary: list[str]
    action_plan: tuple[str, ...] = ACTION_PLAN
    key_insights: str = KEY_INSIGHTS
    trend_lines: tuple[TrendLine, ...] = TREND_LINES

    def to_dict(self) -> dict[str, Any]:
        """Convert the view to a dictionary for serialization."""
        return {
            "selection": self.selection,
            "week_labels": list(self.week_labels),
            "metrics": self.metrics.to_dict(),
            "bars": [asdict(point) for point in self.bars],
            "pie": [asdict(slice_) for slice_ in self.pie],
            "trend": [asdict(point) for point in self.trend],
            "table": [asdict(row) for row in self.table],
            "summary": list(self.summary),
            "action_plan": list(self.action_plan),
            "key_insights": self.key_insights,
        }


def build_report_view(store: RecordStore, selection: str = ALL_WEEKS) -> ReportView:
    """Aggregate ``selection`` and shape every report section.

    Raises:
        UnknownWeek: If ``selection`` names a week the store does not hold.
    """
    metrics = aggregate(store, selection)
    return ReportView(
        selection=selection,
        week_labels=store.all_week_labels(),
        metrics=metrics,
        bars=bar_series(metrics),
        pie=pie_series(metrics),
        trend=trend_series(store),
        table=table_rows(store),
        summary=executive_summary(metrics),
    )
