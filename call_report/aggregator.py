"""Reduce a selection of weekly call records into summary metrics."""

import math

from loguru import logger

from .constants import (
    ALL_WEEKS,
    AVAILABLE_MINUTES_PER_AGENT,
    HANDLE_TIME_DECIMALS,
    WORKDAYS_PER_WEEK,
    LogMessage,
)
from .formatters import round_half_up
from .models import AggregatedMetrics, CallTotals
from .store import RecordStore


def resolve_weeks(store: RecordStore, selection: str = ALL_WEEKS) -> list[str]:
    """Resolve a selection to the concrete list of week labels.

    Args:
        store: Record store to resolve against.
        selection: ``"All"`` or a single week label.

    Returns:
        list[str]: Week labels in store enumeration order.

    Raises:
        UnknownWeek: If ``selection`` names a week the store does not hold.
    """
    if selection == ALL_WEEKS:
        return store.all_week_labels()
    store.get(selection)
    return [selection]


def aggregate(
    store: RecordStore,
    selection: str = ALL_WEEKS,
    *,
    available_minutes_per_agent: int = AVAILABLE_MINUTES_PER_AGENT,
) -> AggregatedMetrics:
    """Aggregate the selected weeks into totals and staffing metrics.

    Handle time is summed across weeks and divided by the week count, so every
    week weighs the same regardless of its call volume. The average is rounded
    half up to two decimals before it feeds the minutes and agent calculations.

    Args:
        store: Record store holding the weekly records.
        selection: ``"All"`` or a single week label.
        available_minutes_per_agent: Minutes of agent availability per weekday.

    Returns:
        AggregatedMetrics: Derived metrics. All derived values are zero when
        no weeks are selected.

    Raises:
        UnknownWeek: If ``selection`` names a week the store does not hold.
    """
    weeks = resolve_weeks(store, selection)
    logger.debug(LogMessage.AGGREGATING.format(len(weeks), selection))

    totals = CallTotals()
    for week in weeks:
        totals = totals.add(store.get(week))

    if not weeks:
        return AggregatedMetrics(selection=selection, totals=totals)

    average_handle_time = round_half_up(
        totals.avg_handle_time / len(weeks), HANDLE_TIME_DECIMALS
    )
    calls_per_weekday = totals.inbound / (WORKDAYS_PER_WEEK * len(weeks))
    total_minutes_needed = totals.answered * average_handle_time
    required_agents = math.ceil(
        (calls_per_weekday * average_handle_time) / available_minutes_per_agent
    )

    return AggregatedMetrics(
        selection=selection,
        weeks=tuple(weeks),
        totals=totals,
        average_handle_time=average_handle_time,
        calls_per_weekday=calls_per_weekday,
        total_minutes_needed=total_minutes_needed,
        required_agents=required_agents,
    )
