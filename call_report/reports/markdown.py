"""Markdown rendering of the call center report."""

from ..constants import ALL_WEEKS
from ..formatters import format_handle_time, format_minutes, format_rate, markdown_table
from ..presentation import TABLE_HEADERS, ReportView


def render_markdown(view: ReportView) -> str:
    """Render the full report as Markdown.

    Args:
        view: Report view for the current selection.

    Returns:
        str: The Markdown document.
    """
    metrics = view.metrics
    weeks_label = "All weeks" if view.selection == ALL_WEEKS else view.selection

    lines = [
        "# Call Center Performance Analysis",
        "",
        f"**Selection:** {weeks_label} ({metrics.week_count} week(s))",
        "",
        "---",
        "",
        "## Executive Summary",
        "",
    ]
    for paragraph in view.summary:
        lines.extend([paragraph, ""])

    lines.extend(
        [
            f"**Recommended staffing:** {metrics.required_agents} full-time dedicated operators",
            "",
            "---",
            "",
            "## Key Metrics",
            "",
        ]
    )
    lines.extend(
        markdown_table(
            ["Metric", "Value"],
            [
                ["Inbound Calls", str(metrics.totals.inbound)],
                ["Answered Calls", str(metrics.totals.answered)],
                ["Abandoned Calls", str(metrics.totals.abandoned)],
                ["Missed Calls", str(metrics.totals.missed)],
                ["Avg Handle Time", f"{format_handle_time(metrics.average_handle_time)} min"],
                ["Calls per Weekday", format_rate(metrics.calls_per_weekday)],
                ["Talk Minutes Needed", format_minutes(metrics.total_minutes_needed)],
                ["Required Agents", str(metrics.required_agents)],
            ],
        )
    )

    lines.extend(["", "## Call Volume Breakdown", ""])
    lines.extend(
        markdown_table(
            ["Category", "Calls"],
            [[str(point.name), f"{point.value:g}"] for point in view.bars],
        )
    )

    lines.extend(["", "## Call Disposition Summary", ""])
    disposition_total = sum(slice_.value for slice_ in view.pie)
    lines.extend(
        markdown_table(
            ["Disposition", "Calls", "Share"],
            [
                [
                    str(slice_.name),
                    f"{slice_.value:g}",
                    f"{slice_.value / disposition_total * 100:.1f}%"
                    if disposition_total
                    else "0.0%",
                ]
                for slice_ in view.pie
            ],
        )
    )

    lines.extend(["", "## Weekly Trends", ""])
    lines.extend(
        markdown_table(
            ["Week", *(line.name for line in view.trend_lines)],
            [
                [point.week, *(str(getattr(point, line.key)) for line in view.trend_lines)]
                for point in view.trend
            ],
        )
    )

    lines.extend(["", "## Detailed Weekly Performance", ""])
    lines.extend(
        markdown_table(
            list(TABLE_HEADERS),
            [
                [
                    row.week,
                    str(row.inbound),
                    str(row.answered),
                    str(row.abandoned),
                    str(row.missed),
                    f"{format_handle_time(row.avg_handle_time)} min",
                ]
                for row in view.table
            ],
        )
    )

    lines.extend(["", "---", "", "## Strategic Action Plan", ""])
    lines.extend(f"- {item}" for item in view.action_plan)

    lines.extend(["", "## Summary of Key Insights", "", view.key_insights, ""])

    return "\n".join(lines)
