"""PDF rendering of the call center report."""

from datetime import datetime
from pathlib import Path

from loguru import logger
from reportlab.lib import colors
from reportlab.lib.pagesizes import letter
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import inch
from reportlab.platypus import (
    Flowable,
    Paragraph,
    SimpleDocTemplate,
    Spacer,
    Table,
    TableStyle,
)

from ..constants import ALL_WEEKS
from ..formatters import escape_markup, format_handle_time, format_minutes, format_rate
from ..presentation import TABLE_HEADERS, ReportView
from .charts import bar_chart, pie_chart, trend_chart

HEADER_TABLE_STYLE = [
    ("BACKGROUND", (0, 0), (-1, 0), colors.grey),
    ("TEXTCOLOR", (0, 0), (-1, 0), colors.whitesmoke),
    ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
    ("FONTSIZE", (0, 0), (-1, 0), 10),
    ("BOTTOMPADDING", (0, 0), (-1, 0), 8),
    ("GRID", (0, 0), (-1, -1), 1, colors.black),
]


def generate_pdf_report(view: ReportView, output_path: Path) -> None:
    """Generate a printable PDF version of the report.

    Args:
        view: Report view for the current selection.
        output_path: Path where the PDF should be saved.
    """
    logger.info("Generating PDF report...")

    output_path.parent.mkdir(parents=True, exist_ok=True)

    doc = SimpleDocTemplate(
        str(output_path),
        pagesize=letter,
        rightMargin=0.75 * inch,
        leftMargin=0.75 * inch,
        topMargin=0.75 * inch,
        bottomMargin=0.75 * inch,
    )

    styles = getSampleStyleSheet()
    title_style = ParagraphStyle(
        "ReportTitle",
        parent=styles["Heading1"],
        fontSize=22,
        textColor=colors.HexColor("#1f77b4"),
        spaceAfter=20,
    )
    heading_style = ParagraphStyle(
        "ReportHeading", parent=styles["Heading2"], fontSize=15, spaceAfter=10
    )

    metrics = view.metrics
    weeks_label = "All weeks" if view.selection == ALL_WEEKS else view.selection

    story: list[Flowable] = []

    story.append(Paragraph("Call Center Performance Analysis", title_style))
    story.append(
        Paragraph(
            f"Selection: {escape_markup(weeks_label)} | "
            f"Generated: {datetime.now().strftime('%Y-%m-%d %H:%M')}",
            styles["Normal"],
        )
    )
    story.append(Spacer(1, 0.3 * inch))

    # Executive Summary
    story.append(Paragraph("Executive Summary", heading_style))
    for paragraph in view.summary:
        story.append(Paragraph(escape_markup(paragraph), styles["Normal"]))
        story.append(Spacer(1, 0.1 * inch))
    story.append(
        Paragraph(
            f"<font color='#d32f2f'><b>Recommended minimum: {metrics.required_agents} "
            f"full-time dedicated operators</b></font>",
            styles["Normal"],
        )
    )
    story.append(Spacer(1, 0.2 * inch))

    metrics_data = [
        ["Metric", "Value"],
        ["Inbound Calls", str(metrics.totals.inbound)],
        ["Answered Calls", str(metrics.totals.answered)],
        ["Abandoned Calls", str(metrics.totals.abandoned)],
        ["Missed Calls", str(metrics.totals.missed)],
        ["Avg Handle Time", f"{format_handle_time(metrics.average_handle_time)} min"],
        ["Calls per Weekday", format_rate(metrics.calls_per_weekday)],
        ["Talk Minutes Needed", format_minutes(metrics.total_minutes_needed)],
        ["Required Agents", str(metrics.required_agents)],
    ]
    metrics_table = Table(metrics_data, colWidths=[3.0 * inch, 2.5 * inch])
    metrics_table.setStyle(TableStyle([*HEADER_TABLE_STYLE, ("ALIGN", (0, 0), (-1, -1), "LEFT")]))
    story.append(metrics_table)
    story.append(Spacer(1, 0.3 * inch))

    # Charts
    story.append(Paragraph("Call Volume Breakdown", heading_style))
    story.append(bar_chart(view.bars))
    story.append(
        Paragraph(
            "This bar chart illustrates the volume of inbound, answered, abandoned, "
            "and missed calls.",
            styles["Italic"],
        )
    )
    story.append(Spacer(1, 0.2 * inch))

    story.append(Paragraph("Call Disposition Summary", heading_style))
    pie = pie_chart(view.pie)
    if pie is not None:
        story.append(pie)
        story.append(
            Paragraph(
                "This pie chart summarizes call disposition data for the selected week(s).",
                styles["Italic"],
            )
        )
    else:
        story.append(Paragraph("No calls recorded for this selection.", styles["Italic"]))
    story.append(Spacer(1, 0.2 * inch))

    story.append(Paragraph("Weekly Trends", heading_style))
    trend = trend_chart(view.trend, view.trend_lines)
    if trend is not None:
        story.append(trend)
        story.append(
            Paragraph(
                "This chart illustrates the trends in call volume and outcomes across "
                "each week.",
                styles["Italic"],
            )
        )
    else:
        story.append(Paragraph("No weekly data available.", styles["Italic"]))
    story.append(Spacer(1, 0.2 * inch))

    # Detailed table
    story.append(Paragraph("Detailed Weekly Performance", heading_style))
    table_data = [list(TABLE_HEADERS)]
    for row in view.table:
        table_data.append(
            [
                row.week,
                str(row.inbound),
                str(row.answered),
                str(row.abandoned),
                str(row.missed),
                f"{format_handle_time(row.avg_handle_time)} min",
            ]
        )
    weekly_table = Table(table_data, repeatRows=1)
    weekly_table.setStyle(
        TableStyle(
            [
                *HEADER_TABLE_STYLE,
                ("ALIGN", (1, 0), (-1, -1), "CENTER"),
                ("BACKGROUND", (0, 1), (-1, -1), colors.beige),
            ]
        )
    )
    story.append(weekly_table)
    story.append(Spacer(1, 0.3 * inch))

    # Action plan and insights
    story.append(Paragraph("Strategic Action Plan", heading_style))
    for item in view.action_plan:
        story.append(Paragraph(f"• {escape_markup(item)}", styles["Normal"]))
    story.append(Spacer(1, 0.2 * inch))

    story.append(Paragraph("Summary of Key Insights", heading_style))
    story.append(Paragraph(escape_markup(view.key_insights), styles["Normal"]))

    doc.build(story)
    logger.success(f"PDF report saved to {output_path}")
