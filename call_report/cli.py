"""CLI interface for the call center KPI report."""

from pathlib import Path

import typer
from loguru import logger
from rich.console import Console
from rich.table import Table

from .constants import (
    ALL_WEEKS,
    DEFAULT_METRICS_OUTPUT,
    DEFAULT_OUTPUT_DIR,
    DEFAULT_REPORT_NAME,
    DEFAULT_WEEKLY_CSV_OUTPUT,
    EXIT_CODE_ERROR,
    OUTPUT_DIR_ENVVAR,
    CliHelp,
    LogMessage,
)
from .errors import UnknownWeek
from .formatters import format_handle_time, format_minutes, format_rate
from .reports import ReportGenerator
from .session import ReportSession
from .storage import ReportStorage

app = typer.Typer(help=CliHelp.APP)
console = Console()


def _open_session(week: str, import_file: Path | None, replace: bool) -> ReportSession:
    """Build a session, apply the optional import and select ``week``."""
    session = ReportSession()

    if import_file is not None:
        try:
            result = session.import_file(import_file, replace=replace)
        except Exception as e:
            logger.exception(LogMessage.ERROR_OCCURRED.format(e))
            raise typer.Exit(code=EXIT_CODE_ERROR)
        for error in result.errors:
            console.print(f"[yellow]Skipped {error}[/yellow]")

    try:
        session.select_week(week)
    except UnknownWeek as e:
        logger.error(str(e))
        console.print(f"Available weeks: {', '.join(session.store.all_week_labels())}")
        raise typer.Exit(code=EXIT_CODE_ERROR)

    return session


@app.command(help=CliHelp.WEEKS_COMMAND)
def weeks(
    import_file: Path = typer.Option(None, "--import", "-i", help=CliHelp.IMPORT_FILE),
    replace: bool = typer.Option(False, "--replace", help=CliHelp.REPLACE),
) -> None:
    """List the week labels available for reporting."""
    session = _open_session(ALL_WEEKS, import_file, replace)
    for label in session.store.all_week_labels():
        console.print(label)


@app.command(help=CliHelp.SUMMARY_COMMAND)
def summary(
    week: str = typer.Option(ALL_WEEKS, "--week", "-w", help=CliHelp.WEEK),
    import_file: Path = typer.Option(None, "--import", "-i", help=CliHelp.IMPORT_FILE),
    replace: bool = typer.Option(False, "--replace", help=CliHelp.REPLACE),
) -> None:
    """Print the aggregated metrics and staffing recommendation."""
    session = _open_session(week, import_file, replace)
    view = session.view()
    metrics = view.metrics

    table = Table(title=f"Call Center KPIs ({view.selection})")
    table.add_column("Metric")
    table.add_column("Value", justify="right")
    table.add_row("Weeks", str(metrics.week_count))
    table.add_row("Inbound Calls", str(metrics.totals.inbound))
    table.add_row("Answered Calls", str(metrics.totals.answered))
    table.add_row("Abandoned Calls", str(metrics.totals.abandoned))
    table.add_row("Missed Calls", str(metrics.totals.missed))
    table.add_row("Avg Handle Time", f"{format_handle_time(metrics.average_handle_time)} min")
    table.add_row("Calls per Weekday", format_rate(metrics.calls_per_weekday))
    table.add_row("Talk Minutes Needed", format_minutes(metrics.total_minutes_needed))
    table.add_row("Required Agents", f"[bold red]{metrics.required_agents}[/bold red]")
    console.print(table)

    for paragraph in view.summary:
        console.print(paragraph)
        console.print()


@app.command(help=CliHelp.REPORT_COMMAND)
def report(
    week: str = typer.Option(ALL_WEEKS, "--week", "-w", help=CliHelp.WEEK),
    import_file: Path = typer.Option(None, "--import", "-i", help=CliHelp.IMPORT_FILE),
    replace: bool = typer.Option(False, "--replace", help=CliHelp.REPLACE),
    output_dir: Path = typer.Option(
        DEFAULT_OUTPUT_DIR,
        "--output-dir",
        "-o",
        envvar=OUTPUT_DIR_ENVVAR,
        help=CliHelp.OUTPUT_DIR,
    ),
) -> None:
    """Generate the full report as Markdown, JSON and PDF."""
    session = _open_session(week, import_file, replace)

    try:
        generator = ReportGenerator(session.view())
        generator.generate_report(output_path=output_dir / DEFAULT_REPORT_NAME)
    except Exception as e:
        logger.exception(LogMessage.ERROR_OCCURRED.format(e))
        raise typer.Exit(code=EXIT_CODE_ERROR)


@app.command(help=CliHelp.EXPORT_COMMAND)
def export(
    week: str = typer.Option(ALL_WEEKS, "--week", "-w", help=CliHelp.WEEK),
    import_file: Path = typer.Option(None, "--import", "-i", help=CliHelp.IMPORT_FILE),
    replace: bool = typer.Option(False, "--replace", help=CliHelp.REPLACE),
    output_dir: Path = typer.Option(
        DEFAULT_OUTPUT_DIR,
        "--output-dir",
        "-o",
        envvar=OUTPUT_DIR_ENVVAR,
        help=CliHelp.OUTPUT_DIR,
    ),
) -> None:
    """Export the aggregated metrics as JSON and the weekly table as CSV."""
    session = _open_session(week, import_file, replace)
    storage = ReportStorage()

    try:
        storage.save_metrics(
            metrics=session.metrics(), filepath=output_dir / DEFAULT_METRICS_OUTPUT
        )
        storage.save_weekly_csv(
            store=session.store, filepath=output_dir / DEFAULT_WEEKLY_CSV_OUTPUT
        )
    except Exception as e:
        logger.exception(LogMessage.ERROR_OCCURRED.format(e))
        raise typer.Exit(code=EXIT_CODE_ERROR)
