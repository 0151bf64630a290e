"""Constants and enumerations for the call center KPI report."""

from enum import StrEnum
from typing import Final


# Staffing Parameters
AVAILABLE_MINUTES_PER_AGENT: Final[int] = 420  # minutes of agent availability per weekday
WORKDAYS_PER_WEEK: Final[int] = 5
HANDLE_TIME_DECIMALS: Final[int] = 2

# Selection
ALL_WEEKS: Final[str] = "All"

# Default Values
DEFAULT_OUTPUT_DIR: Final[str] = "output"
DEFAULT_REPORT_NAME: Final[str] = "summary_report.md"
DEFAULT_METRICS_OUTPUT: Final[str] = "metrics.json"
DEFAULT_WEEKLY_CSV_OUTPUT: Final[str] = "weekly_performance.csv"
OUTPUT_DIR_ENVVAR: Final[str] = "CALL_REPORT_OUTPUT_DIR"

# JSON Serialization
JSON_INDENT: Final[int] = 2

# Numeric Constants
EXIT_CODE_ERROR: Final[int] = 1

# Spreadsheet Formats
EXCEL_SUFFIXES: Final[tuple[str, ...]] = (".xlsx", ".xls")
CSV_SUFFIX: Final[str] = ".csv"

# Chart Colors
BAR_COLOR: Final[str] = "#a78bfa"
DISPOSITION_COLORS: Final[tuple[str, str, str]] = ("#4CAF50", "#F44336", "#FF9800")


class RecordField(StrEnum):
    """WeeklyCallRecord field names."""

    WEEK_LABEL = "week_label"
    INBOUND = "inbound"
    ANSWERED = "answered"
    ABANDONED = "abandoned"
    MISSED = "missed"
    AVG_HANDLE_TIME = "avg_handle_time"
    STAFF_NEEDED = "staff_needed"


class SeriesLabel(StrEnum):
    """Display names used by the chart series."""

    INBOUND = "Inbound"
    ANSWERED = "Answered"
    ABANDONED = "Abandoned"
    MISSED = "Missed"


# Normalized spreadsheet header -> record field. Headers are normalized by
# lowercasing and dropping everything that is not a letter or digit.
COLUMN_ALIASES: Final[dict[str, RecordField]] = {
    "week": RecordField.WEEK_LABEL,
    "weeklabel": RecordField.WEEK_LABEL,
    "weekof": RecordField.WEEK_LABEL,
    "daterange": RecordField.WEEK_LABEL,
    "inbound": RecordField.INBOUND,
    "inboundcalls": RecordField.INBOUND,
    "answered": RecordField.ANSWERED,
    "answeredcalls": RecordField.ANSWERED,
    "abandoned": RecordField.ABANDONED,
    "abandonedcalls": RecordField.ABANDONED,
    "missed": RecordField.MISSED,
    "missedcalls": RecordField.MISSED,
    "avghandletime": RecordField.AVG_HANDLE_TIME,
    "averagehandletime": RecordField.AVG_HANDLE_TIME,
    "aht": RecordField.AVG_HANDLE_TIME,
    "staffneeded": RecordField.STAFF_NEEDED,
    "staff": RecordField.STAFF_NEEDED,
}

ACTION_PLAN: Final[tuple[str, ...]] = (
    "Enable hourly call tracking on the phone system.",
    "Deploy smart scheduling software based on hourly call trends.",
    "Establish agent performance KPIs (answer rate, average speed of answer).",
    "Conduct IVR usability testing with real patients.",
    "Schedule weekly reviews of abandonment and wait time trends.",
)

KEY_INSIGHTS: Final[str] = (
    "This report provides an overview of performance gaps in your call center process. "
    "Staffing and IVR performance are contributing to high abandonment. Use this data "
    "to prioritize staffing, scheduling, and system changes, and set a 30-60-90 day "
    "performance improvement plan for measurable impact."
)


class LogMessage(StrEnum):
    """Log message templates."""

    SEEDED_STORE = "Seeded record store with {} weeks"
    IMPORT_APPLIED = "Imported {} rows ({} new weeks, {} updated)"
    IMPORT_ROW_SKIPPED = "Skipping row {}: {}"
    IMPORT_NOTHING_APPLIED = "No valid rows found, record store left unchanged"
    NO_DATA_IMPORTED = "No data imported from {}: {}"
    READING_SPREADSHEET = "Reading spreadsheet {}..."
    READ_ROWS = "Read {} rows from {}"
    AGGREGATING = "Aggregating {} week(s) for selection '{}'"
    SELECTED_WEEK = "Selected week: {}"
    SAVED_METRICS = "Saved metrics to {}"
    SAVED_WEEKLY_CSV = "Saved {} weekly rows to {}"
    ERROR_OCCURRED = "Error occurred: {}"


class CliHelp(StrEnum):
    """CLI help messages."""

    APP = "Call center weekly KPI report tool"
    WEEK = "Week label to report on, or 'All' for every week."
    IMPORT_FILE = "Spreadsheet (.xlsx, .xls or .csv) with weekly rows to import before reporting."
    REPLACE = "Replace the built-in weeks with the imported rows instead of appending."
    OUTPUT_DIR = "Directory where report files are written."
    WEEKS_COMMAND = "List the week labels available for reporting."
    SUMMARY_COMMAND = "Print the aggregated metrics and staffing recommendation."
    REPORT_COMMAND = """Generate the full report as Markdown, JSON and PDF.

The PDF contains the executive summary, the call volume, disposition and
weekly trend charts, the detailed weekly table and the action plan."""
    EXPORT_COMMAND = "Export the aggregated metrics as JSON and the weekly table as CSV."
