"""Utilities for rounding and formatting metric values for display."""

from decimal import ROUND_HALF_UP, Decimal


def round_half_up(value: float, places: int) -> float:
    """Round ``value`` to ``places`` decimals, ties away from zero.

    The Decimal is built from the float itself so the exact binary value is
    rounded, e.g. ``4.125`` becomes ``4.13``.
    """
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def format_handle_time(minutes: float) -> str:
    """Format a handle time with two decimals, e.g. ``4.03``."""
    return f"{round_half_up(minutes, 2):.2f}"


def format_minutes(minutes: float) -> str:
    """Format a minute total as a whole number, e.g. ``7971``."""
    return f"{round_half_up(minutes, 0):.0f}"


def format_rate(value: float) -> str:
    """Format a per-day rate with at most two decimals."""
    return f"{round_half_up(value, 2):.2f}".rstrip("0").rstrip(".")


def escape_markup(text: str) -> str:
    """Escape text for reportlab paragraph markup."""
    return text.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")


def markdown_table(headers: list[str], rows: list[list[str]]) -> list[str]:
    """Render a Markdown table as a list of lines.

    Args:
        headers: Column headers.
        rows: Cell text per row, one entry per header.

    Returns:
        list[str]: Header line, separator line and one line per row.
    """
    lines = [
        "| " + " | ".join(headers) + " |",
        "|" + "|".join("-" * (len(header) + 2) for header in headers) + "|",
    ]
    for row in rows:
        lines.append("| " + " | ".join(cell.replace("|", "\\|") for cell in row) + " |")
    return lines
