"""Exceptions raised by the record store and aggregator."""


class CallReportError(Exception):
    """Base class for call report errors."""


class MalformedRecord(CallReportError):
    """An imported row is missing a required field or holds an invalid value.

    Attributes:
        row_index: 0-based position of the row in the imported batch.
        problems: Human readable description of each offending field.
    """

    def __init__(self, row_index: int, problems: list[str]):
        self.row_index = row_index
        self.problems = problems
        super().__init__(f"row {row_index}: {'; '.join(problems)}")


class UnknownWeek(CallReportError, KeyError):
    """A week label was requested that the record store does not hold."""

    def __init__(self, week_label: str):
        self.week_label = week_label
        super().__init__(week_label)

    def __str__(self) -> str:
        return f"Unknown week: {self.week_label!r}"


class SpreadsheetReadError(CallReportError):
    """A spreadsheet file could not be read."""
