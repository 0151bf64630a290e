"""Report session owning the record store and the current week selection."""

from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

from loguru import logger

from .aggregator import aggregate
from .constants import ALL_WEEKS, LogMessage
from .errors import SpreadsheetReadError, UnknownWeek
from .models import AggregatedMetrics
from .presentation import ReportView, build_report_view
from .spreadsheet import read_spreadsheet
from .store import ImportResult, RecordStore


class ReportSession:
    """One interactive report session.

    The session constructs the store (seeded with the reference weeks unless
    one is supplied) and re-aggregates it on every read, so metrics always
    reflect the current store and selection.

    Attributes:
        store: The record store owned by this session.
        selected_week: ``"All"`` or the label of the selected week.
    """

    def __init__(self, *, store: RecordStore | None = None, selected_week: str = ALL_WEEKS):
        self.store = store if store is not None else RecordStore.seed()
        self.selected_week = ALL_WEEKS
        self.select_week(selected_week)

    def select_week(self, week_label: str) -> None:
        """Change the week selection.

        Raises:
            UnknownWeek: If the store has no such week.
        """
        if week_label != ALL_WEEKS and week_label not in self.store:
            raise UnknownWeek(week_label)
        self.selected_week = week_label
        logger.debug(LogMessage.SELECTED_WEEK.format(week_label))

    def import_rows(
        self, rows: Iterable[Mapping[str, Any]], *, replace: bool = False
    ) -> ImportResult:
        """Merge already parsed rows into the store."""
        result = self.store.import_rows(rows, replace=replace)
        self._ensure_selection()
        return result

    def import_file(self, path: Path | str, *, replace: bool = False) -> ImportResult:
        """Read a spreadsheet and merge its rows into the store.

        A file that cannot be read leaves the store untouched and yields an
        empty result.

        Args:
            path: Spreadsheet to import.
            replace: Replace the current weeks instead of appending.

        Returns:
            ImportResult: Applied records and per-row errors.
        """
        try:
            rows = read_spreadsheet(path)
        except SpreadsheetReadError as e:
            logger.error(LogMessage.NO_DATA_IMPORTED.format(path, e))
            return ImportResult()
        return self.import_rows(rows, replace=replace)

    def _ensure_selection(self) -> None:
        # A replacing import may drop the selected week
        if self.selected_week != ALL_WEEKS and self.selected_week not in self.store:
            self.selected_week = ALL_WEEKS

    def week_options(self) -> list[str]:
        """Selector options: ``"All"`` followed by every week label."""
        return [ALL_WEEKS, *self.store.all_week_labels()]

    def metrics(self) -> AggregatedMetrics:
        """Aggregate the current selection."""
        return aggregate(self.store, self.selected_week)

    def view(self) -> ReportView:
        """Build the report view for the current selection."""
        return build_report_view(self.store, self.selected_week)
