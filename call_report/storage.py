"""Export aggregated metrics and weekly records to disk."""

import json
from pathlib import Path

import polars as pl
from loguru import logger

from .constants import (
    DEFAULT_METRICS_OUTPUT,
    DEFAULT_WEEKLY_CSV_OUTPUT,
    JSON_INDENT,
    LogMessage,
    RecordField,
)
from .models import AggregatedMetrics
from .store import RecordStore


class ReportStorage:
    """Handles saving metrics and weekly tables to disk."""

    def save_metrics(
        self,
        *,
        metrics: AggregatedMetrics,
        filepath: Path | str = DEFAULT_METRICS_OUTPUT,
    ) -> None:
        """Save aggregated metrics to a JSON file.

        Args:
            metrics: Metrics to save.
            filepath: Path where the JSON file should be saved.
        """
        filepath = Path(filepath)
        filepath.parent.mkdir(parents=True, exist_ok=True)

        with filepath.open("w") as f:
            json.dump(metrics.to_dict(), f, indent=JSON_INDENT, default=str)

        logger.success(LogMessage.SAVED_METRICS.format(filepath))

    def save_weekly_csv(
        self,
        *,
        store: RecordStore,
        filepath: Path | str = DEFAULT_WEEKLY_CSV_OUTPUT,
    ) -> None:
        """Save every weekly record to a CSV file using Polars.

        Rows keep the store's enumeration order.

        Args:
            store: Record store to export.
            filepath: Path where the CSV file should be saved.
        """
        filepath = Path(filepath)
        filepath.parent.mkdir(parents=True, exist_ok=True)

        records = [record.to_dict() for record in store.records()]
        if not records:
            logger.warning("No weekly records to save to CSV")
            df = pl.DataFrame(schema={str(name): pl.Utf8 for name in RecordField})
        else:
            df = pl.DataFrame(records)

        df.write_csv(filepath)

        logger.success(LogMessage.SAVED_WEEKLY_CSV.format(len(df), filepath))
