"""In-memory record store for weekly call records."""

import math
import re
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any

from loguru import logger
from pydantic import ValidationError

from .constants import COLUMN_ALIASES, LogMessage
from .errors import MalformedRecord, UnknownWeek
from .models import WeeklyCallRecord, WeeklyRowSchema

# Reference weeks shipped with the report.
SEED_RECORDS: tuple[WeeklyCallRecord, ...] = (
    WeeklyCallRecord("04/07-04/11", 1148, 703, 187, 256, 4.10, 2),
    WeeklyCallRecord("04/14-04/18", 1065, 671, 195, 196, 4.23, 2),
    WeeklyCallRecord("04/21-04/25", 1039, 604, 212, 223, 3.76, 2),
)

_NON_ALNUM = re.compile(r"[^a-z0-9]")


@dataclass
class ImportResult:
    """Outcome of one import batch.

    Attributes:
        records: Records that were applied to the store, in batch order.
        errors: One MalformedRecord per skipped row.
        added: Labels that were new to the store.
        updated: Labels that overwrote an existing week.
    """

    records: list[WeeklyCallRecord] = field(default_factory=list)
    errors: list[MalformedRecord] = field(default_factory=list)
    added: list[str] = field(default_factory=list)
    updated: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


def normalize_column(name: Any) -> str:
    """Normalize a spreadsheet header for alias lookup."""
    return _NON_ALNUM.sub("", str(name).lower())


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, float) and math.isnan(value):
        return True
    return isinstance(value, str) and not value.strip()


def map_row(row: Mapping[str, Any]) -> dict[str, Any]:
    """Map a loosely typed spreadsheet row onto record field names.

    Unknown columns are dropped and blank cells are omitted so that the
    schema reports them as missing.

    Args:
        row: One row as produced by a spreadsheet reader, keyed by header.

    Returns:
        dict[str, Any]: Values keyed by record field name.
    """
    mapped: dict[str, Any] = {}
    for column, value in row.items():
        target = COLUMN_ALIASES.get(normalize_column(column))
        if target is None or _is_blank(value):
            continue
        # numpy scalars from pandas frames
        if hasattr(value, "item") and not isinstance(value, str):
            value = value.item()
        mapped[target] = value
    return mapped


def parse_row(row: Mapping[str, Any], *, row_index: int) -> WeeklyCallRecord:
    """Validate one imported row and convert it to a WeeklyCallRecord.

    Args:
        row: Loosely typed row keyed by spreadsheet header.
        row_index: 0-based position of the row in its batch.

    Returns:
        WeeklyCallRecord: The validated record.

    Raises:
        MalformedRecord: If a required field is missing or a value is invalid.
    """
    if not isinstance(row, Mapping):
        raise MalformedRecord(row_index, [f"expected a mapping, got {type(row).__name__}"])

    try:
        schema = WeeklyRowSchema.model_validate(map_row(row))
    except ValidationError as e:
        problems = [
            f"{'.'.join(str(part) for part in error['loc']) or 'row'}: {error['msg']}"
            for error in e.errors()
        ]
        raise MalformedRecord(row_index, problems) from e

    return schema.to_record()


class RecordStore:
    """Ordered mapping from week label to WeeklyCallRecord.

    Enumeration order is insertion order: seed weeks first, then imported
    weeks in file order. Overwriting an existing label keeps its position.

    Attributes:
        version: Incremented every time an import changes the store.
    """

    def __init__(self, records: Iterable[WeeklyCallRecord] = ()):
        self._records: dict[str, WeeklyCallRecord] = {}
        for record in records:
            self._records[record.week_label] = record
        self.version = 0

    @classmethod
    def seed(cls) -> "RecordStore":
        """Create a store holding the built-in reference weeks."""
        store = cls(SEED_RECORDS)
        logger.debug(LogMessage.SEEDED_STORE.format(len(store)))
        return store

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, week_label: object) -> bool:
        return week_label in self._records

    def __iter__(self) -> Iterator[str]:
        return iter(self._records)

    def get(self, week_label: str) -> WeeklyCallRecord:
        """Return the record for ``week_label``.

        Raises:
            UnknownWeek: If the store has no such week.
        """
        try:
            return self._records[week_label]
        except KeyError:
            raise UnknownWeek(week_label) from None

    def all_week_labels(self) -> list[str]:
        """Return every week label in enumeration order."""
        return list(self._records)

    def records(self) -> list[WeeklyCallRecord]:
        """Return every record in enumeration order."""
        return list(self._records.values())

    def import_rows(
        self, rows: Iterable[Mapping[str, Any]], *, replace: bool = False
    ) -> ImportResult:
        """Validate external rows and merge them into the store.

        Every row is validated independently; malformed rows are reported and
        skipped while the rest are applied. The valid rows are applied in a
        single swap so readers never observe a partially imported batch.

        Args:
            rows: Loosely typed rows, e.g. parsed spreadsheet records.
            replace: If True, the imported rows replace the current weeks
                entirely (only when at least one row is valid).

        Returns:
            ImportResult: Applied records and per-row errors.
        """
        result = ImportResult()

        for index, row in enumerate(rows):
            try:
                result.records.append(parse_row(row, row_index=index))
            except MalformedRecord as e:
                logger.warning(LogMessage.IMPORT_ROW_SKIPPED.format(index, "; ".join(e.problems)))
                result.errors.append(e)

        if not result.records:
            logger.warning(LogMessage.IMPORT_NOTHING_APPLIED)
            return result

        updated = {} if replace else dict(self._records)
        for record in result.records:
            if record.week_label in updated:
                if record.week_label not in result.added + result.updated:
                    result.updated.append(record.week_label)
            else:
                result.added.append(record.week_label)
            updated[record.week_label] = record

        self._records = updated
        self.version += 1

        logger.info(
            LogMessage.IMPORT_APPLIED.format(
                len(result.records), len(result.added), len(result.updated)
            )
        )
        return result
