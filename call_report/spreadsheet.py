"""Read weekly call rows from spreadsheet files."""

import zipfile
from pathlib import Path
from typing import Any

import pandas as pd
import xlrd
from loguru import logger

from .constants import CSV_SUFFIX, EXCEL_SUFFIXES, LogMessage
from .errors import SpreadsheetReadError


def read_spreadsheet(path: Path | str) -> list[dict[str, Any]]:
    """Read the first sheet of a spreadsheet into a list of row dictionaries.

    ``.xlsx`` and ``.xls`` files are read through pandas (openpyxl/xlrd);
    ``.csv`` cells are kept as text so labels such as ``04`` or ``1.10`` survive
    unchanged; the schema converts the numeric columns. Empty cells come back
    as ``None``.

    Args:
        path: Path to the spreadsheet file.

    Returns:
        list[dict[str, Any]]: One dictionary per row, keyed by header.

    Raises:
        SpreadsheetReadError: If the file type is unsupported or the file
            cannot be read.
    """
    path = Path(path)
    suffix = path.suffix.lower()
    logger.info(LogMessage.READING_SPREADSHEET.format(path))

    try:
        if suffix in EXCEL_SUFFIXES:
            df = pd.read_excel(path, sheet_name=0)
        elif suffix == CSV_SUFFIX:
            df = pd.read_csv(path, dtype=str)
        else:
            raise SpreadsheetReadError(f"Unsupported spreadsheet type: {path.suffix or path.name}")
    except SpreadsheetReadError:
        raise
    except (OSError, ValueError, KeyError, ImportError, zipfile.BadZipFile, xlrd.XLRDError) as e:
        raise SpreadsheetReadError(f"Could not read {path}: {e}") from e

    df = df.dropna(how="all")
    df = df.astype(object).where(pd.notna(df), None)
    rows = df.to_dict(orient="records")

    logger.info(LogMessage.READ_ROWS.format(len(rows), path))
    return rows
