"""Spreadsheet row parser: first sheet of a workbook, or delimited text."""

from __future__ import annotations

import io
from pathlib import Path
from typing import Any

import pandas as pd

from staffdir.core.exceptions import (
    EmptyImportFileError,
    ImportFileError,
    UnreadableFileError,
    UnsupportedFileError,
)
from staffdir.importer.normalize import is_missing
from staffdir.models.employee import SPREADSHEET_COLUMNS
from staffdir.models.imports import ParsedRow

DEFAULT_EXTENSIONS = [".xlsx", ".xls", ".csv"]
HEADER_ROWS = 1
# Excel on pt-BR Windows saves CSV as cp1252
CSV_ENCODINGS = ("utf-8-sig", "cp1252")
WORKBOOK_ENGINES = {".xlsx": "openpyxl", ".xls": "xlrd"}


def _read_workbook(content: bytes, suffix: str) -> pd.DataFrame:
    # dtype=object keeps the cell values the engine hands back (int, float, datetime, str)
    return pd.read_excel(
        io.BytesIO(content), sheet_name=0, header=None, dtype=object, engine=WORKBOOK_ENGINES[suffix]
    )


def _read_csv(content: bytes, encoding: str) -> pd.DataFrame:
    width = len(SPREADSHEET_COLUMNS)
    return pd.read_csv(
        io.BytesIO(content),
        header=None,
        names=list(range(width)),
        index_col=False,
        dtype=str,
        keep_default_na=False,
        skip_blank_lines=False,
        sep=None,
        engine="python",
        encoding=encoding,
        on_bad_lines=lambda fields: fields[:width],
    )


def _read_delimited(content: bytes) -> pd.DataFrame:
    for encoding in CSV_ENCODINGS[:-1]:
        try:
            return _read_csv(content, encoding)
        except UnicodeDecodeError:
            continue
    return _read_csv(content, CSV_ENCODINGS[-1])


def _clean_cell(value: Any) -> Any:
    return None if is_missing(value) else value


def _trim_trailing(cells: list[Any]) -> list[Any]:
    end = len(cells)
    while end and cells[end - 1] is None:
        end -= 1
    return cells[:end]


def read_rows(content: bytes, filename: str, allowed_extensions: list[str] | None = None) -> list[ParsedRow]:
    """Parse an import file into non-blank data rows.

    Row 1 is the header and is skipped. Fully blank rows are dropped. Each
    returned row keeps its 1-based position in the sheet.

    Raises:
        UnsupportedFileError: extension not accepted.
        UnreadableFileError: the content could not be parsed.
        EmptyImportFileError: no data rows after the header.
    """
    allowed = allowed_extensions or DEFAULT_EXTENSIONS
    suffix = Path(filename).suffix.lower()
    if suffix not in allowed:
        raise UnsupportedFileError(filename, allowed)
    if not content.strip():
        raise EmptyImportFileError(f"{filename!r} is empty")

    try:
        frame = _read_delimited(content) if suffix == ".csv" else _read_workbook(content, suffix)
    except pd.errors.EmptyDataError as exc:
        raise EmptyImportFileError(f"{filename!r} is empty") from exc
    except ImportFileError:
        raise
    except Exception as exc:
        raise UnreadableFileError(f"Could not read {filename!r}: {exc}") from exc

    rows: list[ParsedRow] = []
    for index, values in enumerate(frame.itertuples(index=False, name=None), start=1):
        if index <= HEADER_ROWS:
            continue
        cells = [_clean_cell(v) for v in values]
        if all(c is None for c in cells):
            continue
        rows.append(ParsedRow(row=index, cells=_trim_trailing(cells)))

    if not rows:
        raise EmptyImportFileError(f"{filename!r} has no data rows")
    return rows
