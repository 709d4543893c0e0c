"""Cell normalizers for spreadsheet import.

Every function here is total: bad input degrades to None, never raises.
"""

from __future__ import annotations

import numbers
import re
from datetime import date, datetime
from typing import Any

import pandas as pd
from openpyxl.utils.datetime import from_excel

from staffdir.models.employee import Gender

MALE_VALUES = frozenset({"masculino", "m"})
FEMALE_VALUES = frozenset({"feminino", "f"})
SERIAL_TEXT = re.compile(r"\d+(\.\d+)?")


def is_missing(value: Any) -> bool:
    """True for None, NaN/NaT and blank strings."""
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    try:
        return bool(pd.isna(value))
    except (TypeError, ValueError):
        return False


def cell_to_text(value: Any) -> str | None:
    """Coerce a cell to trimmed text; integral floats lose their ``.0``."""
    if is_missing(value):
        return None
    if isinstance(value, bool):
        return str(value)
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    elif isinstance(value, datetime):
        value = value.date().isoformat() if value.time() == datetime.min.time() else value.isoformat()
    elif isinstance(value, date):
        value = value.isoformat()
    text = str(value).strip()
    return text or None


def _serial_to_iso(serial: float) -> str | None:
    try:
        converted = from_excel(serial)
    except (ValueError, OverflowError, TypeError):
        return None
    # Serials below 1 are time-of-day values, not dates.
    return converted.date().isoformat() if isinstance(converted, datetime) else None


def normalize_date(value: Any) -> str | None:
    """Return an ISO ``YYYY-MM-DD`` string, or None when the value is not a date.

    Accepts date/datetime cells, spreadsheet serial numbers (1900 epoch, as
    numbers or digit-only text) and free-text dates.
    """
    if is_missing(value) or isinstance(value, bool):
        return None
    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, numbers.Real):
        return _serial_to_iso(float(value))
    if isinstance(value, str):
        text = value.strip()
        # CSV cells arrive as text; bare numbers are still serials
        if SERIAL_TEXT.fullmatch(text):
            return _serial_to_iso(float(text))
        try:
            parsed = pd.to_datetime(text, errors="coerce")
        except (ValueError, TypeError, OverflowError):
            return None
        if pd.isna(parsed):
            return None
        return parsed.date().isoformat()
    return None


def normalize_gender(value: Any) -> Gender | None:
    """Map masculino/m and feminino/f (any case, trimmed) to Gender; else None."""
    text = cell_to_text(value)
    if text is None:
        return None
    folded = text.casefold()
    if folded in MALE_VALUES:
        return Gender.MALE
    if folded in FEMALE_VALUES:
        return Gender.FEMALE
    return None
