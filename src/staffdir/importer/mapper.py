"""Row-to-record mapper: positional spreadsheet cells onto EmployeeDraft."""

from __future__ import annotations

from typing import Any, Sequence

from pydantic import ValidationError

from staffdir.importer.normalize import cell_to_text, normalize_date, normalize_gender
from staffdir.models.employee import (
    DATE_FIELDS,
    REQUIRED_FIELDS,
    SPREADSHEET_COLUMNS,
    EmployeeDraft,
)
from staffdir.models.imports import MappedRow

COLUMN_COUNT = len(SPREADSHEET_COLUMNS)


def _describe(exc: ValidationError) -> str:
    parts = []
    for err in exc.errors():
        field = ".".join(str(p) for p in err["loc"])
        parts.append(f"{field}: {err['msg']}")
    return "Invalid data: " + "; ".join(parts)


def map_row(cells: Sequence[Any], row_number: int) -> MappedRow:
    """Map one raw row to a validated draft, or to a descriptive failure.

    Cells past the 15th column are ignored. Required fields are checked
    first; when any is missing no normalization is attempted.
    """
    padded = list(cells[:COLUMN_COUNT]) + [None] * max(0, COLUMN_COUNT - len(cells))
    values = dict(zip(SPREADSHEET_COLUMNS, padded))

    missing = [name for name in REQUIRED_FIELDS if cell_to_text(values[name]) is None]
    if missing:
        return MappedRow(
            row=row_number,
            valid=False,
            error=f"Missing required fields: {', '.join(missing)}",
            data=list(cells),
        )

    fields: dict[str, Any] = {}
    for name in SPREADSHEET_COLUMNS:
        if name in DATE_FIELDS:
            fields[name] = normalize_date(values[name])
        elif name == "gender":
            fields[name] = normalize_gender(values[name])
        else:
            fields[name] = cell_to_text(values[name])

    try:
        employee = EmployeeDraft.model_validate(fields)
    except ValidationError as exc:
        return MappedRow(row=row_number, valid=False, error=_describe(exc), data=list(cells))

    return MappedRow(row=row_number, valid=True, employee=employee)
