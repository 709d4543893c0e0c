"""Directory view-model: filter and sort over the loaded record set.

Recomputed on every request; no indexing. Record counts are directory
scale, so linear scans are fine.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum, StrEnum
from functools import cmp_to_key
from typing import Any, Iterable, Sequence

from staffdir.models.employee import SPREADSHEET_COLUMNS, Employee

SORTABLE_FIELDS: tuple[str, ...] = ("id",) + SPREADSHEET_COLUMNS


class SortDirection(StrEnum):
    ASC = "asc"
    DESC = "desc"


@dataclass(frozen=True)
class SortState:
    """Current sort column and direction."""

    field: str | None = None
    direction: SortDirection = SortDirection.ASC

    def toggle(self, field: str) -> SortState:
        """Same field flips direction; a new field starts ascending."""
        if field == self.field:
            flipped = SortDirection.DESC if self.direction == SortDirection.ASC else SortDirection.ASC
            return SortState(field, flipped)
        return SortState(field, SortDirection.ASC)


@dataclass(frozen=True)
class DirectoryState:
    """Loaded record set. Replaced wholesale on reload, never patched."""

    records: tuple[Employee, ...] = ()
    version: int = 0

    def replaced(self, records: Iterable[Employee]) -> DirectoryState:
        return DirectoryState(tuple(records), self.version + 1)


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, date):
        return value.isoformat()
    return str(value)


def filter_records(records: Sequence[Employee], query: str) -> list[Employee]:
    """Records where any field contains ``query``, case-insensitively."""
    if not query:
        return list(records)
    needle = query.casefold()
    return [
        r for r in records
        if any(needle in _as_text(v).casefold() for v in r.model_dump().values() if v is not None)
    ]


def sort_records(
    records: Sequence[Employee],
    field: str | None,
    direction: SortDirection = SortDirection.ASC,
) -> list[Employee]:
    """Order by one field with a plain two-way comparator.

    Equal values may swap places: the comparator never reports a tie.
    """
    items = list(records)
    if not field:
        return items
    if field not in SORTABLE_FIELDS:
        raise ValueError(f"Cannot sort by {field!r}")

    def compare(a: Employee, b: Employee) -> int:
        left, right = _as_text(getattr(a, field)), _as_text(getattr(b, field))
        if direction == SortDirection.ASC:
            return 1 if left > right else -1
        return 1 if left < right else -1

    return sorted(items, key=cmp_to_key(compare))
