"""Bulk import models: per-row mapping, outcomes and the run summary."""

from __future__ import annotations

from enum import StrEnum
from typing import Optional

from pydantic import BaseModel, Field

from staffdir.core.types import RawRow
from staffdir.models.employee import EmployeeDraft


class ImportOutcome(StrEnum):
    SUCCESS = "SUCCESS"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    PERSISTENCE_ERROR = "PERSISTENCE_ERROR"
    UNEXPECTED_ERROR = "UNEXPECTED_ERROR"


class ParsedRow(BaseModel):
    """One non-blank spreadsheet row with its 1-based sheet row number."""

    row: int
    cells: RawRow = Field(default_factory=list)


class MappedRow(BaseModel):
    """Result of mapping one raw row onto the employee schema."""

    row: int
    valid: bool
    employee: Optional[EmployeeDraft] = None
    error: str = ""
    data: RawRow = Field(default_factory=list)  # raw cells, set on failure


class RowError(BaseModel):
    """Error details for a single row in bulk import."""

    row: int
    error: str
    kind: ImportOutcome
    data: RawRow = Field(default_factory=list)


class ImportResult(BaseModel):
    """Result of a bulk import operation."""

    total: int = 0
    success: int = 0
    errors: list[RowError] = Field(default_factory=list)

    @property
    def error_count(self) -> int:
        return len(self.errors)
