"""StaffDir exception hierarchy."""

from __future__ import annotations


class StaffDirError(Exception):
    """Base exception for all StaffDir errors."""


class PersistenceError(StaffDirError):
    """The record store rejected or failed an operation."""


class RecordNotFoundError(PersistenceError):
    """No employee exists with the given identifier."""

    def __init__(self, employee_id: str) -> None:
        self.employee_id = employee_id
        super().__init__(f"Employee {employee_id!r} not found")


class ImportFileError(StaffDirError):
    """The import file as a whole cannot be processed."""


class UnsupportedFileError(ImportFileError):
    """File extension or structure is not an accepted import format."""

    def __init__(self, filename: str, allowed: list[str] | None = None) -> None:
        self.filename = filename
        self.allowed = allowed or []
        hint = f" (accepted: {', '.join(self.allowed)})" if self.allowed else ""
        super().__init__(f"Unsupported import file {filename!r}{hint}")


class UnreadableFileError(ImportFileError):
    """The file could not be parsed as a spreadsheet."""


class EmptyImportFileError(ImportFileError):
    """The file parsed but holds no data rows."""
