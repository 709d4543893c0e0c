"""BulkImporter: sequential row-by-row insert with per-row error collection."""

from __future__ import annotations

import logging
from typing import Sequence

from staffdir.core.exceptions import EmptyImportFileError, PersistenceError
from staffdir.core.protocols import IEmployeeStore
from staffdir.core.types import ProgressCallback
from staffdir.importer.mapper import map_row
from staffdir.importer.spreadsheet import read_rows
from staffdir.models.imports import ImportOutcome, ImportResult, ParsedRow, RowError

logger = logging.getLogger(__name__)


class BulkImporter:
    """Drives parser and mapper over a file, one store insert per row.

    Row-level failures are folded into the result and never raised. Only
    file-level problems (ImportFileError) escape.
    """

    def __init__(self, store: IEmployeeStore) -> None:
        self._store = store

    def import_file(
        self,
        content: bytes,
        filename: str,
        *,
        allowed_extensions: list[str] | None = None,
        on_progress: ProgressCallback | None = None,
    ) -> ImportResult:
        rows = read_rows(content, filename, allowed_extensions)
        logger.info("Importing %d rows from %s", len(rows), filename)
        return self.import_rows(rows, on_progress=on_progress)

    def import_rows(
        self, rows: Sequence[ParsedRow], *, on_progress: ProgressCallback | None = None
    ) -> ImportResult:
        if not rows:
            raise EmptyImportFileError("No data rows to import")

        result = ImportResult(total=len(rows))
        for processed, parsed in enumerate(rows, start=1):
            error = self._process(parsed)
            if error is None:
                result.success += 1
            else:
                logger.warning("Row %d rejected (%s): %s", error.row, error.kind, error.error)
                result.errors.append(error)
            if on_progress is not None:
                on_progress(processed / result.total * 100)

        logger.info(
            "Import finished: %d/%d rows inserted, %d errors",
            result.success, result.total, result.error_count,
        )
        return result

    def _process(self, parsed: ParsedRow) -> RowError | None:
        """Insert one row; return the row's error, or None on success."""
        try:
            mapped = map_row(parsed.cells, parsed.row)
            if not mapped.valid or mapped.employee is None:
                return RowError(
                    row=parsed.row,
                    error=mapped.error or "Invalid data",
                    kind=ImportOutcome.VALIDATION_ERROR,
                    data=parsed.cells,
                )
            try:
                self._store.insert(mapped.employee)
            except PersistenceError as exc:
                return RowError(
                    row=parsed.row,
                    error=f"Database error: {exc}",
                    kind=ImportOutcome.PERSISTENCE_ERROR,
                    data=parsed.cells,
                )
        except Exception as exc:
            return RowError(
                row=parsed.row,
                error=f"Unexpected error: {exc}",
                kind=ImportOutcome.UNEXPECTED_ERROR,
                data=parsed.cells,
            )
        return None
