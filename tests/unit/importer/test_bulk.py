"""Tests for BulkImporter."""

from __future__ import annotations

import io

import pytest
from openpyxl import Workbook

from staffdir.core.exceptions import EmptyImportFileError, PersistenceError, UnsupportedFileError
from staffdir.importer.bulk import BulkImporter
from staffdir.models.imports import ImportOutcome, ParsedRow
from tests.fakes import MemoryEmployeeStore, ScriptedEmployeeStore, make_row


def _parsed(rows: list[list[object]]) -> list[ParsedRow]:
    # header is sheet row 1, so data starts at row 2
    return [ParsedRow(row=i + 2, cells=cells) for i, cells in enumerate(rows)]


def _xlsx(rows: list[list[object]]) -> bytes:
    wb = Workbook()
    ws = wb.active
    ws.append(["Nome", "Matrícula", "CPF", "Especialidade", "Telefone", "Unidade"])
    for row in rows:
        ws.append(row)
    buffer = io.BytesIO()
    wb.save(buffer)
    return buffer.getvalue()


class TestImportRows:
    def test_rows_missing_name_are_reported_and_rest_inserted(self):
        store = MemoryEmployeeStore()
        rows = _parsed([
            make_row(registration="R1"),
            make_row(registration="R2", name=None),
            make_row(registration="R3"),
            make_row(registration="R4", name=""),
            make_row(registration="R5"),
        ])

        result = BulkImporter(store).import_rows(rows)

        assert result.total == 5
        assert result.success == 3
        assert len(result.errors) == 2
        assert [e.row for e in result.errors] == [3, 5]
        assert all(e.kind is ImportOutcome.VALIDATION_ERROR for e in result.errors)
        assert result.errors[0].error == "Missing required fields: name"
        assert sorted(e.registration for e in store.select()) == ["R1", "R3", "R5"]

    def test_validation_errors_skip_the_store(self):
        store = ScriptedEmployeeStore()
        BulkImporter(store).import_rows(_parsed([make_row(cpf=None), make_row()]))
        assert store.insert_calls == ["EMP001"]

    def test_store_rejection_is_row_error(self):
        store = ScriptedEmployeeStore({"R2": PersistenceError("duplicate key value")})
        rows = _parsed([make_row(registration="R1"), make_row(registration="R2"), make_row(registration="R3")])

        result = BulkImporter(store).import_rows(rows)

        assert result.success == 2
        [error] = result.errors
        assert error.row == 3
        assert error.kind is ImportOutcome.PERSISTENCE_ERROR
        assert error.error == "Database error: duplicate key value"
        assert error.data[1] == "R2"

    def test_unexpected_exception_is_row_error(self):
        store = ScriptedEmployeeStore({"R1": RuntimeError("connection reset")})
        result = BulkImporter(store).import_rows(_parsed([make_row(registration="R1"), make_row(registration="R2")]))

        assert result.success == 1
        [error] = result.errors
        assert error.kind is ImportOutcome.UNEXPECTED_ERROR
        assert error.error == "Unexpected error: connection reset"

    def test_never_stops_early(self):
        failures = {f"R{i}": PersistenceError("down") for i in range(1, 5)}
        store = ScriptedEmployeeStore(failures)
        rows = _parsed([make_row(registration=f"R{i}") for i in range(1, 6)])

        result = BulkImporter(store).import_rows(rows)

        assert store.insert_calls == ["R1", "R2", "R3", "R4", "R5"]
        assert result.success == 1
        assert [e.row for e in result.errors] == [2, 3, 4, 5]

    def test_progress_is_monotonic_and_ends_at_100(self):
        seen: list[float] = []
        rows = _parsed([make_row(registration=f"R{i}") for i in range(4)] + [make_row(name=None)])

        BulkImporter(MemoryEmployeeStore()).import_rows(rows, on_progress=seen.append)

        assert seen == [20.0, 40.0, 60.0, 80.0, 100.0]

    def test_no_rows_is_file_level_error(self):
        with pytest.raises(EmptyImportFileError):
            BulkImporter(MemoryEmployeeStore()).import_rows([])


class TestImportFile:
    def test_workbook_end_to_end(self):
        store = MemoryEmployeeStore()
        content = _xlsx([make_row(registration="R1")[:6], make_row(unit=None)[:6]])

        result = BulkImporter(store).import_file(content, "funcionarios.xlsx")

        assert result.total == 2
        assert result.success == 1
        assert result.errors[0].row == 3
        assert len(store) == 1

    def test_reimport_inserts_again(self):
        store = MemoryEmployeeStore()
        importer = BulkImporter(store)
        content = _xlsx([make_row(registration="R1")[:6], make_row(registration="R2")[:6]])

        first = importer.import_file(content, "funcionarios.xlsx")
        second = importer.import_file(content, "funcionarios.xlsx")

        assert first.success == second.success == 2
        assert len(store) == 4

    def test_file_level_errors_propagate(self):
        importer = BulkImporter(MemoryEmployeeStore())
        with pytest.raises(UnsupportedFileError):
            importer.import_file(b"data", "funcionarios.pdf")
        with pytest.raises(EmptyImportFileError):
            importer.import_file(_xlsx([]), "funcionarios.xlsx")

    def test_allowed_extensions_override(self):
        importer = BulkImporter(MemoryEmployeeStore())
        with pytest.raises(UnsupportedFileError):
            importer.import_file(_xlsx([make_row()[:6]]), "funcionarios.xlsx", allowed_extensions=[".csv"])
