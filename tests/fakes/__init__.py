"""Shared test doubles: memory backend re-export plus builders."""

from __future__ import annotations

from typing import Any

from staffdir.models.employee import SPREADSHEET_COLUMNS, EmployeeDraft
from staffdir.persistence.memory_backend import MemoryEmployeeStore

BASE_FIELDS: dict[str, Any] = {
    "name": "João Silva",
    "registration": "EMP001",
    "cpf": "123.456.789-00",
    "specialty": "Desenvolvedor",
    "phone": "(11) 99999-1234",
    "unit": "TI",
}


def make_draft(**overrides: Any) -> EmployeeDraft:
    return EmployeeDraft.model_validate({**BASE_FIELDS, **overrides})


def make_row(**overrides: Any) -> list[Any]:
    """15-cell spreadsheet row in import column order."""
    values = {**BASE_FIELDS, **overrides}
    return [values.get(c) for c in SPREADSHEET_COLUMNS]


class ScriptedEmployeeStore(MemoryEmployeeStore):
    """Memory store whose inserts fail for chosen registrations."""

    def __init__(self, failures: dict[str, Exception] | None = None) -> None:
        super().__init__()
        self._failures = failures or {}
        self.insert_calls: list[str] = []

    def insert(self, record: EmployeeDraft):
        self.insert_calls.append(record.registration)
        if record.registration in self._failures:
            raise self._failures[record.registration]
        return super().insert(record)


__all__ = ["MemoryEmployeeStore", "ScriptedEmployeeStore", "make_draft", "make_row", "BASE_FIELDS"]
