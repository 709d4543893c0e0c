"""In-memory employee store: dict-backed, used by unit tests and local dev."""

from __future__ import annotations

import uuid
from typing import Any, Iterable

from staffdir.core.exceptions import RecordNotFoundError
from staffdir.core.types import JsonDict
from staffdir.models.employee import Employee, EmployeeDraft


def _order_key(value: Any) -> tuple[bool, str]:
    return (value is None, "" if value is None else str(value))


class MemoryEmployeeStore:
    """Dict-backed IEmployeeStore. Rows are kept in their JSON shape."""

    def __init__(self, records: Iterable[Employee] = ()) -> None:
        self._rows: dict[str, JsonDict] = {}
        for employee in records:
            self._rows[employee.id] = employee.to_draft().to_record()

    def __len__(self) -> int:
        return len(self._rows)

    def _row(self, employee_id: str) -> JsonDict:
        return {"id": employee_id, **self._rows[employee_id]}

    def _employee(self, employee_id: str) -> Employee:
        return Employee.model_validate(self._row(employee_id))

    def select(
        self,
        filters: dict[str, Any] | None = None,
        order_by: str | None = None,
        descending: bool = False,
    ) -> list[Employee]:
        ids = list(self._rows)
        if filters:
            ids = [i for i in ids if all(self._row(i).get(k) == v for k, v in filters.items())]
        if order_by:
            ids.sort(key=lambda i: _order_key(self._row(i).get(order_by)), reverse=descending)
        return [self._employee(i) for i in ids]

    def get(self, employee_id: str) -> Employee | None:
        if employee_id not in self._rows:
            return None
        return self._employee(employee_id)

    def insert(self, record: EmployeeDraft) -> Employee:
        employee_id = str(uuid.uuid4())
        self._rows[employee_id] = record.to_record()
        return self._employee(employee_id)

    def update(self, employee_id: str, record: EmployeeDraft) -> Employee:
        if employee_id not in self._rows:
            raise RecordNotFoundError(employee_id)
        self._rows[employee_id] = record.to_record()
        return self._employee(employee_id)

    def delete(self, employee_id: str) -> None:
        if self._rows.pop(employee_id, None) is None:
            raise RecordNotFoundError(employee_id)
