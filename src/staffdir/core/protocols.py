"""Protocol interfaces for StaffDir abstractions.

All inter-layer communication uses these Protocols: structural typing,
no inheritance required, easy to test with isinstance().
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from staffdir.models.employee import Employee, EmployeeDraft


# ---------------------------------------------------------------------------
# Persistence: Employee Store
# ---------------------------------------------------------------------------

@runtime_checkable
class IEmployeeStore(Protocol):
    """Table-scoped record store for employees.

    Implementations raise PersistenceError with the backend's message when a
    write is rejected, and RecordNotFoundError for unknown identifiers.
    """

    def select(
        self,
        filters: dict[str, Any] | None = None,
        order_by: str | None = None,
        descending: bool = False,
    ) -> list[Employee]: ...

    def get(self, employee_id: str) -> Employee | None: ...

    def insert(self, record: EmployeeDraft) -> Employee: ...

    def update(self, employee_id: str, record: EmployeeDraft) -> Employee: ...

    def delete(self, employee_id: str) -> None: ...
