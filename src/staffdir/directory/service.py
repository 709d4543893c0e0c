"""DirectoryService: single-record CRUD with a full reload after every write."""

from __future__ import annotations

import logging

from staffdir.core.exceptions import RecordNotFoundError
from staffdir.core.protocols import IEmployeeStore
from staffdir.directory.view import DirectoryState, SortState, filter_records, sort_records
from staffdir.models.employee import Employee, EmployeeDraft

logger = logging.getLogger(__name__)


class DirectoryService:
    """Owns the loaded record set and the store it mirrors.

    Writes go to the store first; the in-memory state is only replaced by a
    successful reload, so a failed write leaves it untouched.
    """

    def __init__(self, store: IEmployeeStore, order_by: str = "name") -> None:
        self._store = store
        self._order_by = order_by
        self._state = DirectoryState()

    @property
    def state(self) -> DirectoryState:
        return self._state

    def refresh(self) -> DirectoryState:
        records = self._store.select(order_by=self._order_by)
        self._state = self._state.replaced(records)
        return self._state

    def get(self, employee_id: str) -> Employee:
        employee = self._store.get(employee_id)
        if employee is None:
            raise RecordNotFoundError(employee_id)
        return employee

    def create(self, draft: EmployeeDraft) -> Employee:
        created = self._store.insert(draft)
        logger.info("Created employee %s (%s)", created.id, created.registration)
        self.refresh()
        return created

    def update(self, employee_id: str, draft: EmployeeDraft) -> Employee:
        updated = self._store.update(employee_id, draft)
        logger.info("Updated employee %s", employee_id)
        self.refresh()
        return updated

    def delete(self, employee_id: str) -> None:
        self._store.delete(employee_id)
        logger.info("Deleted employee %s", employee_id)
        self.refresh()

    def view(self, query: str = "", sort: SortState | None = None) -> list[Employee]:
        records = filter_records(self._state.records, query)
        if sort is not None and sort.field:
            records = sort_records(records, sort.field, sort.direction)
        return records
