"""Employee CRUD and directory listing."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Response, status

from staffdir.api.deps import get_directory
from staffdir.directory.service import DirectoryService
from staffdir.directory.view import SORTABLE_FIELDS, SortDirection, SortState
from staffdir.models.employee import Employee, EmployeeDraft

router = APIRouter(prefix="/employees", tags=["employees"])


@router.get("", response_model=list[Employee])
def list_employees(
    q: str = "",
    sort: str | None = None,
    direction: SortDirection = SortDirection.ASC,
    directory: DirectoryService = Depends(get_directory),
) -> list[Employee]:
    """Reload from the store, then filter by ``q`` and order by ``sort``."""
    if sort is not None and sort not in SORTABLE_FIELDS:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=f"Unknown sort field {sort!r}",
        )
    directory.refresh()
    return directory.view(q, SortState(sort, direction) if sort else None)


@router.get("/{employee_id}", response_model=Employee)
def get_employee(employee_id: str, directory: DirectoryService = Depends(get_directory)) -> Employee:
    return directory.get(employee_id)


@router.post("", response_model=Employee, status_code=status.HTTP_201_CREATED)
def create_employee(draft: EmployeeDraft, directory: DirectoryService = Depends(get_directory)) -> Employee:
    return directory.create(draft)


@router.put("/{employee_id}", response_model=Employee)
def update_employee(
    employee_id: str, draft: EmployeeDraft, directory: DirectoryService = Depends(get_directory)
) -> Employee:
    return directory.update(employee_id, draft)


@router.delete("/{employee_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_employee(employee_id: str, directory: DirectoryService = Depends(get_directory)) -> Response:
    directory.delete(employee_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
