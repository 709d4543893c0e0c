"""Tests for DirectoryService reload-after-write semantics."""

from __future__ import annotations

import pytest

from staffdir.core.exceptions import PersistenceError, RecordNotFoundError
from staffdir.directory.service import DirectoryService
from staffdir.directory.view import SortDirection, SortState
from tests.fakes import MemoryEmployeeStore, ScriptedEmployeeStore, make_draft


@pytest.fixture
def service() -> DirectoryService:
    return DirectoryService(MemoryEmployeeStore())


def test_refresh_loads_ordered_by_name(service):
    service._store.insert(make_draft(name="Maria Santos"))
    service._store.insert(make_draft(name="Ana Lima"))
    state = service.refresh()
    assert [r.name for r in state.records] == ["Ana Lima", "Maria Santos"]
    assert state.version == 1


def test_create_reloads_state(service):
    created = service.create(make_draft())
    assert service.state.version == 1
    assert service.state.records == (created,)


def test_update_replaces_all_fields(service):
    created = service.create(make_draft(email="joao@empresa.com", contract="CLT"))
    updated = service.update(created.id, make_draft(name="João S. Silva"))
    assert updated.name == "João S. Silva"
    assert updated.email is None
    assert service.state.records == (updated,)
    assert service.state.version == 2


def test_delete_reloads_state(service):
    created = service.create(make_draft())
    service.delete(created.id)
    assert service.state.records == ()


def test_get_unknown_raises(service):
    with pytest.raises(RecordNotFoundError):
        service.get("missing")


def test_failed_write_leaves_state_untouched():
    store = ScriptedEmployeeStore({"BAD": PersistenceError("rejected")})
    service = DirectoryService(store)
    service.create(make_draft(registration="OK"))
    before = service.state

    with pytest.raises(PersistenceError):
        service.create(make_draft(registration="BAD"))

    assert service.state is before


def test_update_missing_leaves_state_untouched(service):
    service.create(make_draft())
    before = service.state
    with pytest.raises(RecordNotFoundError):
        service.update("missing", make_draft())
    assert service.state is before


def test_view_filters_and_sorts(service):
    service.create(make_draft(name="Carlos", unit="TI"))
    service.create(make_draft(name="Bruno", unit="TI"))
    service.create(make_draft(name="Ana", unit="RH"))

    names = [r.name for r in service.view("ti", SortState("name", SortDirection.DESC))]

    assert names == ["Carlos", "Bruno"]
