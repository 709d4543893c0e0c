"""FastAPI application with lifespan, error mapping and router mounting."""

from __future__ import annotations

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from staffdir.api.routes import employees, health, imports
from staffdir.core.config import AppSettings
from staffdir.core.exceptions import ImportFileError, PersistenceError, RecordNotFoundError
from staffdir.core.protocols import IEmployeeStore
from staffdir.directory.service import DirectoryService
from staffdir.importer.bulk import BulkImporter
from staffdir.persistence import create_persistence

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Initialize and tear down application resources."""
    settings: AppSettings = app.state.settings
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    store: IEmployeeStore = app.state.store or create_persistence(settings)
    app.state.directory = DirectoryService(store)
    app.state.importer = BulkImporter(store)
    logger.info("StaffDir started (environment=%s, store=%s)", settings.environment, type(store).__name__)
    yield


async def _not_found(request: Request, exc: RecordNotFoundError) -> JSONResponse:
    return JSONResponse(status_code=404, content={"detail": str(exc)})


async def _bad_import_file(request: Request, exc: ImportFileError) -> JSONResponse:
    return JSONResponse(status_code=400, content={"detail": str(exc)})


async def _store_failure(request: Request, exc: PersistenceError) -> JSONResponse:
    logger.error("Store failure on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=502, content={"detail": str(exc)})


async def _unexpected(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


def create_app(settings: AppSettings | None = None, store: IEmployeeStore | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    ``store`` overrides the backend chosen by settings (tests, local runs).
    """
    app = FastAPI(
        title="StaffDir Employee Directory",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.settings = settings or AppSettings()
    app.state.store = store

    app.add_exception_handler(RecordNotFoundError, _not_found)
    app.add_exception_handler(ImportFileError, _bad_import_file)
    app.add_exception_handler(PersistenceError, _store_failure)
    app.add_exception_handler(Exception, _unexpected)

    app.include_router(health.router)
    # imports first: its fixed paths must win over /employees/{employee_id}
    app.include_router(imports.router)
    app.include_router(employees.router)
    return app
