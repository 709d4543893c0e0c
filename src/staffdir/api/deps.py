"""Request-scoped accessors for objects created in the lifespan."""

from __future__ import annotations

from fastapi import Request

from staffdir.core.config import AppSettings
from staffdir.directory.service import DirectoryService
from staffdir.importer.bulk import BulkImporter


def get_settings(request: Request) -> AppSettings:
    return request.app.state.settings


def get_directory(request: Request) -> DirectoryService:
    return request.app.state.directory


def get_importer(request: Request) -> BulkImporter:
    return request.app.state.importer
