"""Spreadsheet import, template download and directory export."""

from __future__ import annotations

from fastapi import APIRouter, Depends, File, Response, UploadFile

from staffdir.api.deps import get_directory, get_importer, get_settings
from staffdir.core.config import AppSettings
from staffdir.directory.service import DirectoryService
from staffdir.importer.bulk import BulkImporter
from staffdir.importer.template import XLSX_MEDIA_TYPE, build_template, export_workbook
from staffdir.models.imports import ImportResult

router = APIRouter(prefix="/employees", tags=["import"])


def _xlsx_response(content: bytes, filename: str) -> Response:
    return Response(
        content=content,
        media_type=XLSX_MEDIA_TYPE,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.post("/import", response_model=ImportResult)
def import_employees(
    file: UploadFile = File(...),
    importer: BulkImporter = Depends(get_importer),
    directory: DirectoryService = Depends(get_directory),
    settings: AppSettings = Depends(get_settings),
) -> ImportResult:
    """Insert one employee per spreadsheet row and report per-row failures."""
    content = file.file.read()
    result = importer.import_file(
        content,
        file.filename or "",
        allowed_extensions=settings.imports.allowed_extensions,
    )
    if result.success:
        directory.refresh()
    return result


@router.get("/template")
def download_template(settings: AppSettings = Depends(get_settings)) -> Response:
    content = build_template(sheet_name=settings.imports.sheet_name)
    return _xlsx_response(content, settings.imports.template_filename)


@router.get("/export")
def export_employees(
    directory: DirectoryService = Depends(get_directory),
    settings: AppSettings = Depends(get_settings),
) -> Response:
    state = directory.refresh()
    content = export_workbook(state.records, sheet_name=settings.imports.sheet_name)
    return _xlsx_response(content, settings.imports.export_filename)
