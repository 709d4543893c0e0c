"""Workbook generators sharing the import column layout."""

from __future__ import annotations

import io
from typing import Iterable

import pandas as pd

from staffdir.models.employee import COLUMN_LABELS, SPREADSHEET_COLUMNS, Employee

XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
DEFAULT_SHEET = "Funcionários"

EXAMPLE_ROW: dict[str, str] = {
    "name": "João Silva",
    "registration": "12345",
    "cpf": "123.456.789-00",
    "specialty": "Desenvolvedor",
    "phone": "(11) 99999-9999",
    "unit": "TI",
    "email": "joao@empresa.com",
    "network_login": "joao.silva",
    "date_of_birth": "1990-01-15",
    "gender": "M",
    "admission_date": "2023-01-01",
    "coordination": "Coordenação TI",
    "contract": "CLT",
    "work_schedule": "Segunda a Sexta - 9h às 18h",
    "photo": "https://exemplo.com/foto.jpg",
}


def _headers() -> list[str]:
    return [COLUMN_LABELS[c] for c in SPREADSHEET_COLUMNS]


def _to_xlsx(rows: list[list[object]], sheet_name: str) -> bytes:
    frame = pd.DataFrame(rows, columns=_headers())
    buffer = io.BytesIO()
    with pd.ExcelWriter(buffer, engine="openpyxl") as writer:
        frame.to_excel(writer, sheet_name=sheet_name, index=False)
    return buffer.getvalue()


def build_template(sheet_name: str = DEFAULT_SHEET) -> bytes:
    """Header row plus one example row, as .xlsx bytes."""
    return _to_xlsx([[EXAMPLE_ROW[c] for c in SPREADSHEET_COLUMNS]], sheet_name)


def export_workbook(records: Iterable[Employee], sheet_name: str = DEFAULT_SHEET) -> bytes:
    """Current directory in the import layout; the result re-imports as-is."""
    rows = []
    for employee in records:
        data = employee.to_record()
        rows.append([data.get(c) for c in SPREADSHEET_COLUMNS])
    return _to_xlsx(rows, sheet_name)
