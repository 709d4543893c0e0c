"""Employee record: the single domain entity of the directory.

`EmployeeDraft` is the write shape (form submission or import row) and
`Employee` is the stored shape with the identifier issued by the store.
Column order for spreadsheets lives here too, since import, template and
export all depend on it.
"""

from __future__ import annotations

from datetime import date
from enum import StrEnum
from typing import Any, Optional

from pydantic import BaseModel, EmailStr, Field, field_validator


class Gender(StrEnum):
    MALE = "M"
    FEMALE = "F"


REQUIRED_FIELDS: tuple[str, ...] = (
    "name", "registration", "cpf", "specialty", "phone", "unit",
)

OPTIONAL_FIELDS: tuple[str, ...] = (
    "email", "network_login", "date_of_birth", "gender", "admission_date",
    "coordination", "contract", "work_schedule", "photo",
)

DATE_FIELDS: tuple[str, ...] = ("date_of_birth", "admission_date")

# Positional layout shared by import, template and export.
SPREADSHEET_COLUMNS: tuple[str, ...] = (
    "name", "registration", "cpf", "specialty", "phone", "unit",
    "email", "network_login", "date_of_birth", "gender", "admission_date",
    "coordination", "contract", "work_schedule", "photo",
)

COLUMN_LABELS: dict[str, str] = {
    "name": "Nome",
    "registration": "Matrícula",
    "cpf": "CPF",
    "specialty": "Especialidade",
    "phone": "Telefone",
    "unit": "Unidade",
    "email": "Email",
    "network_login": "Login de Rede",
    "date_of_birth": "Data de Nascimento",
    "gender": "Sexo",
    "admission_date": "Data de Admissão",
    "coordination": "Coordenação",
    "contract": "Contrato",
    "work_schedule": "Horário de Trabalho",
    "photo": "Foto (URL)",
}


class EmployeeDraft(BaseModel):
    """Employee fields as submitted for create or full replace."""

    # --- Required ---
    name: str = Field(min_length=1)
    registration: str = Field(min_length=1)
    cpf: str = Field(min_length=1)
    specialty: str = Field(min_length=1)
    phone: str = Field(min_length=1)
    unit: str = Field(min_length=1)

    # --- Contact ---
    email: Optional[EmailStr] = None
    network_login: Optional[str] = None

    # --- Personal / Employment ---
    date_of_birth: Optional[date] = None
    admission_date: Optional[date] = None
    gender: Optional[Gender] = None
    coordination: Optional[str] = None
    contract: Optional[str] = None  # CLT, PJ, Estágio, Terceirizado; open set
    work_schedule: Optional[str] = None
    photo: Optional[str] = None  # URL, reachability not checked

    model_config = {"str_strip_whitespace": True}

    @field_validator(*OPTIONAL_FIELDS, mode="before")
    @classmethod
    def _blank_to_none(cls, value: Any) -> Any:
        if isinstance(value, str):
            value = value.strip()
            return value or None
        return value

    def to_record(self) -> dict[str, Any]:
        """JSON-safe field mapping with absent optionals left out."""
        return self.model_dump(mode="json", exclude_none=True)


class Employee(EmployeeDraft):
    """Employee as stored, with the identifier issued by the store."""

    id: str

    def to_draft(self) -> EmployeeDraft:
        return EmployeeDraft.model_validate(self.model_dump(exclude={"id"}))
