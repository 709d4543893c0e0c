"""Application configuration using pydantic-settings with grouped env prefixes."""

from __future__ import annotations

from typing import Literal

from pydantic_settings import BaseSettings


class DynamoDBConfig(BaseSettings):
    """DynamoDB configuration for the employee table."""

    model_config = {"env_prefix": "STAFFDIR_DYNAMO_"}

    table_name: str = "staffdir-employees"
    table_suffix: str = ""  # "-dev", "-uat", or "" for prod
    region: str = "us-east-1"
    endpoint_url: str | None = None  # LocalStack override


class ImportConfig(BaseSettings):
    """Spreadsheet import and template settings."""

    model_config = {"env_prefix": "STAFFDIR_IMPORT_"}

    allowed_extensions: list[str] = [".xlsx", ".xls", ".csv"]
    template_filename: str = "modelo_funcionarios.xlsx"
    export_filename: str = "funcionarios.xlsx"
    sheet_name: str = "Funcionários"


class AppSettings(BaseSettings):
    """Root application settings aggregating all sub-configs."""

    model_config = {"env_prefix": "STAFFDIR_"}

    environment: Literal["dev", "uat", "prod"] = "dev"
    log_level: str = "INFO"
    store_backend: Literal["memory", "dynamodb"] = "memory"

    dynamodb: DynamoDBConfig = DynamoDBConfig()
    imports: ImportConfig = ImportConfig()
