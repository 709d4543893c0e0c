"""Pluggable persistence backends behind Protocol interfaces."""

from __future__ import annotations

from staffdir.core.config import AppSettings
from staffdir.core.protocols import IEmployeeStore
from staffdir.persistence.dynamodb_backend import DynamoDBEmployeeStore
from staffdir.persistence.memory_backend import MemoryEmployeeStore


def create_persistence(settings: AppSettings | None = None) -> IEmployeeStore:
    """Create the employee store selected by application settings."""
    if settings is None:
        settings = AppSettings()

    if settings.store_backend == "dynamodb":
        return DynamoDBEmployeeStore(
            table_name=settings.dynamodb.table_name,
            table_suffix=settings.dynamodb.table_suffix,
            region=settings.dynamodb.region,
            endpoint_url=settings.dynamodb.endpoint_url,
        )
    return MemoryEmployeeStore()
