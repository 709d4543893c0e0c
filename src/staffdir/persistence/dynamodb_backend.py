"""DynamoDB backend implementing IEmployeeStore."""

from __future__ import annotations

import logging
import uuid
from typing import Any

import boto3
from boto3.dynamodb.conditions import Attr
from botocore.exceptions import ClientError

from staffdir.core.exceptions import PersistenceError, RecordNotFoundError
from staffdir.core.types import JsonDict
from staffdir.models.employee import Employee, EmployeeDraft

logger = logging.getLogger(__name__)

PK_PREFIX = "EMPLOYEE#"
PROFILE_SK = "PROFILE"
_KEY_ATTRS = ("PK", "SK")


def employee_item(employee_id: str, record: EmployeeDraft) -> JsonDict:
    """DynamoDB item for an employee; absent optionals are not written."""
    return {"PK": f"{PK_PREFIX}{employee_id}", "SK": PROFILE_SK, "id": employee_id, **record.to_record()}


def _from_item(item: JsonDict) -> Employee:
    return Employee.model_validate({k: v for k, v in item.items() if k not in _KEY_ATTRS})


def _is_conditional_failure(exc: ClientError) -> bool:
    return exc.response.get("Error", {}).get("Code") == "ConditionalCheckFailedException"


class DynamoDBEmployeeStore:
    """Production IEmployeeStore backed by a single DynamoDB table (PK/SK)."""

    def __init__(self, table_name: str = "staffdir-employees", table_suffix: str = "",
                 region: str = "us-east-1", endpoint_url: str | None = None) -> None:
        self._table_name = f"{table_name}{table_suffix}"
        self._region = region
        self._endpoint_url = endpoint_url
        kwargs: dict = {"region_name": region}
        if endpoint_url:
            kwargs["endpoint_url"] = endpoint_url
        self._ddb = boto3.resource("dynamodb", **kwargs)
        self._table = self._ddb.Table(self._table_name)

    def _key(self, employee_id: str) -> dict[str, str]:
        return {"PK": f"{PK_PREFIX}{employee_id}", "SK": PROFILE_SK}

    # ---- IEmployeeStore methods ----

    def select(
        self,
        filters: dict[str, Any] | None = None,
        order_by: str | None = None,
        descending: bool = False,
    ) -> list[Employee]:
        condition = Attr("SK").eq(PROFILE_SK)
        for field, value in (filters or {}).items():
            condition = condition & Attr(field).eq(value)

        items: list[dict[str, Any]] = []
        scan_kwargs: dict[str, Any] = {"FilterExpression": condition}
        try:
            while True:
                resp = self._table.scan(**scan_kwargs)
                items.extend(resp.get("Items", []))
                last_key = resp.get("LastEvaluatedKey")
                if not last_key:
                    break
                scan_kwargs["ExclusiveStartKey"] = last_key
        except ClientError as exc:
            raise PersistenceError(f"DynamoDB scan failed on {self._table_name!r}: {exc}") from exc

        if order_by:
            items.sort(
                key=lambda i: (i.get(order_by) is None, str(i.get(order_by) or "")),
                reverse=descending,
            )
        return [_from_item(i) for i in items]

    def get(self, employee_id: str) -> Employee | None:
        try:
            resp = self._table.get_item(Key=self._key(employee_id))
        except ClientError as exc:
            raise PersistenceError(f"DynamoDB get failed for {employee_id!r}: {exc}") from exc
        item = resp.get("Item")
        return _from_item(item) if item else None

    def insert(self, record: EmployeeDraft) -> Employee:
        employee_id = str(uuid.uuid4())
        item = employee_item(employee_id, record)
        try:
            self._table.put_item(Item=item, ConditionExpression="attribute_not_exists(PK)")
        except ClientError as exc:
            raise PersistenceError(f"DynamoDB insert failed: {exc}") from exc
        logger.debug("Inserted employee %s into %s", employee_id, self._table_name)
        return _from_item(item)

    def update(self, employee_id: str, record: EmployeeDraft) -> Employee:
        item = employee_item(employee_id, record)
        try:
            self._table.put_item(Item=item, ConditionExpression="attribute_exists(PK)")
        except ClientError as exc:
            if _is_conditional_failure(exc):
                raise RecordNotFoundError(employee_id) from exc
            raise PersistenceError(f"DynamoDB update failed for {employee_id!r}: {exc}") from exc
        logger.debug("Replaced employee %s in %s", employee_id, self._table_name)
        return _from_item(item)

    def delete(self, employee_id: str) -> None:
        try:
            self._table.delete_item(Key=self._key(employee_id), ConditionExpression="attribute_exists(PK)")
        except ClientError as exc:
            if _is_conditional_failure(exc):
                raise RecordNotFoundError(employee_id) from exc
            raise PersistenceError(f"DynamoDB delete failed for {employee_id!r}: {exc}") from exc
        logger.debug("Deleted employee %s from %s", employee_id, self._table_name)
