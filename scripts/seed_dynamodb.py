"""Create the employees DynamoDB table and seed sample employees.

Usage:
    python scripts/seed_dynamodb.py --endpoint-url http://localhost:4566
"""

from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import Any

import boto3

from staffdir.models.employee import EmployeeDraft
from staffdir.persistence.dynamodb_backend import employee_item

TABLE_NAME = "staffdir-employees"
SEED_PATH = Path(__file__).resolve().parent.parent / "config" / "employees_seed.json"


def create_tables(ddb: Any, suffix: str = "", table_name: str = TABLE_NAME) -> None:
    """Create the employees table. Skips if it already exists."""
    client = ddb.meta.client
    existing = client.list_tables().get("TableNames", [])

    full_name = f"{table_name}{suffix}"
    if full_name in existing:
        print(f"  Table {full_name} already exists, skipping")
        return
    client.create_table(
        TableName=full_name,
        KeySchema=[
            {"AttributeName": "PK", "KeyType": "HASH"},
            {"AttributeName": "SK", "KeyType": "RANGE"},
        ],
        AttributeDefinitions=[
            {"AttributeName": "PK", "AttributeType": "S"},
            {"AttributeName": "SK", "AttributeType": "S"},
        ],
        BillingMode="PAY_PER_REQUEST",
    )
    print(f"  Created table {full_name}")


def seed_employees(ddb: Any, suffix: str = "", table_name: str = TABLE_NAME,
                   seed_path: Path = SEED_PATH) -> int:
    """Load employees_seed.json into the table. Re-running overwrites by id."""
    data = json.loads(seed_path.read_text(encoding="utf-8"))

    tbl = ddb.Table(f"{table_name}{suffix}")
    with tbl.batch_writer() as batch:
        for entry in data["employees"]:
            employee_id = entry.pop("id")
            batch.put_item(Item=employee_item(employee_id, EmployeeDraft.model_validate(entry)))
    count = len(data["employees"])
    print(f"  Seeded {count} employees")
    return count


def main() -> None:
    parser = argparse.ArgumentParser(description="Seed DynamoDB employees table for StaffDir")
    parser.add_argument("--endpoint-url", default=None, help="DynamoDB endpoint (e.g. http://localhost:4566)")
    parser.add_argument("--table-suffix", default="", help="Table name suffix (e.g. -dev)")
    parser.add_argument("--region", default="us-east-1", help="AWS region")
    args = parser.parse_args()

    kwargs: dict[str, Any] = {"region_name": args.region}
    if args.endpoint_url:
        kwargs["endpoint_url"] = args.endpoint_url

    ddb = boto3.resource("dynamodb", **kwargs)

    print("Creating tables...")
    create_tables(ddb, suffix=args.table_suffix)

    print("Seeding data...")
    seed_employees(ddb, suffix=args.table_suffix)

    print("Done!")


if __name__ == "__main__":
    main()
