from __future__ import annotations

import pytest

from src.domain.entities.errors import CloudServiceError
from src.infrastructure.gateways.dynamodb_gateway import DynamoDBTableGateway


@pytest.mark.asyncio
async def test_get_encryption_status_reads_sse_description(make_client) -> None:
    client = make_client(
        describe_table={
            "Table": {"TableName": "orders", "SSEDescription": {"Status": "ENABLED"}}
        }
    )

    status = await DynamoDBTableGateway(client).get_encryption_status("orders")

    assert status == "ENABLED"
    assert client.calls_to("describe_table") == [{"TableName": "orders"}]


@pytest.mark.asyncio
async def test_get_encryption_status_without_description(make_client) -> None:
    client = make_client(describe_table={"Table": {"TableName": "orders"}})

    assert await DynamoDBTableGateway(client).get_encryption_status("orders") is None


@pytest.mark.asyncio
async def test_get_continuous_backups_status(make_client) -> None:
    client = make_client(
        describe_continuous_backups={
            "ContinuousBackupsDescription": {
                "ContinuousBackupsStatus": "ENABLED",
                "PointInTimeRecoveryDescription": {
                    "PointInTimeRecoveryStatus": "DISABLED"
                },
            }
        }
    )

    gateway = DynamoDBTableGateway(client)

    assert await gateway.get_continuous_backups_status("orders") == "ENABLED"


@pytest.mark.asyncio
async def test_describe_failure_is_fatal(make_client, make_client_error) -> None:
    client = make_client(describe_table=make_client_error("ResourceNotFoundException"))

    with pytest.raises(CloudServiceError):
        await DynamoDBTableGateway(client).get_encryption_status("missing")
