from __future__ import annotations

import pytest
from botocore.exceptions import EndpointConnectionError

from src.domain.entities.errors import CloudServiceError
from src.infrastructure.gateways.aws import Boto3Gateway, create_client, error_code


class _Gateway(Boto3Gateway):
    service_name = "example"


@pytest.mark.asyncio
async def test_call_returns_response(make_client) -> None:
    gateway = _Gateway(make_client(describe={"Value": 1}))

    assert await gateway._call("describe", Name="x") == {"Value": 1}


@pytest.mark.asyncio
async def test_call_translates_client_error(make_client, make_client_error) -> None:
    gateway = _Gateway(make_client(describe=make_client_error("AccessDenied")))

    with pytest.raises(CloudServiceError) as excinfo:
        await gateway._call("describe", Name="x")

    assert excinfo.value.code == "AccessDenied"
    assert excinfo.value.service == "example"
    assert excinfo.value.operation == "describe"
    assert excinfo.value.details["code"] == "AccessDenied"


@pytest.mark.asyncio
async def test_call_returns_none_for_tolerated_code(
    make_client, make_client_error
) -> None:
    gateway = _Gateway(make_client(describe=make_client_error("NotConfigured")))

    assert await gateway._call("describe", tolerate=("NotConfigured",)) is None


@pytest.mark.asyncio
async def test_call_translates_transport_errors(make_client) -> None:
    error = EndpointConnectionError(endpoint_url="https://example.invalid")
    gateway = _Gateway(make_client(describe=error))

    with pytest.raises(CloudServiceError) as excinfo:
        await gateway._call("describe", tolerate=("NotConfigured",))

    assert excinfo.value.code is None
    assert isinstance(excinfo.value.__cause__, EndpointConnectionError)


@pytest.mark.asyncio
async def test_collect_wraps_errors_from_any_page(
    make_client, make_client_error
) -> None:
    client = make_client(
        list_items=[{"Items": [1], "NextToken": "t"}, make_client_error("Throttling")]
    )
    gateway = _Gateway(client)

    with pytest.raises(CloudServiceError) as excinfo:
        await gateway._collect("list_items", {}, "Items")

    assert excinfo.value.code == "Throttling"


def test_error_code_ignores_non_client_errors() -> None:
    assert error_code(RuntimeError("boom")) is None


def test_create_client_applies_region_endpoint_and_timeouts() -> None:
    client = create_client(
        "cloudformation",
        region_name="eu-west-1",
        endpoint_url="http://localhost:4566",
        connect_timeout=2,
        read_timeout=3,
        max_attempts=1,
    )

    assert client.meta.region_name == "eu-west-1"
    assert client.meta.endpoint_url == "http://localhost:4566"
    assert client.meta.config.connect_timeout == 2
    assert client.meta.config.read_timeout == 3
