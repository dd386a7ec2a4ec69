from __future__ import annotations

import pytest

from src.domain.entities.errors import CloudServiceError
from src.domain.entities.stack import ResourceKind, StackResource
from src.infrastructure.gateways.cloudformation_gateway import (
    CloudFormationStackGateway,
)


def _summary(resource_type: str, physical_id: str, logical_id: str) -> dict:
    return {
        "ResourceType": resource_type,
        "PhysicalResourceId": physical_id,
        "LogicalResourceId": logical_id,
        "ResourceStatus": "CREATE_COMPLETE",
    }


@pytest.mark.asyncio
async def test_list_stack_resources_drains_all_pages(make_client) -> None:
    client = make_client(
        list_stack_resources=[
            {
                "StackResourceSummaries": [
                    _summary("AWS::S3::Bucket", "bucket-1", "Bucket"),
                ],
                "NextToken": "next",
            },
            {
                "StackResourceSummaries": [
                    _summary("AWS::Lambda::Function", "hello-fn", "Hello"),
                    _summary("AWS::CloudFormation::Stack", "arn:nested", "Nested"),
                ],
            },
        ]
    )
    gateway = CloudFormationStackGateway(client)

    resources = await gateway.list_stack_resources("blue-green")

    assert resources == [
        StackResource("AWS::S3::Bucket", "bucket-1", "Bucket"),
        StackResource("AWS::Lambda::Function", "hello-fn", "Hello"),
        StackResource("AWS::CloudFormation::Stack", "arn:nested", "Nested"),
    ]
    assert resources[2].kind is ResourceKind.OTHER
    calls = client.calls_to("list_stack_resources")
    assert calls[0] == {"StackName": "blue-green"}
    assert calls[1] == {"StackName": "blue-green", "NextToken": "next"}


@pytest.mark.asyncio
async def test_list_stack_resources_missing_stack_is_fatal(
    make_client, make_client_error
) -> None:
    client = make_client(list_stack_resources=make_client_error("ValidationError"))
    gateway = CloudFormationStackGateway(client)

    with pytest.raises(CloudServiceError) as excinfo:
        await gateway.list_stack_resources("does-not-exist")

    assert excinfo.value.service == "cloudformation"
    assert excinfo.value.code == "ValidationError"
