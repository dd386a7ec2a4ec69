from __future__ import annotations

from types import SimpleNamespace

import pytest
from dependency_injector import providers

from src.main.config import AppSettings, HookSettings
from src.main.container import init_container


@pytest.fixture()
def app_settings() -> AppSettings:
    return AppSettings(
        environment="testing",
        hook=HookSettings(
            StackId="blue-green",
            CurrentVersion="hello-fn:7",
            Namespace="Deployments",
            MetricName="Fitness",
        ),
    )


@pytest.fixture()
def fake_clients(make_client, make_hello_payload) -> SimpleNamespace:
    return SimpleNamespace(
        cloudformation=make_client(
            list_stack_resources={
                "StackResourceSummaries": [
                    {
                        "ResourceType": "AWS::S3::Bucket",
                        "PhysicalResourceId": "app-bucket",
                        "LogicalResourceId": "Bucket",
                    },
                    {
                        "ResourceType": "AWS::Lambda::Function",
                        "PhysicalResourceId": "hello-fn",
                        "LogicalResourceId": "HelloFunction",
                    },
                    {
                        "ResourceType": "AWS::Lambda::Function",
                        "PhysicalResourceId": "pre-traffic-hook",
                        "LogicalResourceId": "PreTrafficHook",
                    },
                ]
            }
        ),
        lambda_=make_client(
            invoke={"StatusCode": 200, "Payload": make_hello_payload()}
        ),
        dynamodb=make_client(),
        s3=make_client(
            get_bucket_encryption={
                "ServerSideEncryptionConfiguration": {
                    "Rules": [
                        {"ApplyServerSideEncryptionByDefault": {"SSEAlgorithm": "AES256"}}
                    ]
                }
            }
        ),
        config=make_client(
            get_compliance_details_by_resource={
                "EvaluationResults": [{"ComplianceType": "COMPLIANT"}]
            }
        ),
        codedeploy=make_client(put_lifecycle_event_hook_execution_status={}),
        cloudwatch=make_client(put_metric_data={}),
    )


@pytest.fixture()
def wired_container(app_settings, fake_clients):
    container = init_container(app_settings)
    container.cloudformation_client.override(providers.Object(fake_clients.cloudformation))
    container.lambda_client.override(providers.Object(fake_clients.lambda_))
    container.dynamodb_client.override(providers.Object(fake_clients.dynamodb))
    container.s3_client.override(providers.Object(fake_clients.s3))
    container.config_service_client.override(providers.Object(fake_clients.config))
    container.codedeploy_client.override(providers.Object(fake_clients.codedeploy))
    container.cloudwatch_client.override(providers.Object(fake_clients.cloudwatch))
    return container
