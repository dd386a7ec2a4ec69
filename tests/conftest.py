from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any, Callable, Dict, List, Tuple

import pytest
from botocore.exceptions import ClientError

from src.domain.entities.fitness import DeploymentContext, InvocationResult
from src.domain.entities.stack import StackResource

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


class FakeBotoClient:
    """
    Stand-in for a boto3 client.

    Each keyword names an operation. Its value is either a single response
    (returned on every call) or a list of responses consumed one per call,
    the last one repeating. Exceptions in place of a response are raised.
    """

    def __init__(self, **responses: Any) -> None:
        self.calls: List[Tuple[str, Dict[str, Any]]] = []
        self._responses: Dict[str, List[Any]] = {
            name: list(value) if isinstance(value, list) else [value]
            for name, value in responses.items()
        }

    def __getattr__(self, name: str) -> Callable[..., Any]:
        if name.startswith("_"):
            raise AttributeError(name)
        if name not in self._responses:
            raise AttributeError(f"FakeBotoClient has no operation {name}")

        def _operation(**kwargs: Any) -> Any:
            self.calls.append((name, kwargs))
            queue = self._responses[name]
            response = queue.pop(0) if len(queue) > 1 else queue[0]
            if isinstance(response, BaseException):
                raise response
            return response

        return _operation

    def calls_to(self, name: str) -> List[Dict[str, Any]]:
        return [kwargs for operation, kwargs in self.calls if operation == name]


def client_error(code: str, operation: str = "Operation") -> ClientError:
    return ClientError({"Error": {"Code": code, "Message": f"{code} raised"}}, operation)


def hello_payload(message: str = "Hello from hello-fn version 1 !") -> bytes:
    """Payload returned by an API-style function that answers with a greeting."""
    return json.dumps(
        {
            "statusCode": 200,
            "headers": {"Content-Type": "application/json"},
            "body": json.dumps({"message": message}),
        }
    ).encode("utf-8")


@pytest.fixture()
def make_client() -> Callable[..., FakeBotoClient]:
    return FakeBotoClient


@pytest.fixture()
def make_client_error() -> Callable[..., ClientError]:
    return client_error


@pytest.fixture()
def make_hello_payload() -> Callable[..., bytes]:
    return hello_payload


@pytest.fixture()
def greeting_invocation() -> InvocationResult:
    return InvocationResult(status_code=200, payload=hello_payload())


@pytest.fixture()
def deployment_context() -> DeploymentContext:
    return DeploymentContext(
        current_function_identity="pre-traffic-hook",
        current_function_version_identity="hello-fn:7",
        deployment_id="d-ABCDEF123",
        lifecycle_execution_id="hook-exec-1",
    )


@pytest.fixture()
def stack_resources() -> List[StackResource]:
    return [
        StackResource("AWS::S3::Bucket", "app-bucket", "Bucket"),
        StackResource("AWS::DynamoDB::Table", "app-table", "Table"),
        StackResource("AWS::Lambda::Function", "hello-fn", "HelloFunction"),
        StackResource("AWS::Lambda::Function", "pre-traffic-hook", "PreTrafficHook"),
        StackResource("AWS::IAM::Role", "app-role", "Role"),
    ]
