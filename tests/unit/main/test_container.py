from __future__ import annotations

import pytest

from src.application.use_cases.pre_traffic_hook_use_case import (
    RunPreTrafficHookUseCase,
)
from src.domain.entities.fitness import DeploymentStatus
from src.main.config import AppSettings, ProbeSettings
from src.main.container import get_container, init_container


def test_init_and_get_container(app_settings) -> None:
    container = init_container(app_settings)

    assert get_container() is container
    assert container.config.hook.stack_id() == "blue-green"


def test_get_container_without_init_raises(monkeypatch) -> None:
    monkeypatch.setattr("src.main.container._app_container", None)
    with pytest.raises(RuntimeError):
        get_container()


def test_probe_switches_reach_services(app_settings) -> None:
    settings = app_settings.model_copy(
        update={
            "probes": ProbeSettings(extended_checks=True, tolerate_probe_errors=True)
        }
    )
    container = init_container(settings)
    container.function_gateway.override(object())
    container.table_gateway.override(object())
    container.bucket_gateway.override(object())
    container.compliance_gateway.override(object())
    container.stack_gateway.override(object())

    assert container.probe_catalog()._extended_checks is True
    assert container.fitness_evaluation_service()._tolerate_probe_errors is True


@pytest.mark.asyncio
async def test_use_case_runs_against_wired_clients(
    wired_container, fake_clients, deployment_context
) -> None:
    use_case = wired_container.run_pre_traffic_hook_use_case()
    assert isinstance(use_case, RunPreTrafficHookUseCase)

    report = await use_case.execute(deployment_context)

    # self-test 2, bucket 3+0+10, hello-fn 2+10, hook 10
    assert report.total_score == 37
    assert report.status is DeploymentStatus.SUCCEEDED
    assert fake_clients.codedeploy.calls_to(
        "put_lifecycle_event_hook_execution_status"
    ) == [
        {
            "deploymentId": "d-ABCDEF123",
            "lifecycleEventHookExecutionId": "hook-exec-1",
            "status": "Succeeded",
        }
    ]
    [metric_call] = fake_clients.cloudwatch.calls_to("put_metric_data")
    assert metric_call["Namespace"] == "Deployments"
    assert metric_call["MetricData"][0]["MetricName"] == "Fitness"
    assert metric_call["MetricData"][0]["Value"] == 37
    invoked = sorted(c["FunctionName"] for c in fake_clients.lambda_.calls_to("invoke"))
    assert invoked == ["hello-fn", "hello-fn:7"]
