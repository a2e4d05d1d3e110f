"""Tests for ECS task and task definition handlers."""

from __future__ import annotations

from unittest.mock import MagicMock, Mock, patch

import pytest
from botocore.exceptions import ClientError

from src.models.liveness import LivenessState
from src.models.resource_ref import ResourceRef
from src.models.teardown_result import TeardownStatus
from src.teardown.exceptions import LivenessQueryError, TeardownError
from src.teardown.handlers.ecs_handlers import TERMINAL_TASK_STATUSES, EcsTaskDefinitionHandler, EcsTaskHandler
from tests.fixtures.responses import (
    CLUSTER_ARN,
    TASK_ARN,
    TASK_DEFINITION_ARN,
    client_error,
    describe_task_definition_response,
    describe_tasks_missing_response,
    describe_tasks_response,
    task_definition_ref,
    task_ref,
)


@pytest.fixture
def mock_client() -> MagicMock:
    return MagicMock()


@pytest.fixture
def mock_create_client(mock_client: MagicMock):
    with patch("src.teardown.handlers.base.create_boto_client", return_value=mock_client) as mock_create:
        yield mock_create


class TestEcsTaskLiveness:
    """Liveness tests for EcsTaskHandler."""

    def test_stopped_task_is_inactive(self, mock_create_client: Mock, mock_client: MagicMock) -> None:
        """Test a STOPPED task is reported inactive without error."""
        mock_client.describe_tasks.return_value = describe_tasks_response("STOPPED")

        result = EcsTaskHandler().check_liveness(task_ref())

        assert result.state == LivenessState.INACTIVE
        assert result.error is None
        assert result.observed_status == "STOPPED"
        mock_client.describe_tasks.assert_called_once_with(cluster=CLUSTER_ARN, tasks=[TASK_ARN])

    @pytest.mark.parametrize("status", sorted(TERMINAL_TASK_STATUSES))
    def test_terminal_statuses_are_inactive(self, status: str, mock_create_client: Mock, mock_client: MagicMock) -> None:
        mock_client.describe_tasks.return_value = describe_tasks_response(status)

        result = EcsTaskHandler().check_liveness(task_ref())

        assert result.is_active is False

    @pytest.mark.parametrize("status", ["PROVISIONING", "PENDING", "ACTIVATING", "RUNNING"])
    def test_other_statuses_are_active(self, status: str, mock_create_client: Mock, mock_client: MagicMock) -> None:
        mock_client.describe_tasks.return_value = describe_tasks_response(status)

        result = EcsTaskHandler().check_liveness(task_ref())

        assert result.state == LivenessState.ACTIVE
        assert result.observed_status == status

    def test_missing_task_is_inactive(self, mock_create_client: Mock, mock_client: MagicMock) -> None:
        """Test a task reported under failures counts as gone."""
        mock_client.describe_tasks.return_value = describe_tasks_missing_response()

        result = EcsTaskHandler().check_liveness(task_ref())

        assert result.state == LivenessState.INACTIVE

    def test_other_task_in_response_is_ignored(self, mock_create_client: Mock, mock_client: MagicMock) -> None:
        mock_client.describe_tasks.return_value = describe_tasks_response("RUNNING", task_arn="arn:aws:ecs:task/999")

        result = EcsTaskHandler().check_liveness(task_ref())

        assert result.state == LivenessState.INACTIVE

    def test_unreadable_status_is_active_with_warning(self, mock_create_client: Mock, mock_client: MagicMock) -> None:
        """Test a task without lastStatus is kept alive and flagged."""
        mock_client.describe_tasks.return_value = describe_tasks_response(None)

        result = EcsTaskHandler().check_liveness(task_ref())

        assert result.state == LivenessState.ACTIVE
        assert result.warning == "task found, but cannot read status"

    def test_query_error_is_unknown(self, mock_create_client: Mock, mock_client: MagicMock) -> None:
        """Test a failed describe call yields UNKNOWN with the error attached."""
        original = client_error("AccessDeniedException", "DescribeTasks")
        mock_client.describe_tasks.side_effect = original

        result = EcsTaskHandler().check_liveness(task_ref())

        assert result.state == LivenessState.UNKNOWN
        assert result.is_active is True
        assert isinstance(result.error, LivenessQueryError)
        assert result.error.error_code == "AccessDeniedException"
        assert result.error.__cause__ is original

    def test_client_created_with_handler_settings(self, mock_create_client: Mock, mock_client: MagicMock) -> None:
        mock_client.describe_tasks.return_value = describe_tasks_missing_response()

        EcsTaskHandler(profile_name="prod", region="eu-west-1").check_liveness(task_ref())

        mock_create_client.assert_called_once_with(
            service_name="ecs",
            region_name="eu-west-1",
            profile_name="prod",
            config=None,
        )

    def test_rejects_ref_of_other_kind(self, mock_create_client: Mock) -> None:
        with pytest.raises(ValueError, match="cannot handle"):
            EcsTaskHandler().check_liveness(task_definition_ref())

    def test_short_task_id_is_rejected_before_any_call(self, mock_create_client: Mock) -> None:
        """Test a bare task id cannot be silently reported inactive."""
        ref = ResourceRef.ecs_task(cluster=CLUSTER_ARN, task="123")

        with pytest.raises(ValueError, match="task ARN"):
            EcsTaskHandler().check_liveness(ref)

        mock_create_client.assert_not_called()


class TestEcsTaskTeardown:
    """Teardown tests for EcsTaskHandler."""

    def test_stop_task(self, mock_create_client: Mock, mock_client: MagicMock) -> None:
        """Test stop_task is issued with cluster and task."""
        mock_client.stop_task.return_value = {"task": {"taskArn": TASK_ARN, "desiredStatus": "STOPPED"}}

        result = EcsTaskHandler().teardown(task_ref())

        assert result.status == TeardownStatus.REQUESTED
        assert result.action == "stop_task"
        mock_client.stop_task.assert_called_once_with(cluster=CLUSTER_ARN, task=TASK_ARN)
        mock_client.describe_tasks.assert_not_called()

    def test_stop_task_failure_is_raised(self, mock_create_client: Mock, mock_client: MagicMock) -> None:
        """Test mutation failures are never swallowed."""
        mock_client.stop_task.side_effect = client_error("InvalidParameterException", "StopTask")

        with pytest.raises(TeardownError) as exc_info:
            EcsTaskHandler().teardown(task_ref())

        assert exc_info.value.error_code == "InvalidParameterException"
        assert exc_info.value.operation == "stop_task"
        assert isinstance(exc_info.value.__cause__, ClientError)


class TestEcsTaskDefinitionHandler:
    """Tests for EcsTaskDefinitionHandler."""

    def test_active_definition(self, mock_create_client: Mock, mock_client: MagicMock) -> None:
        mock_client.describe_task_definition.return_value = describe_task_definition_response("ACTIVE")

        result = EcsTaskDefinitionHandler().check_liveness(task_definition_ref())

        assert result.state == LivenessState.ACTIVE
        mock_client.describe_task_definition.assert_called_once_with(taskDefinition=TASK_DEFINITION_ARN)

    def test_inactive_definition(self, mock_create_client: Mock, mock_client: MagicMock) -> None:
        """Test an INACTIVE definition is reported inactive."""
        mock_client.describe_task_definition.return_value = describe_task_definition_response("INACTIVE")

        result = EcsTaskDefinitionHandler().check_liveness(task_definition_ref())

        assert result.state == LivenessState.INACTIVE
        assert result.observed_status == "INACTIVE"

    def test_delete_in_progress_definition(self, mock_create_client: Mock, mock_client: MagicMock) -> None:
        mock_client.describe_task_definition.return_value = describe_task_definition_response("DELETE_IN_PROGRESS")

        result = EcsTaskDefinitionHandler().check_liveness(task_definition_ref())

        assert result.is_active is False

    def test_arn_mismatch_is_inactive(self, mock_create_client: Mock, mock_client: MagicMock) -> None:
        mock_client.describe_task_definition.return_value = describe_task_definition_response(
            "ACTIVE", arn="arn:aws:ecs:us-east-1:123456789012:task-definition/foo:4"
        )

        result = EcsTaskDefinitionHandler().check_liveness(task_definition_ref())

        assert result.state == LivenessState.INACTIVE

    def test_missing_definition_is_inactive(self, mock_create_client: Mock, mock_client: MagicMock) -> None:
        mock_client.describe_task_definition.return_value = {}

        result = EcsTaskDefinitionHandler().check_liveness(task_definition_ref())

        assert result.state == LivenessState.INACTIVE

    def test_query_error_is_unknown(self, mock_create_client: Mock, mock_client: MagicMock) -> None:
        mock_client.describe_task_definition.side_effect = client_error("ClientException", "DescribeTaskDefinition")

        result = EcsTaskDefinitionHandler().check_liveness(task_definition_ref())

        assert result.state == LivenessState.UNKNOWN
        assert result.is_active is True

    def test_deregister(self, mock_create_client: Mock, mock_client: MagicMock) -> None:
        mock_client.deregister_task_definition.return_value = describe_task_definition_response("INACTIVE")

        result = EcsTaskDefinitionHandler().teardown(task_definition_ref())

        assert result.status == TeardownStatus.REQUESTED
        mock_client.deregister_task_definition.assert_called_once_with(taskDefinition=TASK_DEFINITION_ARN)

    def test_deregister_failure_is_raised(self, mock_create_client: Mock, mock_client: MagicMock) -> None:
        mock_client.deregister_task_definition.side_effect = client_error("ServerException", "DeregisterTaskDefinition")

        with pytest.raises(TeardownError, match="deregister_task_definition"):
            EcsTaskDefinitionHandler().teardown(task_definition_ref())
