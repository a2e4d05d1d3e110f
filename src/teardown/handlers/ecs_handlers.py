"""ECS task and task definition handlers."""

from __future__ import annotations

from typing import Any

from ...models.liveness import LivenessResult
from ...models.resource_ref import ResourceKind, ResourceRef
from ..context import CallContext, ResourceLogger
from .base import ResourceHandler

# Task lastStatus values that mean the task is on its way out or gone
TERMINAL_TASK_STATUSES = frozenset({"DEACTIVATING", "STOPPING", "DEPROVISIONING", "STOPPED", "DELETED"})


class EcsTaskHandler(ResourceHandler):
    """Handler for ECS tasks, identified by cluster ARN and task ARN."""

    @property
    def kind(self) -> ResourceKind:
        return ResourceKind.ECS_TASK

    @property
    def query_action(self) -> str:
        return "describe_tasks"

    @property
    def teardown_action(self) -> str:
        return "stop_task"

    def _query(self, client: Any, ref: ResourceRef, context: CallContext, log: ResourceLogger) -> LivenessResult:
        response = self._invoke(client, "describe_tasks", ref, context, cluster=ref.cluster, tasks=[ref.identifier])

        # Missing tasks are reported under "failures", not as an error
        for task in response.get("tasks", []):
            if task.get("taskArn") != ref.identifier:
                continue

            status = task.get("lastStatus")
            if not status:
                log.warning("task found, but cannot read status")
                return LivenessResult.active(ref, warning="task found, but cannot read status")

            log.debug(f"task found, status={status}")
            if status in TERMINAL_TASK_STATUSES:
                return LivenessResult.inactive(ref, observed_status=status)
            return LivenessResult.active(ref, observed_status=status)

        log.debug("task not found")
        return LivenessResult.inactive(ref)

    def _teardown_params(self, ref: ResourceRef) -> dict[str, Any]:
        # Stop only signals the scheduler; the task drains asynchronously
        return {"cluster": ref.cluster, "task": ref.identifier}


class EcsTaskDefinitionHandler(ResourceHandler):
    """Handler for ECS task definitions.

    Deregistering marks a definition INACTIVE; ECS never hard-deletes it.
    """

    @property
    def kind(self) -> ResourceKind:
        return ResourceKind.ECS_TASK_DEFINITION

    @property
    def query_action(self) -> str:
        return "describe_task_definition"

    @property
    def teardown_action(self) -> str:
        return "deregister_task_definition"

    def _query(self, client: Any, ref: ResourceRef, context: CallContext, log: ResourceLogger) -> LivenessResult:
        response = self._invoke(client, "describe_task_definition", ref, context, taskDefinition=ref.identifier)

        definition = response.get("taskDefinition") or {}
        if definition.get("taskDefinitionArn") != ref.identifier:
            log.debug("task definition not found")
            return LivenessResult.inactive(ref)

        status = definition.get("status")
        if status == "ACTIVE":
            log.debug("task definition active")
            return LivenessResult.active(ref, observed_status=status)

        log.debug(f"task definition not active, status={status}")
        return LivenessResult.inactive(ref, observed_status=status)

    def _teardown_params(self, ref: ResourceRef) -> dict[str, Any]:
        return {"taskDefinition": ref.identifier}
