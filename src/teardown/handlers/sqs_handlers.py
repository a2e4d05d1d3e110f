"""SQS queue handler."""

from __future__ import annotations

from typing import Any

from ...models.liveness import LivenessResult
from ...models.resource_ref import ResourceKind, ResourceRef
from ..context import CallContext, ResourceLogger
from .base import ResourceHandler


class SqsQueueHandler(ResourceHandler):
    """Handler for SQS queues, identified by queue URL.

    Deleting a queue is irreversible and drops any in-flight messages.
    """

    @property
    def kind(self) -> ResourceKind:
        return ResourceKind.SQS_QUEUE

    @property
    def query_action(self) -> str:
        return "get_queue_attributes"

    @property
    def teardown_action(self) -> str:
        return "delete_queue"

    def _query(self, client: Any, ref: ResourceRef, context: CallContext, log: ResourceLogger) -> LivenessResult:
        response = self._invoke(
            client,
            "get_queue_attributes",
            ref,
            context,
            QueueUrl=ref.identifier,
            AttributeNames=["QueueArn"],
        )

        attributes = response.get("Attributes") or {}
        if not attributes:
            log.debug("no attributes found")
            return LivenessResult.inactive(ref)

        if attributes.get("QueueArn"):
            log.debug("queue arn found")
            return LivenessResult.active(ref)

        log.debug("no queue arn found")
        return LivenessResult.inactive(ref)

    def _teardown_params(self, ref: ResourceRef) -> dict[str, Any]:
        return {"QueueUrl": ref.identifier}
