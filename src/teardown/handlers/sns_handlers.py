"""SNS subscription handler."""

from __future__ import annotations

from typing import Any

from ...models.liveness import LivenessResult
from ...models.resource_ref import ResourceKind, ResourceRef
from ..context import CallContext, ResourceLogger
from .base import ResourceHandler


class SnsSubscriptionHandler(ResourceHandler):
    """Handler for SNS subscriptions.

    A subscription is active while its attributes still link it to a topic.
    """

    @property
    def kind(self) -> ResourceKind:
        return ResourceKind.SNS_SUBSCRIPTION

    @property
    def query_action(self) -> str:
        return "get_subscription_attributes"

    @property
    def teardown_action(self) -> str:
        return "unsubscribe"

    def _query(self, client: Any, ref: ResourceRef, context: CallContext, log: ResourceLogger) -> LivenessResult:
        response = self._invoke(client, "get_subscription_attributes", ref, context, SubscriptionArn=ref.identifier)

        attributes = response.get("Attributes") or {}
        if not attributes:
            log.debug("no attributes found")
            return LivenessResult.inactive(ref)

        if attributes.get("TopicArn"):
            log.debug("topic found")
            return LivenessResult.active(ref)

        log.debug("no topic found")
        return LivenessResult.inactive(ref)

    def _teardown_params(self, ref: ResourceRef) -> dict[str, Any]:
        return {"SubscriptionArn": ref.identifier}
