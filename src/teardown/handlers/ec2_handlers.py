"""EC2 instance handler."""

from __future__ import annotations

from typing import Any

from ...models.liveness import LivenessResult
from ...models.resource_ref import ResourceKind, ResourceRef
from ..context import CallContext, ResourceLogger
from .base import ResourceHandler


class Ec2InstanceHandler(ResourceHandler):
    """Handler for EC2 instances.

    Liveness only: instance termination is owned outside this package, so
    the handler declares no teardown capability.
    """

    supports_teardown = False

    @property
    def kind(self) -> ResourceKind:
        return ResourceKind.EC2_INSTANCE

    @property
    def query_action(self) -> str:
        return "describe_instances"

    def _query(self, client: Any, ref: ResourceRef, context: CallContext, log: ResourceLogger) -> LivenessResult:
        response = self._invoke(client, "describe_instances", ref, context, InstanceIds=[ref.identifier])

        reservations = response.get("Reservations", [])
        if len(reservations) == 0:
            log.debug("no reservations found")
            return LivenessResult.inactive(ref)

        if len(reservations) == 1:
            log.debug("reservation still active")
            return LivenessResult.active(ref)

        # One instance id should map to at most one reservation
        warning = f"unexpected number of instance reservations found: {len(reservations)}"
        log.warning(warning)
        return LivenessResult.active(ref, warning=warning)
