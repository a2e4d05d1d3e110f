"""Teardown executor.

Issues the single stop/deregister/unsubscribe/delete call for a resource. No
status check and no retry loop: callers consult the oracle first and own any
retry policy.
"""

from __future__ import annotations

from typing import Optional

from ..config import Config
from ..models.resource_ref import ResourceKind, ResourceRef
from ..models.teardown_result import TeardownResult
from .context import CallContext
from .exceptions import UnknownResourceKindError
from .registry import HandlerSet


class TeardownExecutor(HandlerSet):
    """Teardown calls dispatched by resource kind."""

    @classmethod
    def from_config(cls, config: Config) -> TeardownExecutor:
        return cls(aws_profile=config.aws_profile, region=config.region, client_config=config.client_config())

    def supports(self, kind: ResourceKind) -> bool:
        """Check whether a resource kind has a teardown capability."""
        try:
            return self.handler_for(kind).supports_teardown
        except UnknownResourceKindError:
            return False

    def teardown(self, ref: ResourceRef, context: Optional[CallContext] = None) -> TeardownResult:
        """Tear down a resource.

        Args:
            ref: Resource to tear down
            context: Cancellation, deadline and logging context (optional)

        Returns:
            TeardownResult (REQUESTED or ALREADY_ABSENT)

        Raises:
            TeardownError: If the provider call fails
            TeardownNotSupportedError: If the kind has no teardown call
            OperationCancelledError: If the context was cancelled or expired
            UnknownResourceKindError: If the kind has no handler
        """
        return self.handler_for(ref.kind).teardown(ref, context)
