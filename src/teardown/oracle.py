"""Liveness oracle.

Answers "is this resource still active?" for every supported resource kind.
A query that fails yields an UNKNOWN verdict, which is treated as active, so
a transient API error is never mistaken for "safe to delete".
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from ..config import Config
from ..models.liveness import LivenessResult, LivenessState
from ..models.resource_ref import ResourceRef
from .context import CallContext
from .registry import HandlerSet

logger = logging.getLogger(__name__)


class LivenessOracle(HandlerSet):
    """Liveness checks dispatched by resource kind."""

    @classmethod
    def from_config(cls, config: Config) -> LivenessOracle:
        return cls(aws_profile=config.aws_profile, region=config.region, client_config=config.client_config())

    def check(self, ref: ResourceRef, context: Optional[CallContext] = None) -> LivenessResult:
        """Check whether a resource is still active.

        Args:
            ref: Resource to check
            context: Cancellation, deadline and logging context (optional)

        Returns:
            LivenessResult (ACTIVE, INACTIVE, or UNKNOWN with error)

        Raises:
            OperationCancelledError: If the context was cancelled or expired
            UnknownResourceKindError: If the kind has no handler
        """
        return self.handler_for(ref.kind).check_liveness(ref, context)

    def is_active(self, ref: ResourceRef, context: Optional[CallContext] = None) -> bool:
        """Boolean shorthand for check(); True for ACTIVE and UNKNOWN."""
        return self.check(ref, context).is_active

    def check_many(self, refs: Iterable[ResourceRef], context: Optional[CallContext] = None) -> list[LivenessResult]:
        """Check several resources one after another.

        Stops at the first cancellation; query failures are reported per
        resource as UNKNOWN results.
        """
        results = []
        for ref in refs:
            results.append(self.check(ref, context))

        unknown = sum(1 for r in results if r.state == LivenessState.UNKNOWN)
        if unknown:
            logger.warning(f"{unknown} of {len(results)} liveness checks could not determine resource state")
        return results
