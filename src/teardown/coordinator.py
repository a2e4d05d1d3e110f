"""Teardown coordinator.

Runs the check-then-teardown sequence for one resource at a time: query the
oracle, tear the resource down only if it is known to be live, and optionally
re-check once to confirm removal.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from ..config import Config
from ..models.liveness import LivenessState
from ..models.resource_ref import ResourceRef
from ..models.retirement_record import RetirementRecord, RetirementStatus
from .context import CallContext
from .exceptions import TeardownError
from .executor import TeardownExecutor
from .oracle import LivenessOracle

logger = logging.getLogger(__name__)


class TeardownCoordinator:
    """Coordinates liveness checks and teardown calls.

    Holds no state between calls and never retries.

    Attributes:
        oracle: Liveness oracle
        executor: Teardown executor
    """

    def __init__(self, oracle: LivenessOracle, executor: TeardownExecutor) -> None:
        self.oracle = oracle
        self.executor = executor

    @classmethod
    def from_config(cls, config: Config) -> TeardownCoordinator:
        return cls(oracle=LivenessOracle.from_config(config), executor=TeardownExecutor.from_config(config))

    def retire(
        self,
        ref: ResourceRef,
        confirm: bool = False,
        context: Optional[CallContext] = None,
    ) -> RetirementRecord:
        """Tear a resource down if it is still live.

        Args:
            ref: Resource to retire
            confirm: Re-check liveness once after the teardown call
            context: Cancellation, deadline and logging context (optional)

        Returns:
            RetirementRecord describing what happened

        Raises:
            OperationCancelledError: If the context was cancelled or expired
        """
        liveness = self.oracle.check(ref, context)

        if liveness.state == LivenessState.UNKNOWN:
            # Unknown state is never safe to tear down
            logger.warning(f"Leaving {ref} in place, state unknown: {liveness.error}")
            return RetirementRecord(ref=ref, status=RetirementStatus.FAILED, liveness=liveness, error=liveness.error)

        if liveness.state == LivenessState.INACTIVE:
            logger.debug(f"{ref} already inactive")
            return RetirementRecord(ref=ref, status=RetirementStatus.SKIPPED_INACTIVE, liveness=liveness)

        if not self.executor.supports(ref.kind):
            logger.info(f"{ref} is active but {ref.kind.value} has no teardown capability")
            return RetirementRecord(ref=ref, status=RetirementStatus.UNSUPPORTED, liveness=liveness)

        try:
            teardown = self.executor.teardown(ref, context)
        except TeardownError as e:
            return RetirementRecord(ref=ref, status=RetirementStatus.FAILED, liveness=liveness, error=e)

        confirmation = None
        if confirm:
            confirmation = self.oracle.check(ref, context)
            if confirmation.is_active:
                # Expected for eventually-consistent deletes; the caller decides whether to poll
                logger.info(f"{ref} still reported {confirmation.state.value} after {teardown.action}")

        return RetirementRecord(
            ref=ref,
            status=RetirementStatus.TORN_DOWN,
            liveness=liveness,
            teardown=teardown,
            confirmation=confirmation,
        )

    def retire_all(
        self,
        refs: Iterable[ResourceRef],
        confirm: bool = False,
        context: Optional[CallContext] = None,
    ) -> list[RetirementRecord]:
        """Retire resources in the given order.

        Callers list dependents first (e.g., subscriptions before queues).
        """
        records = [self.retire(ref, confirm=confirm, context=context) for ref in refs]

        failed = [r for r in records if r.status == RetirementStatus.FAILED]
        logger.info(
            f"Retired {len(records)} resources: "
            f"{sum(1 for r in records if r.status == RetirementStatus.TORN_DOWN)} torn down, "
            f"{sum(1 for r in records if r.status == RetirementStatus.SKIPPED_INACTIVE)} already inactive, "
            f"{len(failed)} failed"
        )
        return records
