"""Retirement record model.

Result of the check-then-teardown sequence for one resource.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Optional

from .liveness import LivenessResult
from .resource_ref import ResourceRef
from .teardown_result import TeardownResult


class RetirementStatus(Enum):
    """Per-resource retirement outcome."""

    SKIPPED_INACTIVE = "skipped-inactive"
    UNSUPPORTED = "unsupported"
    TORN_DOWN = "torn-down"
    FAILED = "failed"


@dataclass
class RetirementRecord:
    """Retirement record entity.

    Validation rules:
        - status=failed: requires error
        - status=torn-down: requires teardown, no error
        - status=skipped-inactive: no teardown

    Attributes:
        ref: Resource that was retired
        status: Retirement outcome
        liveness: Verdict read before any teardown
        teardown: Teardown call outcome (torn-down only)
        confirmation: Verdict re-read after teardown (optional)
        error: Failure that stopped the retirement (failed only)
        timestamp: When the retirement finished (UTC)
    """

    ref: ResourceRef
    status: RetirementStatus
    liveness: LivenessResult
    teardown: Optional[TeardownResult] = None
    confirmation: Optional[LivenessResult] = None
    error: Optional[Exception] = None
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def confirmed_removed(self) -> bool:
        """True if a post-teardown check found the resource inactive."""
        return self.confirmation is not None and not self.confirmation.is_active

    def validate(self) -> bool:
        """Validate record invariants.

        Returns:
            True if validation passes

        Raises:
            ValueError: If any validation rule fails
        """
        if self.status == RetirementStatus.FAILED:
            if self.error is None:
                raise ValueError("Failed status requires error")
        elif self.status == RetirementStatus.TORN_DOWN:
            if self.teardown is None:
                raise ValueError("Torn-down status requires teardown result")
            if self.error is not None:
                raise ValueError("Torn-down status cannot have error")
        elif self.status == RetirementStatus.SKIPPED_INACTIVE:
            if self.teardown is not None:
                raise ValueError("Skipped status cannot have teardown result")

        return True
