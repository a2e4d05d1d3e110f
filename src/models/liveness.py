"""Liveness verdict model."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .resource_ref import ResourceRef


class LivenessState(Enum):
    """Three-state liveness verdict.

    UNKNOWN means the query itself failed. It is treated as active so that a
    resource whose real state cannot be read is never torn down.
    """

    ACTIVE = "active"
    INACTIVE = "inactive"
    UNKNOWN = "unknown"


@dataclass
class LivenessResult:
    """Outcome of a liveness query for one resource.

    Attributes:
        ref: Resource that was queried
        state: Liveness verdict
        observed_status: Raw status read from the provider, if any
        warning: Anomaly worth surfacing that did not change the verdict
        error: Query failure (set only when state is UNKNOWN)
    """

    ref: ResourceRef
    state: LivenessState
    observed_status: Optional[str] = None
    warning: Optional[str] = None
    error: Optional[Exception] = None

    @classmethod
    def active(cls, ref: ResourceRef, observed_status: Optional[str] = None, warning: Optional[str] = None) -> LivenessResult:
        return cls(ref=ref, state=LivenessState.ACTIVE, observed_status=observed_status, warning=warning)

    @classmethod
    def inactive(cls, ref: ResourceRef, observed_status: Optional[str] = None) -> LivenessResult:
        return cls(ref=ref, state=LivenessState.INACTIVE, observed_status=observed_status)

    @classmethod
    def unknown(cls, ref: ResourceRef, error: Exception) -> LivenessResult:
        return cls(ref=ref, state=LivenessState.UNKNOWN, error=error)

    @property
    def is_active(self) -> bool:
        """True unless the resource is known to be inactive."""
        return self.state != LivenessState.INACTIVE

    @property
    def is_known(self) -> bool:
        return self.state != LivenessState.UNKNOWN

    def raise_for_error(self) -> None:
        """Re-raise the query failure, if there was one."""
        if self.error is not None:
            raise self.error
