"""Data models for resource references, liveness verdicts and teardown outcomes."""

from __future__ import annotations

from .liveness import LivenessResult, LivenessState
from .resource_ref import ResourceKind, ResourceRef
from .retirement_record import RetirementRecord, RetirementStatus
from .teardown_result import TeardownResult, TeardownStatus

__all__ = [
    "LivenessResult",
    "LivenessState",
    "ResourceKind",
    "ResourceRef",
    "RetirementRecord",
    "RetirementStatus",
    "TeardownResult",
    "TeardownStatus",
]
