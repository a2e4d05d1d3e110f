"""Teardown call outcome model."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .resource_ref import ResourceRef


class TeardownStatus(Enum):
    """Outcome of a single teardown call."""

    REQUESTED = "requested"
    ALREADY_ABSENT = "already-absent"


@dataclass
class TeardownResult:
    """Teardown call outcome.

    Attributes:
        ref: Resource the call targeted
        status: REQUESTED when the provider accepted the call, ALREADY_ABSENT
            when it answered with a not-found error
        action: Provider operation that was issued (e.g., "stop_task")
        error_code: Not-found error code for ALREADY_ABSENT outcomes
    """

    ref: ResourceRef
    status: TeardownStatus
    action: str
    error_code: Optional[str] = None
