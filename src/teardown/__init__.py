"""Resource liveness checks and teardown.

Classes:
    LivenessOracle: Three-state liveness verdicts per resource kind
    TeardownExecutor: Idempotent teardown calls per resource kind
    TeardownCoordinator: Check-then-teardown sequence for one resource
    CallContext: Cancellation, deadline and logging context for one call
"""

from __future__ import annotations

from .context import CallContext
from .coordinator import TeardownCoordinator
from .exceptions import (
    LivenessQueryError,
    OperationCancelledError,
    TeardownCoordinatorError,
    TeardownError,
    TeardownNotSupportedError,
    UnknownResourceKindError,
)
from .executor import TeardownExecutor
from .oracle import LivenessOracle

__all__ = [
    "CallContext",
    "LivenessOracle",
    "LivenessQueryError",
    "OperationCancelledError",
    "TeardownCoordinator",
    "TeardownCoordinatorError",
    "TeardownError",
    "TeardownExecutor",
    "TeardownNotSupportedError",
    "UnknownResourceKindError",
]
