"""Exceptions raised by the liveness oracle and teardown executor."""

from __future__ import annotations

from typing import Optional

from ..models.resource_ref import ResourceKind, ResourceRef


class TeardownCoordinatorError(Exception):
    """Base class for all coordinator errors."""


class LivenessQueryError(TeardownCoordinatorError):
    """A describe call failed, so the resource state is unknown."""

    def __init__(self, ref: ResourceRef, operation: str, error_code: str, message: str) -> None:
        self.ref = ref
        self.operation = operation
        self.error_code = error_code
        super().__init__(f"{operation} failed for {ref}: {error_code} - {message}")


class TeardownError(TeardownCoordinatorError):
    """A stop/deregister/unsubscribe/delete call failed."""

    def __init__(self, ref: ResourceRef, operation: str, error_code: str, message: str) -> None:
        self.ref = ref
        self.operation = operation
        self.error_code = error_code
        super().__init__(f"{operation} failed for {ref}: {error_code} - {message}")


class TeardownNotSupportedError(TeardownCoordinatorError):
    """The resource kind has no teardown capability."""

    def __init__(self, kind: ResourceKind) -> None:
        self.kind = kind
        super().__init__(f"Teardown is not supported for {kind.value} resources")


class OperationCancelledError(TeardownCoordinatorError):
    """The caller's context was cancelled or its deadline passed."""

    def __init__(self, reason: str, ref: Optional[ResourceRef] = None) -> None:
        self.reason = reason
        self.ref = ref
        target = f" for {ref}" if ref is not None else ""
        super().__init__(f"Operation cancelled{target}: {reason}")


class UnknownResourceKindError(TeardownCoordinatorError):
    """No handler is registered for the resource kind."""

    def __init__(self, kind: object) -> None:
        self.kind = kind
        super().__init__(f"No handler registered for resource kind: {kind}")
