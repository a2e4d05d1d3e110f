"""Per-call context: cancellation, deadline and structured log fields."""

from __future__ import annotations

import logging
import threading
import time
from dataclasses import dataclass, field
from typing import Any, MutableMapping, Optional

from botocore.config import Config as BotoConfig

from ..models.resource_ref import ResourceRef
from .exceptions import OperationCancelledError

# botocore rejects a zero timeout
_MIN_TIMEOUT = 0.1


@dataclass
class CallContext:
    """Caller-supplied context for one oracle or executor call.

    Attributes:
        cancel_event: Set by the caller to abandon the call
        deadline: time.monotonic() value after which the call is abandoned
        log_fields: Extra structured fields attached to every log line
    """

    cancel_event: Optional[threading.Event] = None
    deadline: Optional[float] = None
    log_fields: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def with_timeout(
        cls,
        seconds: float,
        cancel_event: Optional[threading.Event] = None,
        **log_fields: Any,
    ) -> CallContext:
        """Create a context whose deadline is `seconds` from now."""
        return cls(cancel_event=cancel_event, deadline=time.monotonic() + seconds, log_fields=log_fields)

    def remaining(self) -> Optional[float]:
        """Seconds left before the deadline, or None without a deadline."""
        if self.deadline is None:
            return None
        return self.deadline - time.monotonic()

    @property
    def expired(self) -> bool:
        remaining = self.remaining()
        return remaining is not None and remaining <= 0

    @property
    def cancelled(self) -> bool:
        return self.cancel_event is not None and self.cancel_event.is_set()

    def raise_if_cancelled(self, ref: Optional[ResourceRef] = None) -> None:
        """Raise OperationCancelledError if the call must not proceed.

        Raises:
            OperationCancelledError: If cancelled or past the deadline
        """
        if self.cancelled:
            raise OperationCancelledError("cancelled by caller", ref=ref)
        if self.expired:
            raise OperationCancelledError("deadline exceeded", ref=ref)

    def client_config(self, base: Optional[BotoConfig] = None) -> Optional[BotoConfig]:
        """Bound the client's socket timeouts and attempts by the remaining deadline.

        Args:
            base: Client configuration to start from (optional)

        Returns:
            Client configuration limited to one attempt whose timeouts end at
            the deadline, or base unchanged when there is no deadline
        """
        remaining = self.remaining()
        if remaining is None:
            return base

        timeout = max(remaining, _MIN_TIMEOUT)
        # Single attempt: botocore retries are not bounded by the deadline
        retries: dict[str, Any] = {"total_max_attempts": 1}
        if base is not None:
            if base.retries and base.retries.get("mode"):
                retries["mode"] = base.retries["mode"]
            # Never extend a tighter timeout configured by the caller
            connect = min(timeout, base.connect_timeout or timeout)
            read = min(timeout, base.read_timeout or timeout)
            return base.merge(BotoConfig(connect_timeout=connect, read_timeout=read, retries=retries))
        return BotoConfig(connect_timeout=timeout, read_timeout=timeout, retries=retries)

    def bind(self, logger: logging.Logger, ref: ResourceRef) -> ResourceLogger:
        """Return a logger carrying the resource identifiers and context fields."""
        fields: dict[str, Any] = dict(ref.log_fields())
        fields.update(self.log_fields)
        return ResourceLogger(logger, fields)


class ResourceLogger(logging.LoggerAdapter):
    """Logger adapter appending resource fields as key=value pairs.

    The fields are also exposed to handlers and formatters as
    `record.resource_context`.
    """

    def process(self, msg: Any, kwargs: MutableMapping[str, Any]) -> tuple[Any, MutableMapping[str, Any]]:
        fields = dict(self.extra or {})
        extra = dict(kwargs.get("extra") or {})
        extra["resource_context"] = fields
        kwargs["extra"] = extra

        if fields:
            rendered = " ".join(f"{key}={value}" for key, value in fields.items())
            msg = f"{msg} [{rendered}]"
        return msg, kwargs
