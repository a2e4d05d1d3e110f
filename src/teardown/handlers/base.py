"""Base class for per-kind resource handlers."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Optional

from botocore.config import Config as BotoConfig
from botocore.exceptions import BotoCoreError, ClientError, ConnectTimeoutError, ReadTimeoutError

from ...aws.client import create_boto_client
from ...aws.errors import error_code, error_message, is_not_found
from ...models.liveness import LivenessResult
from ...models.resource_ref import ResourceKind, ResourceRef
from ...models.teardown_result import TeardownResult, TeardownStatus
from ..context import CallContext, ResourceLogger
from ..exceptions import (
    LivenessQueryError,
    OperationCancelledError,
    TeardownError,
    TeardownNotSupportedError,
)


class ResourceHandler(ABC):
    """Abstract base class for all resource handlers.

    Each handler covers one ResourceKind and should:
    1. Implement _query to read the resource and return a verdict
    2. Name its teardown operation and build its parameters, or set
       supports_teardown to False

    Errors are handled here so every kind follows the same policy: a
    not-found error means inactive, any other query failure yields an
    UNKNOWN verdict (treated as active), and teardown failures are raised.
    """

    supports_teardown: bool = True

    def __init__(
        self,
        profile_name: Optional[str] = None,
        region: Optional[str] = None,
        client_config: Optional[BotoConfig] = None,
    ) -> None:
        """Initialize the handler.

        Args:
            profile_name: AWS profile name (optional)
            region: Default AWS region (optional, a ref's own region wins)
            client_config: botocore client configuration (optional)
        """
        self.profile_name = profile_name
        self.region = region
        self.client_config = client_config
        self.logger = logging.getLogger(self.__class__.__module__)

    @property
    @abstractmethod
    def kind(self) -> ResourceKind:
        """Resource kind served by this handler."""
        pass

    @property
    def service_name(self) -> str:
        return self.kind.service_name

    @property
    @abstractmethod
    def query_action(self) -> str:
        """Boto3 method used to read the resource (e.g., "describe_tasks")."""
        pass

    @property
    def teardown_action(self) -> Optional[str]:
        """Boto3 method used to tear the resource down, if any."""
        return None

    def check_liveness(self, ref: ResourceRef, context: Optional[CallContext] = None) -> LivenessResult:
        """Determine whether a resource is still active.

        Args:
            ref: Resource to check
            context: Cancellation, deadline and logging context (optional)

        Returns:
            LivenessResult; UNKNOWN with the error attached if the query failed

        Raises:
            OperationCancelledError: If the context was cancelled or expired
            ValueError: If the reference is invalid or of another kind
        """
        context = context or CallContext()
        self._validate(ref)
        log = context.bind(self.logger, ref)
        log.debug(f"checking if {self.kind.value} is active")

        context.raise_if_cancelled(ref)

        try:
            client = self._create_client(ref, context)
            return self._query(client, ref, context, log)

        except ClientError as e:
            if is_not_found(e, self.service_name):
                log.debug(f"{self.kind.value} not found ({error_code(e)})")
                return LivenessResult.inactive(ref)

            error = LivenessQueryError(ref, self.query_action, error_code(e), error_message(e))
            error.__cause__ = e
            log.warning(str(error))
            return LivenessResult.unknown(ref, error)

        except BotoCoreError as e:
            self._raise_if_deadline(e, ref, context)
            error = LivenessQueryError(ref, self.query_action, type(e).__name__, str(e))
            error.__cause__ = e
            log.warning(str(error))
            return LivenessResult.unknown(ref, error)

    def teardown(self, ref: ResourceRef, context: Optional[CallContext] = None) -> TeardownResult:
        """Issue the stop/deregister/unsubscribe/delete call for a resource.

        No status check is made here; callers are expected to have consulted
        the liveness oracle first.

        Args:
            ref: Resource to tear down
            context: Cancellation, deadline and logging context (optional)

        Returns:
            TeardownResult, ALREADY_ABSENT if the provider reports the
            resource as not found

        Raises:
            TeardownNotSupportedError: If this kind has no teardown call
            TeardownError: If the provider call fails
            OperationCancelledError: If the context was cancelled or expired
        """
        if not self.supports_teardown or self.teardown_action is None:
            raise TeardownNotSupportedError(self.kind)

        context = context or CallContext()
        self._validate(ref)
        log = context.bind(self.logger, ref)
        action = self.teardown_action

        context.raise_if_cancelled(ref)

        try:
            client = self._create_client(ref, context)
            self._invoke(client, action, ref, context, **self._teardown_params(ref))

        except ClientError as e:
            code = error_code(e)
            if is_not_found(e, self.service_name):
                log.info(f"{self.kind.value} already absent ({code})")
                return TeardownResult(ref=ref, status=TeardownStatus.ALREADY_ABSENT, action=action, error_code=code)

            log.error(f"Failed to {action}: {code} - {error_message(e)}")
            raise TeardownError(ref, action, code, error_message(e)) from e

        except BotoCoreError as e:
            self._raise_if_deadline(e, ref, context)
            log.error(f"Failed to {action}: {e}")
            raise TeardownError(ref, action, type(e).__name__, str(e)) from e

        log.info(f"{action} requested")
        return TeardownResult(ref=ref, status=TeardownStatus.REQUESTED, action=action)

    @abstractmethod
    def _query(self, client: Any, ref: ResourceRef, context: CallContext, log: ResourceLogger) -> LivenessResult:
        """Read the resource and interpret its status.

        ClientError and BotoCoreError may propagate; check_liveness
        classifies them.
        """
        pass

    def _teardown_params(self, ref: ResourceRef) -> dict[str, Any]:
        """Build parameters for the teardown call."""
        raise TeardownNotSupportedError(self.kind)

    def _invoke(self, client: Any, method: str, ref: ResourceRef, context: CallContext, **params: Any) -> Any:
        """Call a boto3 method after a last cancellation check."""
        context.raise_if_cancelled(ref)
        return getattr(client, method)(**params)

    def _create_client(self, ref: ResourceRef, context: CallContext) -> Any:
        return create_boto_client(
            service_name=self.service_name,
            region_name=ref.region or self.region,
            profile_name=self.profile_name,
            config=context.client_config(self.client_config),
        )

    def _validate(self, ref: ResourceRef) -> None:
        if ref.kind != self.kind:
            raise ValueError(f"{self.__class__.__name__} cannot handle {ref.kind.value} resources")
        ref.validate()

    @staticmethod
    def _raise_if_deadline(error: BotoCoreError, ref: ResourceRef, context: CallContext) -> None:
        # A socket timeout after the deadline is the deadline doing its job
        if isinstance(error, (ConnectTimeoutError, ReadTimeoutError)) and context.expired:
            raise OperationCancelledError("deadline exceeded", ref=ref) from error
