"""Registry mapping resource kinds to their handlers."""

from __future__ import annotations

from typing import Optional, Type

from botocore.config import Config as BotoConfig

from ..models.resource_ref import ResourceKind
from .exceptions import UnknownResourceKindError
from .handlers import (
    Ec2InstanceHandler,
    EcsTaskDefinitionHandler,
    EcsTaskHandler,
    ResourceHandler,
    SnsSubscriptionHandler,
    SqsQueueHandler,
)

HANDLER_CLASSES: dict[ResourceKind, Type[ResourceHandler]] = {
    ResourceKind.ECS_TASK: EcsTaskHandler,
    ResourceKind.ECS_TASK_DEFINITION: EcsTaskDefinitionHandler,
    ResourceKind.SNS_SUBSCRIPTION: SnsSubscriptionHandler,
    ResourceKind.SQS_QUEUE: SqsQueueHandler,
    ResourceKind.EC2_INSTANCE: Ec2InstanceHandler,
}


def get_handler_class(kind: ResourceKind) -> Type[ResourceHandler]:
    """Look up the handler class for a resource kind.

    Raises:
        UnknownResourceKindError: If no handler is registered
    """
    try:
        return HANDLER_CLASSES[kind]
    except KeyError:
        raise UnknownResourceKindError(kind) from None


def build_handlers(
    profile_name: Optional[str] = None,
    region: Optional[str] = None,
    client_config: Optional[BotoConfig] = None,
) -> dict[ResourceKind, ResourceHandler]:
    """Instantiate one handler per registered resource kind."""
    return {
        kind: handler_class(profile_name=profile_name, region=region, client_config=client_config)
        for kind, handler_class in HANDLER_CLASSES.items()
    }


class HandlerSet:
    """Handlers shared by the oracle and the executor.

    Attributes:
        handlers: Mapping of resource kind to handler
    """

    def __init__(
        self,
        handlers: Optional[dict[ResourceKind, ResourceHandler]] = None,
        aws_profile: Optional[str] = None,
        region: Optional[str] = None,
        client_config: Optional[BotoConfig] = None,
    ) -> None:
        """Initialize the handler set.

        Args:
            handlers: Explicit handlers (default: one per registered kind)
            aws_profile: AWS profile name (optional)
            region: Default AWS region (optional)
            client_config: botocore client configuration (optional)
        """
        if handlers is None:
            handlers = build_handlers(profile_name=aws_profile, region=region, client_config=client_config)
        self.handlers = handlers

    def handler_for(self, kind: ResourceKind) -> ResourceHandler:
        """Return the handler for a kind.

        Raises:
            UnknownResourceKindError: If the set has no handler for the kind
        """
        try:
            return self.handlers[kind]
        except KeyError:
            raise UnknownResourceKindError(kind) from None
