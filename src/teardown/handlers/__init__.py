"""Resource handlers, one per resource kind."""

from __future__ import annotations

from .base import ResourceHandler
from .ec2_handlers import Ec2InstanceHandler
from .ecs_handlers import TERMINAL_TASK_STATUSES, EcsTaskDefinitionHandler, EcsTaskHandler
from .sns_handlers import SnsSubscriptionHandler
from .sqs_handlers import SqsQueueHandler

__all__ = [
    "ResourceHandler",
    "Ec2InstanceHandler",
    "EcsTaskDefinitionHandler",
    "EcsTaskHandler",
    "SnsSubscriptionHandler",
    "SqsQueueHandler",
    "TERMINAL_TASK_STATUSES",
]
