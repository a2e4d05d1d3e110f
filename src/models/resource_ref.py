"""Resource reference model.

Identifies a remote, externally-owned resource. No local state is held beyond
the identifier.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ResourceKind(Enum):
    """Resource types the coordinator knows how to check and tear down."""

    ECS_TASK = "ecs:task"
    ECS_TASK_DEFINITION = "ecs:task-definition"
    SNS_SUBSCRIPTION = "sns:subscription"
    SQS_QUEUE = "sqs:queue"
    EC2_INSTANCE = "ec2:instance"

    @property
    def service_name(self) -> str:
        """AWS service the resource belongs to."""
        return self.value.split(":", 1)[0]


@dataclass(frozen=True)
class ResourceRef:
    """Reference to a remote resource.

    Validation rules:
        - identifier must be non-empty
        - ECS tasks require the cluster ARN
        - ECS tasks and task definitions are identified by full ARN, since
          describe responses are matched against the ARN
        - SQS queues are identified by their http(s) URL

    Attributes:
        kind: Resource type
        identifier: Task ARN, task definition ARN, subscription ARN, queue URL
            or instance id depending on kind
        cluster: ECS cluster ARN (ECS tasks only)
        region: AWS region override (optional)
    """

    kind: ResourceKind
    identifier: str
    cluster: Optional[str] = None
    region: Optional[str] = None

    @classmethod
    def ecs_task(cls, cluster: str, task: str, region: Optional[str] = None) -> ResourceRef:
        return cls(kind=ResourceKind.ECS_TASK, identifier=task, cluster=cluster, region=region)

    @classmethod
    def ecs_task_definition(cls, arn: str, region: Optional[str] = None) -> ResourceRef:
        return cls(kind=ResourceKind.ECS_TASK_DEFINITION, identifier=arn, region=region)

    @classmethod
    def sns_subscription(cls, arn: str, region: Optional[str] = None) -> ResourceRef:
        return cls(kind=ResourceKind.SNS_SUBSCRIPTION, identifier=arn, region=region)

    @classmethod
    def sqs_queue(cls, url: str, region: Optional[str] = None) -> ResourceRef:
        return cls(kind=ResourceKind.SQS_QUEUE, identifier=url, region=region)

    @classmethod
    def ec2_instance(cls, instance_id: str, region: Optional[str] = None) -> ResourceRef:
        return cls(kind=ResourceKind.EC2_INSTANCE, identifier=instance_id, region=region)

    def validate(self) -> bool:
        """Validate reference invariants.

        Returns:
            True if validation passes

        Raises:
            ValueError: If any validation rule fails
        """
        if not self.identifier:
            raise ValueError(f"{self.kind.value} reference requires an identifier")

        if self.kind == ResourceKind.ECS_TASK and not self.cluster:
            raise ValueError("ECS task reference requires a cluster ARN")

        if self.kind == ResourceKind.ECS_TASK and not _is_arn_of(self.identifier, ":task/"):
            raise ValueError(f"ECS task must be referenced by task ARN, got: {self.identifier}")

        if self.kind == ResourceKind.ECS_TASK_DEFINITION and not _is_arn_of(self.identifier, ":task-definition/"):
            raise ValueError(f"ECS task definition must be referenced by ARN, got: {self.identifier}")

        if self.kind == ResourceKind.SQS_QUEUE and not self.identifier.startswith(("https://", "http://")):
            raise ValueError(f"SQS queue must be referenced by URL, got: {self.identifier}")

        return True

    def log_fields(self) -> dict[str, str]:
        """Structured logging context identifying this resource."""
        if self.kind == ResourceKind.ECS_TASK:
            return {"arn": self.identifier, "cluster_arn": self.cluster or ""}
        if self.kind == ResourceKind.SQS_QUEUE:
            return {"url": self.identifier}
        if self.kind == ResourceKind.EC2_INSTANCE:
            return {"instance_id": self.identifier}
        return {"arn": self.identifier}

    def __str__(self) -> str:
        if self.cluster:
            return f"{self.kind.value} {self.identifier} (cluster {self.cluster})"
        return f"{self.kind.value} {self.identifier}"


def _is_arn_of(identifier: str, resource_marker: str) -> bool:
    return identifier.startswith("arn:") and resource_marker in identifier
