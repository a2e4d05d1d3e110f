"""Boto3 client factory.

Every call gets its own session so that handlers can run concurrently from
independent threads without sharing a client.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

import boto3
from botocore.config import Config as BotoConfig

logger = logging.getLogger(__name__)


def create_boto_client(
    service_name: str,
    region_name: Optional[str] = None,
    profile_name: Optional[str] = None,
    config: Optional[BotoConfig] = None,
) -> Any:
    """Create a boto3 client from a fresh session.

    Args:
        service_name: AWS service name (e.g., "ecs", "sqs")
        region_name: AWS region (optional, falls back to the session default)
        profile_name: AWS profile name (optional)
        config: botocore client configuration (timeouts, retries)

    Returns:
        Boto3 client for the service
    """
    session = boto3.Session(profile_name=profile_name, region_name=region_name)
    logger.debug(f"Creating {service_name} client (region={region_name or session.region_name}, profile={profile_name})")
    return session.client(service_name, config=config)
