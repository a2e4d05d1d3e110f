"""Configuration loading.

Values are resolved in order: defaults, YAML config file, environment
variables.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Optional

import yaml
from botocore.config import Config as BotoConfig

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path.home() / ".aws-teardown" / "config.yaml"
VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class Config:
    """Coordinator configuration.

    Attributes:
        aws_profile: AWS profile name (None uses the default credential chain)
        region: Default AWS region for resources without their own
        log_level: Logging level name
        connect_timeout: Socket connect timeout in seconds
        read_timeout: Socket read timeout in seconds
        max_attempts: botocore's total attempt budget per call
    """

    aws_profile: Optional[str] = None
    region: Optional[str] = None
    log_level: str = "INFO"
    connect_timeout: float = 10.0
    read_timeout: float = 30.0
    max_attempts: int = 3

    @classmethod
    def load(cls, path: Optional[str] = None) -> Config:
        """Load configuration from file and environment.

        Args:
            path: YAML config file (default: $AWS_TEARDOWN_CONFIG or
                ~/.aws-teardown/config.yaml). A missing default file is
                ignored; a missing explicit file is an error.

        Returns:
            Validated Config

        Raises:
            FileNotFoundError: If an explicitly given file does not exist
            ValueError: If the file or any value is invalid
        """
        config = cls()

        explicit = path or os.environ.get("AWS_TEARDOWN_CONFIG")
        config_path = Path(explicit).expanduser() if explicit else DEFAULT_CONFIG_PATH

        if config_path.exists():
            config._apply(cls._read_file(config_path))
        elif explicit:
            raise FileNotFoundError(f"Config file not found: {config_path}")

        config._apply_env()
        config.validate()
        return config

    @staticmethod
    def _read_file(config_path: Path) -> dict[str, Any]:
        with open(config_path, "r") as f:
            try:
                data = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ValueError(f"Invalid YAML in {config_path}: {e}") from e

        if not isinstance(data, dict):
            raise ValueError(f"Config file {config_path} must contain a mapping")

        logger.debug(f"Loaded configuration from {config_path}")
        return data

    def _apply(self, data: dict[str, Any]) -> None:
        for key, value in data.items():
            if key not in {f.name for f in fields(self)}:
                logger.warning(f"Ignoring unknown config key: {key}")
                continue
            setattr(self, key, value)

    def _apply_env(self) -> None:
        env = os.environ
        if env.get("AWS_PROFILE"):
            self.aws_profile = env["AWS_PROFILE"]

        region = env.get("AWS_REGION") or env.get("AWS_DEFAULT_REGION")
        if region:
            self.region = region

        if env.get("AWS_TEARDOWN_LOG_LEVEL"):
            self.log_level = env["AWS_TEARDOWN_LOG_LEVEL"]
        if env.get("AWS_TEARDOWN_CONNECT_TIMEOUT"):
            self.connect_timeout = env["AWS_TEARDOWN_CONNECT_TIMEOUT"]
        if env.get("AWS_TEARDOWN_READ_TIMEOUT"):
            self.read_timeout = env["AWS_TEARDOWN_READ_TIMEOUT"]
        if env.get("AWS_TEARDOWN_MAX_ATTEMPTS"):
            self.max_attempts = env["AWS_TEARDOWN_MAX_ATTEMPTS"]

    def validate(self) -> bool:
        """Validate and normalize values.

        Returns:
            True if validation passes

        Raises:
            ValueError: If any value is invalid
        """
        try:
            self.connect_timeout = float(self.connect_timeout)
            self.read_timeout = float(self.read_timeout)
            self.max_attempts = int(self.max_attempts)
        except (TypeError, ValueError) as e:
            raise ValueError(f"Invalid numeric config value: {e}") from e

        if self.connect_timeout <= 0 or self.read_timeout <= 0:
            raise ValueError("Timeouts must be positive")
        if self.max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")

        self.log_level = str(self.log_level).upper()
        if self.log_level not in VALID_LOG_LEVELS:
            raise ValueError(f"Invalid log level: {self.log_level}")

        return True

    def client_config(self) -> BotoConfig:
        """Build the botocore client configuration."""
        return BotoConfig(
            connect_timeout=self.connect_timeout,
            read_timeout=self.read_timeout,
            retries={"total_max_attempts": self.max_attempts, "mode": "standard"},
        )
