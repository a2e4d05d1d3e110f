"""Logging setup."""

from __future__ import annotations

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

# Chatty third-party loggers kept at WARNING unless verbose
NOISY_LOGGERS = ("boto3", "botocore", "urllib3", "s3transfer")

_HANDLER_MARKER = "_aws_teardown_handler"


def setup_logging(level: str = "INFO", verbose: bool = False, log_file: Optional[str] = None) -> None:
    """Configure root logging.

    Safe to call more than once; handlers installed by a previous call are
    replaced.

    Args:
        level: Logging level name
        verbose: Show third-party debug output and log source paths
        log_file: Also write plain-text logs to this file (optional)
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    root = logging.getLogger()

    for handler in list(root.handlers):
        if getattr(handler, _HANDLER_MARKER, False):
            root.removeHandler(handler)
            handler.close()

    console_handler = RichHandler(
        console=Console(stderr=True),
        show_path=verbose,
        rich_tracebacks=verbose,
    )
    console_handler.setLevel(numeric_level)
    setattr(console_handler, _HANDLER_MARKER, True)
    root.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(numeric_level)
        file_handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
        setattr(file_handler, _HANDLER_MARKER, True)
        root.addHandler(file_handler)

    root.setLevel(numeric_level)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.DEBUG if verbose else logging.WARNING)
