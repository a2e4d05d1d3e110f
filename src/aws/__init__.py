"""AWS session, client and error helpers."""

from __future__ import annotations

from .client import create_boto_client
from .errors import error_code, is_not_found

__all__ = [
    "create_boto_client",
    "error_code",
    "is_not_found",
]
