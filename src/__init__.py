"""AWS teardown coordinator - resource liveness checks and idempotent teardown."""

__version__ = "0.1.0"
