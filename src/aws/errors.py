"""Classification of AWS API errors.

Only the "resource does not exist" category is classified; every other error
is left for the caller to propagate.
"""

from __future__ import annotations

from botocore.exceptions import ClientError

# Error codes meaning "the targeted resource does not exist", per service
NOT_FOUND_CODES = {
    "ecs": frozenset(),
    "sns": frozenset({"NotFound", "NotFoundException"}),
    "sqs": frozenset({"AWS.SimpleQueueService.NonExistentQueue", "QueueDoesNotExist"}),
    "ec2": frozenset({"InvalidInstanceID.NotFound"}),
}


def error_code(error: BaseException) -> str:
    """Return the AWS error code of a ClientError, or "Unknown"."""
    if isinstance(error, ClientError):
        return error.response.get("Error", {}).get("Code", "Unknown")
    return "Unknown"


def error_message(error: BaseException) -> str:
    """Return the AWS error message of a ClientError, or str(error)."""
    if isinstance(error, ClientError):
        return error.response.get("Error", {}).get("Message", str(error))
    return str(error)


def is_not_found(error: BaseException, service: str) -> bool:
    """Check whether an error means the resource is already absent.

    Args:
        error: Exception raised by a boto3 call
        service: AWS service name the call was made against

    Returns:
        True if the error is the service's not-found class
    """
    if not isinstance(error, ClientError):
        return False
    return error_code(error) in NOT_FOUND_CODES.get(service, frozenset())
