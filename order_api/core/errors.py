"""
Error taxonomy and error classifier

Every failure the API knows how to report is an OrderAPIError. Sentinel
errors coming from collaborators (storage, authorizer) carry an ErrorKind so
the classifier can map them to a status code without string matching.

Author: TM3
Date: 2025-10-17
"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


class ErrorKind(str, Enum):
    """Closed set of error kinds the dispatcher distinguishes"""
    NOT_FOUND = "not_found"
    UNAUTHORIZED = "unauthorized"
    INTERNAL = "internal"


class OrderAPIError(Exception):
    """Base class for every error raised by the order API"""

    kind = ErrorKind.INTERNAL

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class DecodeError(OrderAPIError):
    """Malformed request body, query or path parameter"""


class ValidationError(OrderAPIError):
    """Decoded payload that breaks one or more field rules"""

    def __init__(self, violations):
        super().__init__(str(violations[0]))
        self.violations = list(violations)


class NotFoundError(OrderAPIError):
    """Sentinel raised by the storage layer when an entity does not exist"""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, message: str = "entity not found"):
        super().__init__(message)


class UnauthorizedError(OrderAPIError):
    """Sentinel raised by the authorizer when a customer is rejected"""

    kind = ErrorKind.UNAUTHORIZED

    def __init__(self, message: str = "customer unauthorized"):
        super().__init__(message)


STATUS_BY_KIND = {
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.UNAUTHORIZED: 403,
    ErrorKind.INTERNAL: 500,
}


@dataclass(frozen=True)
class ErrorContext:
    """
    Messages one operation reports for each error kind

    A kind without a message is not recognised by the operation and falls
    through to the 500 failure message.
    """
    failure_message: str
    not_found_message: Optional[str] = None
    unauthorized_message: Optional[str] = None

    def message_for(self, kind: ErrorKind) -> Optional[str]:
        if kind is ErrorKind.NOT_FOUND:
            return self.not_found_message
        if kind is ErrorKind.UNAUTHORIZED:
            return self.unauthorized_message
        return self.failure_message


def error_kind(error: Exception) -> ErrorKind:
    """Kind of an arbitrary exception; anything foreign is INTERNAL"""
    if isinstance(error, OrderAPIError):
        return error.kind
    return ErrorKind.INTERNAL


def classify(context: ErrorContext, error: Exception) -> Tuple[int, str]:
    """
    Map a use-case error to (status code, response message)

    Args:
        context: Messages of the operation that failed
        error: Exception raised by the use case

    Returns:
        Tuple of (HTTP status code, human readable message)
    """
    kind = error_kind(error)
    message = context.message_for(kind)
    if message is None:
        return STATUS_BY_KIND[ErrorKind.INTERNAL], context.failure_message
    return STATUS_BY_KIND[kind], message
