"""
Failure types raised by stores and services.

Every failure the core reports carries a ``kind`` and a human-readable
``message``.  The request layer (see ``error_handlers``) maps the kind
to an HTTP status code; the core itself never logs or renders errors.
"""

from enum import Enum


class ErrorKind(str, Enum):
    NOT_FOUND = "NotFound"
    DUPLICATE_KEY = "DuplicateKey"
    INVALID_ARGUMENT = "InvalidArgument"


class ServiceError(Exception):
    """Base class for classified failures."""

    kind: ErrorKind

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class NotFoundError(ServiceError):
    """A referenced id or key does not exist."""

    kind = ErrorKind.NOT_FOUND


class DuplicateKeyError(ServiceError):
    """A secondary key (e.g. SKU) collides with another entity."""

    kind = ErrorKind.DUPLICATE_KEY


class InvalidArgumentError(ServiceError):
    """Malformed filter input or an operation that would break an invariant."""

    kind = ErrorKind.INVALID_ARGUMENT
