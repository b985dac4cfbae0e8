"""
Error types raised by the service directory.

Usage problems (wrong number of command arguments) and lookups that
find nothing are reported through ``CommandResult`` values and never
raised.  Everything here propagates up to the message handler, which
turns it into a generic failure reply for the chat user.
"""

from enum import Enum


class ErrorKind(str, Enum):
    VALIDATION = "validation"
    CONFLICT = "conflict"
    UNINITIALIZED = "uninitialized"


class OwnerbotError(Exception):
    """Base class for directory errors; ``kind`` tells them apart."""

    kind: ErrorKind

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(OwnerbotError):
    """A required service field is missing or has the wrong type."""

    kind = ErrorKind.VALIDATION


class ConflictError(OwnerbotError):
    """A service name or alias is already taken."""

    kind = ErrorKind.CONFLICT


class UninitializedError(OwnerbotError):
    """The directory was read before ``init()`` loaded it."""

    kind = ErrorKind.UNINITIALIZED
