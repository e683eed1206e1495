"""
Error Kinds

Every failure the booking engine reports belongs to exactly one kind.
Callers branch on ``error.kind`` rather than on message text; the HTTP
layer maps each kind to its status class.
"""

from enum import Enum


class ErrorKind(Enum):
    INVALID_REQUEST = 'invalid_request'
    NOT_FOUND = 'not_found'
    FORBIDDEN = 'forbidden'
    CONFLICT = 'conflict'
    INVALID_STATE = 'invalid_state'

    @property
    def http_status(self) -> int:
        return _HTTP_STATUS[self]


_HTTP_STATUS = {
    ErrorKind.INVALID_REQUEST: 400,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.FORBIDDEN: 403,
    ErrorKind.CONFLICT: 409,
    ErrorKind.INVALID_STATE: 400,
}


class BookingError(Exception):
    """Base class for all errors raised by the registry, ledger and engine."""

    kind: ErrorKind

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __repr__(self):
        return f"{self.__class__.__name__}({self.message!r})"


class InvalidRequest(BookingError):
    """Malformed, missing or out-of-range input. Never retried."""
    kind = ErrorKind.INVALID_REQUEST


class NotFound(BookingError):
    """Unknown lot or booking."""
    kind = ErrorKind.NOT_FOUND


class Forbidden(BookingError):
    """Requester does not own the booking."""
    kind = ErrorKind.FORBIDDEN


class Conflict(BookingError):
    """Capacity exhausted, or a concurrent writer won the race."""
    kind = ErrorKind.CONFLICT


class InvalidState(BookingError):
    """Booking is not in a state that allows the requested transition."""
    kind = ErrorKind.INVALID_STATE
