"""
Domain-specific exception hierarchy for the scheduling client.
"""


class SchedulingError(Exception):
    """Base class for all application-level errors."""


class MalformedInputError(SchedulingError, ValueError):
    """Raised when availability data or an API payload cannot be interpreted."""


class ApiError(SchedulingError):
    """Raised when the scheduling API cannot be reached or answers with an error."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class BookingRejectedError(SchedulingError):
    """Raised when a booking is refused before it is sent to the API."""
