"""
Domain error taxonomy.

Model functions raise these; the app-level error handlers turn them into
JSON error responses with the matching HTTP status.
"""

from utils.messages import get_message


class ReservationError(ValueError):
    """Base class for client-facing errors raised by the model layer."""

    status = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    @classmethod
    def from_key(cls, key: str, **kwargs):
        """Build the error from a message key in utils.messages."""
        return cls(get_message(key, **kwargs))


class NotFoundError(ReservationError):
    """A referenced customer, suite or reservation does not exist."""

    status = 404


class InvalidInputError(ReservationError):
    """Malformed input or a date rule violation."""

    status = 400


class ConflictError(ReservationError):
    """The request clashes with current state (availability, overlap, uniqueness)."""

    status = 409
