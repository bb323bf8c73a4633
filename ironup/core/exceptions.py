"""
Domain errors raised by the services.

Each error carries the HTTP status and the machine-readable code used by the
application exception handler in ironup.main.
"""

from typing import Any, Dict


class IronUpError(Exception):
    status_code = 500
    error_code = "server_error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> Dict[str, Any]:
        return {"error": self.error_code, "detail": self.message}


class ValidationError(IronUpError):
    """Missing, malformed or out-of-range input."""
    status_code = 400
    error_code = "validation_error"


class ConflictError(IronUpError):
    """A state precondition does not hold (already in a group, duplicates)."""
    status_code = 409
    error_code = "conflict"


class AlreadyRedeemedError(ConflictError):
    """The check-in date is already in the user's history."""
    error_code = "already_redeemed"


class NotFoundError(IronUpError):
    status_code = 404
    error_code = "not_found"


class WindowClosedError(IronUpError):
    """The check-in date falls after the challenge's last eligible day."""
    status_code = 400
    error_code = "window_closed"


class AuthError(IronUpError):
    status_code = 401
    error_code = "auth_error"
