"""
Error taxonomy for the Todo API.

Services raise these; the application maps each one to its HTTP status code
and an ``{"error": message}`` body at the request boundary.
"""
from typing import Any, Dict, Optional


class TodoAppError(Exception):
    """Base exception for request-level failures."""

    status_code = 500
    code = "INTERNAL_ERROR"

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ValidationError(TodoAppError):
    """Malformed or missing input."""

    status_code = 400
    code = "VALIDATION_ERROR"


class AuthError(TodoAppError):
    """Missing, invalid or expired token, or bad login credentials."""

    status_code = 401
    code = "UNAUTHENTICATED"


class AuthzError(TodoAppError):
    """Authenticated caller has no rights over the resource (or it does not exist)."""

    status_code = 403
    code = "FORBIDDEN"


class ConflictError(TodoAppError):
    """Duplicate unique key."""

    status_code = 409
    code = "CONFLICT"


class InternalError(TodoAppError):
    """Unexpected store or crypto failure."""

    status_code = 500
    code = "INTERNAL_ERROR"
