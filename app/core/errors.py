"""
Application error taxonomy.

Every error carries a stable ``code`` and the HTTP status the API layer
renders it with. Entity access functions never raise these for persistence
problems (they return an ``Err`` instead); route handlers and the
authorization gate do.
"""
from typing import Iterable


class AppError(Exception):
    """Base class for errors that map onto an API response."""
    code = "INTERNAL_ERROR"
    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class NotAuthenticatedError(AppError):
    """No identity could be resolved for the caller."""
    code = "NOT_AUTHENTICATED"
    status_code = 401
    default_message = "Not authenticated"


class NotFoundError(AppError):
    """Entity absent or inactive."""
    code = "NOT_FOUND"
    status_code = 404
    default_message = "Not found"


class ValidationFailureError(AppError):
    """Request payload is missing fields or carries an unrecognized value."""
    code = "VALIDATION_FAILED"
    status_code = 400
    default_message = "Missing required fields"


class UpstreamFailureError(AppError):
    """A third-party provider call failed."""
    code = "UPSTREAM_FAILURE"
    status_code = 502
    default_message = "Upstream service error"


class ConfigurationError(AppError):
    """Required environment-driven settings are missing."""
    code = "CONFIGURATION_ERROR"
    status_code = 500

    def __init__(self, missing: Iterable[str]):
        self.missing = list(missing)
        super().__init__(f"Server is not configured: missing {', '.join(self.missing)}")
