"""
Request Errors

Every failure in this service is scoped to a single request. Pipeline
steps raise one of these and the exception handlers in ``grubdash.main``
render it as ``{"error": message}`` with the matching status code.
"""

from typing import Optional


class APIError(Exception):
    """Base class for errors surfaced to the API caller."""

    status_code = 500

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code

    def to_dict(self) -> dict:
        """Convert to the JSON error body."""
        return {"error": self.message}


class ValidationError(APIError):
    """Missing or malformed field, id mismatch, or illegal status change."""

    status_code = 400


class NotFoundError(APIError):
    """Route identifier does not resolve to a stored entity."""

    status_code = 404


class MethodNotAllowedError(APIError):
    status_code = 405
