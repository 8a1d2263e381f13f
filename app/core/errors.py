"""Typed API errors.

Every error carries an HTTP status and a user-facing message; the global
handlers in app/api/error_handlers.py turn them into JSON with to_response().
"""

from typing import Optional


class ApiError(Exception):
    """Base exception for every error the API reports to its callers."""

    status_code = 500

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code

    def to_response(self) -> dict:
        return {"message": self.message, "statusCode": self.status_code}


class NotFoundError(ApiError):
    """Requested resource does not exist (or is not visible to the caller)."""

    status_code = 404

    def __init__(self, resource: str):
        super().__init__(f"{resource} couldn't be found")
        self.resource = resource


class ValidationFailedError(ApiError):
    """Request body failed a validation rule set."""

    status_code = 400

    def __init__(self, errors: dict[str, str], message: str = "Validation error"):
        super().__init__(message)
        self.errors = errors

    def to_response(self) -> dict:
        body = super().to_response()
        body["errors"] = dict(self.errors)
        return body


class ForbiddenError(ApiError):
    status_code = 403


class UnauthorizedError(ApiError):
    status_code = 401

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message)
