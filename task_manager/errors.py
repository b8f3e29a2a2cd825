"""Error taxonomy for the Task Manager API.

Every error that may reach a client derives from ``TaskManagerError`` and
carries the HTTP status and the generic message it is reported with. The
translation to a response happens once, in ``task_manager.main``.
"""
from typing import Any, Dict, List, Optional


class TaskManagerError(Exception):
    """Base class for errors surfaced to API clients."""

    status_code: int = 500
    message: str = "An error occurred."

    def __init__(self, message: Optional[str] = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        return {"error": self.message}


class ValidationError(TaskManagerError):
    """A required field is missing or malformed."""

    status_code = 422
    message = "Invalid request."

    def __init__(self, message: Optional[str] = None, fields: Optional[List[str]] = None):
        super().__init__(message)
        self.fields = fields or []

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        if self.fields:
            data["fields"] = self.fields
        return data


class DuplicateError(TaskManagerError):
    """The username is already registered."""

    status_code = 409
    message = "Username already exists."


class AuthenticationError(TaskManagerError):
    """Bad credentials, or a missing, invalid or expired token."""

    status_code = 401
    message = "Invalid credentials."


class NotFoundError(TaskManagerError):
    """The task does not exist or belongs to another user."""

    status_code = 404
    message = "Task not found."


class StoreError(TaskManagerError):
    """The underlying database operation failed."""

    status_code = 500
    message = "An error occurred."


class TokenError(Exception):
    """Base class for session token failures."""


class TokenExpiredError(TokenError):
    """The token signature is valid but its expiry has passed."""


class TokenInvalidError(TokenError):
    """The token is malformed, has a bad signature, or lacks required claims."""
