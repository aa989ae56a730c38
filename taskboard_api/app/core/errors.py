"""
Error taxonomy for the Taskboard API.

Services raise these exceptions for expected, locally handled
conditions.  The handlers registered in
:mod:`taskboard_api.app.api.error_handlers` turn them into JSON
responses of the form ``{"error": "<message>"}`` using the status
code carried by the exception.  Anything else that escapes a handler
is treated as an internal error.
"""

from typing import Any, Dict, Optional

from fastapi import status


class TaskboardError(Exception):
    """Base exception for all expected Taskboard failures."""

    http_status: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, http_status: Optional[int] = None) -> None:
        super().__init__(message)
        self.message = message
        if http_status is not None:
            self.http_status = http_status

    def to_response(self) -> Dict[str, Any]:
        return {"error": self.message}


class InvalidInputError(TaskboardError):
    """A required field is missing or empty, or a referenced id does not resolve."""

    http_status = status.HTTP_400_BAD_REQUEST


class NotFoundError(TaskboardError):
    """The requested id is absent from its collection."""

    http_status = status.HTTP_404_NOT_FOUND


class UnauthorizedError(TaskboardError):
    """The bearer token is missing or does not match the configured secret."""

    http_status = status.HTTP_401_UNAUTHORIZED

    def __init__(self, message: str = "Unauthorized request") -> None:
        super().__init__(message)
