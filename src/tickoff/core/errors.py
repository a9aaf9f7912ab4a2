# src/tickoff/core/errors.py

"""
Error taxonomy shared by the todo operations and the HTTP layer.

Every error is terminal for the request. The HTTP layer maps `status_code`
to the response status and `message` to the `{"error": ...}` body.
"""

from __future__ import annotations


class TodoError(Exception):
    status_code: int = 500
    default_message: str = "Internal error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class Unauthenticated(TodoError):
    """No resolvable caller identity."""

    status_code = 401
    default_message = "Unauthorized"


class ValidationError(TodoError):
    """Title missing, empty or too long (or a malformed request body)."""

    status_code = 400
    default_message = "Invalid request"


class NotFound(TodoError):
    """Target todo is absent or not owned by the caller."""

    status_code = 404
    default_message = "Todo not found"
