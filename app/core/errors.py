# app/core/errors.py
from __future__ import annotations

from typing import Any, Optional

from fastapi import status


class ApiError(Exception):
    """Erro de domínio renderizado no envelope {success, message, ...}."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, *, errors: Optional[Any] = None):
        super().__init__(message)
        self.message = message
        self.errors = errors

    def to_content(self) -> dict:
        content: dict = {"success": False, "message": self.message}
        if self.errors is not None:
            content["errors"] = self.errors
        return content


class ValidationFailed(ApiError):
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, errors: Optional[Any] = None):
        super().__init__("Validation failed", errors=errors)


class Unauthorized(ApiError):
    status_code = status.HTTP_401_UNAUTHORIZED


class Forbidden(ApiError):
    status_code = status.HTTP_403_FORBIDDEN


class NotFound(ApiError):
    status_code = status.HTTP_404_NOT_FOUND


class Conflict(ApiError):
    status_code = status.HTTP_409_CONFLICT


def first_issue(exc) -> str:
    """Mensagem do primeiro problema de uma ValidationError do pydantic."""
    issues = exc.errors()
    if not issues:
        return str(exc)
    return issues[0].get("msg", str(exc))
