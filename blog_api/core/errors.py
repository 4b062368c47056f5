# File: blog_api/core/errors.py

"""
Application error types.

Every failure a handler can produce is one of these. The HTTP layer renders
them through a single exception handler (see ``blog_api.main``), so routes and
services raise them and never build error responses by hand.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from http import HTTPStatus
from typing import Any


@dataclass(eq=False)
class AppError(Exception):
    code: str
    status: HTTPStatus
    message: str
    context: Mapping[str, Any] | None = None

    def __post_init__(self) -> None:
        Exception.__init__(self, self.message)

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"error": self.message, "code": self.code}
        if self.context:
            payload["details"] = dict(self.context)
        return payload


class MissingCredentialError(AppError):
    def __init__(self) -> None:
        super().__init__(
            code="missing_credential",
            status=HTTPStatus.UNAUTHORIZED,
            message="Unauthorized - Token required",
        )


class InvalidTokenError(AppError):
    def __init__(self, reason: str = "invalid token") -> None:
        super().__init__(
            code="invalid_token",
            status=HTTPStatus.UNAUTHORIZED,
            message="Unauthorized - Invalid token",
        )
        self.reason = reason


class InvalidCredentialsError(AppError):
    def __init__(self) -> None:
        super().__init__(
            code="invalid_credentials",
            status=HTTPStatus.UNAUTHORIZED,
            message="Invalid credentials",
        )


class ForbiddenError(AppError):
    def __init__(self, message: str = "Forbidden") -> None:
        super().__init__(
            code="forbidden",
            status=HTTPStatus.FORBIDDEN,
            message=message,
        )


class NotFoundError(AppError):
    def __init__(self, resource: str = "Record") -> None:
        super().__init__(
            code="not_found",
            status=HTTPStatus.NOT_FOUND,
            message=f"{resource} not found",
        )


class DuplicateRecordError(AppError):
    def __init__(self, message: str = "A record with this data already exists") -> None:
        super().__init__(
            code="duplicate_record",
            status=HTTPStatus.CONFLICT,
            message=message,
        )


class RelatedRecordError(AppError):
    def __init__(self) -> None:
        super().__init__(
            code="foreign_key_violation",
            status=HTTPStatus.BAD_REQUEST,
            message="Foreign key constraint failed",
        )


class PersistenceError(AppError):
    def __init__(self) -> None:
        super().__init__(
            code="database_error",
            status=HTTPStatus.INTERNAL_SERVER_ERROR,
            message="Database error occurred",
        )
