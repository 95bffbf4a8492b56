# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from http import HTTPStatus
from typing import Any, ClassVar


@dataclass(slots=True, eq=False)
class AppError(Exception):
    code: str
    status: HTTPStatus
    context: Mapping[str, Any] | None = None
    message: str | None = None

    def __post_init__(self) -> None:
        Exception.__init__(self, self.code)

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"error": self.code}
        if self.message:
            payload["message"] = self.message
        if self.context:
            payload["context"] = dict(self.context)
        return payload


class _CategoryError(AppError):
    default_code: ClassVar[str] = "app_error"
    default_status: ClassVar[HTTPStatus] = HTTPStatus.INTERNAL_SERVER_ERROR
    default_message: ClassVar[str | None] = None

    def __init__(
        self,
        code: str | None = None,
        *,
        context: Mapping[str, Any] | None = None,
        message: str | None = None,
    ) -> None:
        super().__init__(
            code=code or self.default_code,
            status=self.default_status,
            context=context,
            message=message or self.default_message,
        )


class ValidationError(_CategoryError):
    default_code = "validation_error"
    default_status = HTTPStatus.BAD_REQUEST


class AuthenticationError(_CategoryError):
    default_code = "unauthorized"
    default_status = HTTPStatus.UNAUTHORIZED


class NotFoundError(_CategoryError):
    default_code = "not_found"
    default_status = HTTPStatus.NOT_FOUND


class ConflictError(_CategoryError):
    default_code = "conflict"
    default_status = HTTPStatus.CONFLICT


class InternalError(_CategoryError):
    """Server-side failure; the response never carries detail."""

    default_code = "internal_error"
    default_status = HTTPStatus.INTERNAL_SERVER_ERROR

    def to_dict(self) -> dict[str, Any]:
        return {"error": "internal_error"}


class StorageError(InternalError):
    default_code = "storage_error"
