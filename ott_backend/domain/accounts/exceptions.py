# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence

from ott_backend.shared.errors.base import (
    AuthenticationError,
    ConflictError,
    ValidationError,
)


class MissingFieldsError(ValidationError):
    default_code = "missing_fields"

    def __init__(self, fields: Sequence[str]) -> None:
        super().__init__(
            context={"fields": list(fields)},
            message="Handle and password are required",
        )


class SecretTooLongError(ValidationError):
    default_code = "password_too_long"
    default_message = "Password must be at most 72 bytes"


class UserAlreadyExistsError(ConflictError):
    default_code = "user_already_exists"
    default_message = "User already exists"


class InvalidCredentialsError(AuthenticationError):
    default_code = "invalid_credentials"
    default_message = "Invalid credentials"


class UnauthenticatedError(AuthenticationError):
    """Missing, malformed, expired or forged session token."""

    default_code = "unauthorized"
    default_message = "Unauthorized"
