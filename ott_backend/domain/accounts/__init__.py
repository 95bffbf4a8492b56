# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .entities import Account, IssuedSession, SessionClaims
from .exceptions import (
    InvalidCredentialsError,
    MissingFieldsError,
    SecretTooLongError,
    UnauthenticatedError,
    UserAlreadyExistsError,
)
from .policies import HandlePolicy
from .repositories import AccountRepository, PasswordHasher, TokenService

__all__ = [
    "Account",
    "AccountRepository",
    "HandlePolicy",
    "InvalidCredentialsError",
    "IssuedSession",
    "MissingFieldsError",
    "PasswordHasher",
    "SecretTooLongError",
    "SessionClaims",
    "TokenService",
    "UnauthenticatedError",
    "UserAlreadyExistsError",
]
