# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from ott_backend.domain.accounts.entities import SessionClaims
from ott_backend.domain.accounts.exceptions import UnauthenticatedError
from ott_backend.domain.accounts.repositories import TokenService


def bearer_token(authorization: str | None) -> str:
    scheme, _, token = (authorization or "").strip().partition(" ")
    if scheme.lower() != "bearer":
        return ""
    return token.strip()


class ValidateSessionUseCase:
    def __init__(self, *, tokens: TokenService) -> None:
        self._tokens = tokens

    def execute(self, authorization: str | None) -> SessionClaims:
        token = bearer_token(authorization)
        if not token:
            raise UnauthenticatedError()
        return self._tokens.decode(token)
