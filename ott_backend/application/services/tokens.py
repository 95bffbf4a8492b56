# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Stateless session tokens signed with a server-held key."""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime, timedelta

import jwt

from ott_backend.domain.accounts.entities import Account, IssuedSession, SessionClaims
from ott_backend.domain.accounts.exceptions import UnauthenticatedError
from ott_backend.domain.accounts.repositories import TokenService
from ott_backend.shared.logging import logger

_REQUIRED_CLAIMS = ["sub", "handle", "iat", "exp"]


def _utcnow() -> datetime:
    return datetime.now(UTC)


class JwtTokenService(TokenService):
    """Issues and verifies HMAC-signed JWTs carrying ``{sub, handle, iat, exp}``.

    Nothing is stored server-side: a token is valid exactly when its
    signature checks out and ``exp`` has not passed. Every failure mode is
    reported as the same ``UnauthenticatedError`` so callers cannot tell a
    forged token from an expired one.
    """

    def __init__(
        self,
        secret: str,
        *,
        algorithm: str = "HS256",
        ttl_seconds: int = 7 * 24 * 3600,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._secret = secret
        self._algorithm = algorithm
        self._ttl = timedelta(seconds=ttl_seconds)
        self._clock = clock

    def issue(self, account: Account) -> IssuedSession:
        issued_at = self._clock().replace(microsecond=0)
        expires_at = issued_at + self._ttl
        payload = {
            "sub": account.id,
            "handle": account.handle,
            "iat": int(issued_at.timestamp()),
            "exp": int(expires_at.timestamp()),
        }
        token = jwt.encode(payload, self._secret, algorithm=self._algorithm)
        return IssuedSession(token=token, account=account, expires_at=expires_at)

    def decode(self, token: str) -> SessionClaims:
        try:
            claims = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                # exp and iat are checked against the service clock below.
                options={
                    "require": _REQUIRED_CLAIMS,
                    "verify_exp": False,
                    "verify_iat": False,
                },
            )
        except jwt.InvalidTokenError as exc:
            logger.debug(f"auth.session: rejected token ({type(exc).__name__})")
            raise UnauthenticatedError() from exc

        try:
            issued_at = datetime.fromtimestamp(int(claims["iat"]), UTC)
            expires_at = datetime.fromtimestamp(int(claims["exp"]), UTC)
        except (TypeError, ValueError, OverflowError, OSError) as exc:
            logger.debug("auth.session: rejected token (bad timestamps)")
            raise UnauthenticatedError() from exc
        if expires_at <= self._clock():
            logger.debug("auth.session: rejected token (expired)")
            raise UnauthenticatedError()

        account_id, handle = claims["sub"], claims["handle"]
        if not isinstance(account_id, str) or not isinstance(handle, str):
            logger.debug("auth.session: rejected token (bad claim types)")
            raise UnauthenticatedError()

        return SessionClaims(
            account_id=account_id,
            handle=handle,
            issued_at=issued_at,
            expires_at=expires_at,
        )
