# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable
from functools import wraps
from typing import cast

from flask import g, request

from ott_backend.application.credential_gate import CredentialGate
from ott_backend.domain.accounts.entities import SessionClaims
from ott_backend.shared.errors import AuthenticationError
from ott_backend.shared.logging import logger


def session_required(gate: CredentialGate) -> Callable:
    """Reject the request with 401 unless it carries a valid bearer token."""

    def decorator(f: Callable) -> Callable:
        @wraps(f)
        def inner(*args, **kwargs):
            try:
                claims = gate.validate_session(request.headers.get("Authorization"))
            except AuthenticationError:
                logger.warning(
                    f"auth.session: rejected on {request.method} {request.path} "
                    f"(header={'present' if 'Authorization' in request.headers else 'missing'})"
                )
                raise
            g.session_claims = claims
            g.account_id = claims.account_id
            logger.debug(f"auth.session: ok account_id={claims.account_id} {request.method} {request.path}")
            return f(*args, **kwargs)

        return inner

    return decorator


def current_claims() -> SessionClaims:
    return cast(SessionClaims, g.session_claims)
