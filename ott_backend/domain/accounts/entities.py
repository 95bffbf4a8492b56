# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(slots=True, frozen=True)
class Account:

    id: str
    handle: str
    handle_key: str
    password_hash: str
    created_at: datetime
    display_name: str | None = None


@dataclass(slots=True, frozen=True)
class SessionClaims:
    """Identity asserted by a verified session token."""

    account_id: str
    handle: str
    issued_at: datetime
    expires_at: datetime


@dataclass(slots=True, frozen=True)
class IssuedSession:

    token: str
    account: Account
    expires_at: datetime
