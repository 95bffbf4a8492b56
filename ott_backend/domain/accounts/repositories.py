# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from .entities import Account, IssuedSession, SessionClaims


class AccountRepository(Protocol):
    def find_by_handle(self, handle_key: str) -> Account | None: ...
    def find_by_id(self, account_id: str) -> Account | None: ...

    def add(self, account: Account) -> Account:
        """Insert if no account holds ``account.handle_key``.

        Raises ``UserAlreadyExistsError`` otherwise.
        """
        ...

    def list_all(self) -> Sequence[Account]: ...


class PasswordHasher(Protocol):
    def hash(self, password: str) -> str: ...
    def verify(self, password: str, hashed: str) -> bool: ...


class TokenService(Protocol):
    def issue(self, account: Account) -> IssuedSession: ...

    def decode(self, token: str) -> SessionClaims:
        """Raises ``UnauthenticatedError`` for any unusable token."""
        ...
