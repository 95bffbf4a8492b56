# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import uuid
from datetime import UTC, datetime

from ott_backend.application.services.password_hashing import BCRYPT_MAX_BYTES
from ott_backend.domain.accounts.entities import Account
from ott_backend.domain.accounts.exceptions import (
    MissingFieldsError,
    SecretTooLongError,
    UserAlreadyExistsError,
)
from ott_backend.domain.accounts.policies import HandlePolicy
from ott_backend.domain.accounts.repositories import AccountRepository, PasswordHasher


def missing_credentials(handle: str | None, password: str | None) -> list[str]:
    missing = []
    if not handle or not handle.strip():
        missing.append("handle")
    if not password:
        missing.append("password")
    return missing


class RegisterAccountUseCase:
    def __init__(
        self,
        *,
        accounts: AccountRepository,
        password_hasher: PasswordHasher,
        handle_policy: HandlePolicy,
    ) -> None:
        self._accounts = accounts
        self._password_hasher = password_hasher
        self._handle_policy = handle_policy

    def execute(
        self,
        handle: str | None,
        password: str | None,
        display_name: str | None = None,
    ) -> Account:
        missing = missing_credentials(handle, password)
        if missing:
            raise MissingFieldsError(missing)
        assert handle is not None and password is not None
        if len(password.encode("utf-8")) > BCRYPT_MAX_BYTES:
            raise SecretTooLongError()

        handle = handle.strip()
        handle_key = self._handle_policy.normalize(handle)
        if self._accounts.find_by_handle(handle_key):
            raise UserAlreadyExistsError()

        account = Account(
            id=uuid.uuid4().hex,
            handle=handle,
            handle_key=handle_key,
            password_hash=self._password_hasher.hash(password),
            created_at=datetime.now(UTC),
            display_name=(display_name or "").strip() or None,
        )
        # The store re-checks the key on insert; a concurrent registration
        # that slipped past find_by_handle still ends in UserAlreadyExistsError.
        return self._accounts.add(account)
