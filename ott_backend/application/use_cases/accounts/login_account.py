# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import secrets

from ott_backend.application.use_cases.accounts.register_account import missing_credentials
from ott_backend.domain.accounts.entities import IssuedSession
from ott_backend.domain.accounts.exceptions import InvalidCredentialsError, MissingFieldsError
from ott_backend.domain.accounts.policies import HandlePolicy
from ott_backend.domain.accounts.repositories import (
    AccountRepository,
    PasswordHasher,
    TokenService,
)


class LoginAccountUseCase:
    def __init__(
        self,
        *,
        accounts: AccountRepository,
        password_hasher: PasswordHasher,
        tokens: TokenService,
        handle_policy: HandlePolicy,
    ) -> None:
        self._accounts = accounts
        self._password_hasher = password_hasher
        self._tokens = tokens
        self._handle_policy = handle_policy
        # Verified against when the handle is unknown, so both failure paths
        # pay for one hash comparison and nothing else.
        self._decoy_hash = password_hasher.hash(secrets.token_urlsafe(16))

    def execute(self, handle: str | None, password: str | None) -> IssuedSession:
        missing = missing_credentials(handle, password)
        if missing:
            raise MissingFieldsError(missing)
        assert handle is not None and password is not None

        account = self._accounts.find_by_handle(self._handle_policy.normalize(handle))
        if account is None:
            self._password_hasher.verify(password, self._decoy_hash)
            raise InvalidCredentialsError()

        if not self._password_hasher.verify(password, account.password_hash):
            raise InvalidCredentialsError()

        return self._tokens.issue(account)
