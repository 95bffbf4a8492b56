# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Registration, login and session validation behind one object.

The gate owns no state of its own: accounts live in the injected
repository and sessions are self-contained signed tokens. Transport
adapters call it with raw field values and header strings and map the
raised ``AppError`` subclasses onto status codes.
"""

from __future__ import annotations

from ott_backend.application.use_cases.accounts.login_account import LoginAccountUseCase
from ott_backend.application.use_cases.accounts.register_account import (
    RegisterAccountUseCase,
)
from ott_backend.application.use_cases.accounts.validate_session import (
    ValidateSessionUseCase,
)
from ott_backend.domain.accounts.entities import Account, IssuedSession, SessionClaims
from ott_backend.domain.accounts.policies import HandlePolicy
from ott_backend.domain.accounts.repositories import (
    AccountRepository,
    PasswordHasher,
    TokenService,
)


class CredentialGate:
    def __init__(
        self,
        *,
        accounts: AccountRepository,
        password_hasher: PasswordHasher,
        tokens: TokenService,
        handle_policy: HandlePolicy | None = None,
    ) -> None:
        policy = handle_policy or HandlePolicy()
        self._register = RegisterAccountUseCase(
            accounts=accounts, password_hasher=password_hasher, handle_policy=policy
        )
        self._login = LoginAccountUseCase(
            accounts=accounts,
            password_hasher=password_hasher,
            tokens=tokens,
            handle_policy=policy,
        )
        self._validate = ValidateSessionUseCase(tokens=tokens)

    def register(
        self, handle: str | None, password: str | None, display_name: str | None = None
    ) -> Account:
        """Store a new account; raises MissingFieldsError or UserAlreadyExistsError."""
        return self._register.execute(handle, password, display_name)

    def login(self, handle: str | None, password: str | None) -> IssuedSession:
        """Raises InvalidCredentialsError for unknown handles and wrong passwords alike."""
        return self._login.execute(handle, password)

    def validate_session(self, authorization: str | None) -> SessionClaims:
        """Resolve an ``Authorization: Bearer <token>`` value to its claims."""
        return self._validate.execute(authorization)
