from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest

from ott_backend.application.credential_gate import CredentialGate
from ott_backend.application.services.tokens import JwtTokenService
from ott_backend.domain.accounts.entities import Account
from ott_backend.domain.accounts.exceptions import (
    InvalidCredentialsError,
    MissingFieldsError,
    SecretTooLongError,
    UnauthenticatedError,
    UserAlreadyExistsError,
)
from ott_backend.domain.accounts.policies import HandlePolicy
from ott_backend.domain.accounts.repositories import AccountRepository, PasswordHasher

SECRET = "unit-test-secret-with-enough-bytes-for-hs256"


class InMemoryAccountRepository(AccountRepository):
    def __init__(self) -> None:
        self._accounts: dict[str, Account] = {}

    def find_by_handle(self, handle_key: str) -> Account | None:
        return self._accounts.get(handle_key)

    def find_by_id(self, account_id: str) -> Account | None:
        return next((a for a in self._accounts.values() if a.id == account_id), None)

    def add(self, account: Account) -> Account:
        if account.handle_key in self._accounts:
            raise UserAlreadyExistsError()
        self._accounts[account.handle_key] = account
        return account

    def list_all(self) -> list[Account]:
        return list(self._accounts.values())


class DeterministicHasher(PasswordHasher):
    def __init__(self) -> None:
        self.verify_calls = 0
        self.hash_calls = 0

    def hash(self, password: str) -> str:
        self.hash_calls += 1
        return f"hashed:{password}"

    def verify(self, password: str, hashed: str) -> bool:
        self.verify_calls += 1
        return hashed == f"hashed:{password}"


def make_gate(
    *,
    accounts: InMemoryAccountRepository | None = None,
    hasher: PasswordHasher | None = None,
    tokens: JwtTokenService | None = None,
    case_sensitive: bool = False,
) -> CredentialGate:
    return CredentialGate(
        accounts=accounts or InMemoryAccountRepository(),
        password_hasher=hasher or DeterministicHasher(),
        tokens=tokens or JwtTokenService(SECRET, ttl_seconds=3600),
        handle_policy=HandlePolicy(case_sensitive=case_sensitive),
    )


def test_register_stores_hash_not_plaintext() -> None:
    accounts = InMemoryAccountRepository()
    gate = make_gate(accounts=accounts)

    account = gate.register("alice", "s3cret!")

    stored = accounts.find_by_handle("alice")
    assert stored == account
    assert stored.password_hash == "hashed:s3cret!"
    assert stored.password_hash != "s3cret!"
    assert account.id


def test_register_then_login_returns_verifiable_token() -> None:
    tokens = JwtTokenService(SECRET, ttl_seconds=3600)
    gate = make_gate(tokens=tokens)
    account = gate.register("alice", "s3cret!")

    session = gate.login("alice", "s3cret!")

    claims = tokens.decode(session.token)
    assert claims.account_id == account.id
    assert claims.handle == "alice"
    assert session.account == account


def test_register_duplicate_handle_conflicts_regardless_of_password() -> None:
    gate = make_gate()
    gate.register("alice", "s3cret!")

    with pytest.raises(UserAlreadyExistsError) as exc_info:
        gate.register("alice", "completely-different")

    assert exc_info.value.status == 409


def test_case_insensitive_policy_treats_handles_as_equal() -> None:
    gate = make_gate()
    gate.register("Alice@Example.com", "s3cret!")

    with pytest.raises(UserAlreadyExistsError):
        gate.register("alice@example.com", "other")

    session = gate.login("ALICE@example.com", "s3cret!")
    assert session.account.handle == "Alice@Example.com"


def test_case_sensitive_policy_keeps_handles_distinct() -> None:
    gate = make_gate(case_sensitive=True)
    gate.register("Alice", "s3cret!")
    gate.register("alice", "s3cret!")

    with pytest.raises(InvalidCredentialsError):
        gate.login("ALICE", "s3cret!")


@pytest.mark.parametrize(
    ("handle", "password", "missing"),
    [
        (None, "pw", ["handle"]),
        ("   ", "pw", ["handle"]),
        ("alice", "", ["password"]),
        (None, None, ["handle", "password"]),
    ],
)
def test_register_missing_fields(handle, password, missing) -> None:
    gate = make_gate()

    with pytest.raises(MissingFieldsError) as exc_info:
        gate.register(handle, password)

    assert exc_info.value.status == 400
    assert exc_info.value.context == {"fields": missing}


def test_register_rejects_password_longer_than_bcrypt_input() -> None:
    gate = make_gate()

    with pytest.raises(SecretTooLongError):
        gate.register("alice", "x" * 73)


def test_login_failures_are_indistinguishable() -> None:
    hasher = DeterministicHasher()
    gate = make_gate(hasher=hasher)
    gate.register("alice", "s3cret!")

    with pytest.raises(InvalidCredentialsError) as wrong_password:
        gate.login("alice", "nope")
    with pytest.raises(InvalidCredentialsError) as unknown_handle:
        gate.login("bob", "s3cret!")

    assert wrong_password.value.to_dict() == unknown_handle.value.to_dict()
    assert wrong_password.value.status == unknown_handle.value.status == 401
    # The unknown handle still costs a hash comparison.
    assert hasher.verify_calls == 2


def test_unknown_handle_login_does_not_hash() -> None:
    hasher = DeterministicHasher()
    gate = make_gate(hasher=hasher)
    hashes_at_startup = hasher.hash_calls

    for _ in range(2):
        with pytest.raises(InvalidCredentialsError):
            gate.login("nobody", "s3cret!")

    assert hashes_at_startup == 1
    assert hasher.hash_calls == hashes_at_startup
    assert hasher.verify_calls == 2


def test_login_missing_fields() -> None:
    gate = make_gate()

    with pytest.raises(MissingFieldsError):
        gate.login("alice", None)


def test_validate_session_round_trips_identity() -> None:
    gate = make_gate()
    account = gate.register("alice", "s3cret!")
    session = gate.login("alice", "s3cret!")

    claims = gate.validate_session(f"Bearer {session.token}")

    assert claims.account_id == account.id
    assert claims.handle == "alice"


@pytest.mark.parametrize(
    "header",
    [None, "", "Bearer", "Bearer   ", "Basic dXNlcjpwYXNz", "Bearer not-a-jwt", "Token abc"],
)
def test_validate_session_rejects_missing_or_malformed(header) -> None:
    gate = make_gate()

    with pytest.raises(UnauthenticatedError) as exc_info:
        gate.validate_session(header)

    assert exc_info.value.to_dict() == {"error": "unauthorized", "message": "Unauthorized"}


def test_validate_session_rejects_expired_token() -> None:
    past = datetime.now(UTC) - timedelta(hours=2)
    issuer = JwtTokenService(SECRET, ttl_seconds=3600, clock=lambda: past)
    accounts = InMemoryAccountRepository()
    make_gate(accounts=accounts).register("alice", "s3cret!")
    expired = make_gate(accounts=accounts, tokens=issuer).login("alice", "s3cret!")

    gate = make_gate(accounts=accounts)
    with pytest.raises(UnauthenticatedError):
        gate.validate_session(f"Bearer {expired.token}")


def test_validate_session_rejects_token_signed_with_other_key() -> None:
    accounts = InMemoryAccountRepository()
    forger = make_gate(
        accounts=accounts, tokens=JwtTokenService("another-secret-with-enough-bytes-for-hs256")
    )
    forger.register("alice", "s3cret!")
    forged = forger.login("alice", "s3cret!")

    with pytest.raises(UnauthenticatedError):
        make_gate(accounts=accounts).validate_session(f"Bearer {forged.token}")
