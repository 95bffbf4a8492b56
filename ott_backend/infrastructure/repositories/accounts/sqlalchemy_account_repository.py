# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.exc import IntegrityError

from ott_backend.domain.accounts.entities import Account
from ott_backend.domain.accounts.exceptions import UserAlreadyExistsError
from ott_backend.domain.accounts.repositories import AccountRepository
from ott_backend.infrastructure.db.models import AccountRow
from ott_backend.infrastructure.repositories.sqlalchemy_common import SessionScope, as_utc
from ott_backend.shared.logging import logger


def _to_domain(row: AccountRow) -> Account:
    return Account(
        id=row.id,
        handle=row.handle,
        handle_key=row.handle_key,
        password_hash=row.password_hash,
        created_at=as_utc(row.created_at),
        display_name=row.display_name,
    )


class SqlAlchemyAccountRepository(AccountRepository):
    def __init__(self, session_scope: SessionScope) -> None:
        self._session_scope = session_scope

    def find_by_handle(self, handle_key: str) -> Account | None:
        with self._session_scope() as session:
            row = session.query(AccountRow).filter(AccountRow.handle_key == handle_key).first()
            return _to_domain(row) if row else None

    def find_by_id(self, account_id: str) -> Account | None:
        with self._session_scope() as session:
            row = session.query(AccountRow).filter(AccountRow.id == account_id).first()
            return _to_domain(row) if row else None

    def add(self, account: Account) -> Account:
        try:
            with self._session_scope() as session:
                session.add(
                    AccountRow(
                        id=account.id,
                        handle=account.handle,
                        handle_key=account.handle_key,
                        password_hash=account.password_hash,
                        display_name=account.display_name,
                        created_at=account.created_at,
                    )
                )
        except IntegrityError as exc:
            logger.info("accounts.add: unique constraint rejected duplicate handle")
            raise UserAlreadyExistsError() from exc
        return account

    def list_all(self) -> Sequence[Account]:
        with self._session_scope() as session:
            rows = session.query(AccountRow).order_by(AccountRow.seq.asc()).all()
            return [_to_domain(row) for row in rows]
