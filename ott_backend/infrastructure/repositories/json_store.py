# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Flat-file JSON persistence.

One document, ``{"users": [...], "movies": [...]}``, read and rewritten as a
whole. Every read-modify-write cycle holds a process-wide lock and the file
is replaced atomically, so concurrent requests in one process cannot lose
each other's writes or register the same handle twice. Multiple processes
sharing one file are not coordinated; use the SQL backend for that.
"""

from __future__ import annotations

import threading
from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

from ott_backend.domain.accounts.entities import Account
from ott_backend.domain.accounts.exceptions import UserAlreadyExistsError
from ott_backend.domain.accounts.policies import HandlePolicy
from ott_backend.domain.accounts.repositories import AccountRepository
from ott_backend.domain.catalog.entities import Movie
from ott_backend.domain.catalog.repositories import MovieRepository
from ott_backend.shared.errors import StorageError
from ott_backend.shared.logging import logger
from ott_backend.utils.fs import read_json, write_json_atomic

Document = dict[str, list[dict[str, Any]]]

_COLLECTIONS = ("users", "movies")


def _empty_document() -> Document:
    return {name: [] for name in _COLLECTIONS}


def _parse_timestamp(value: Any) -> datetime:
    if isinstance(value, str):
        try:
            parsed = datetime.fromisoformat(value)
        except ValueError:
            parsed = None
        if parsed is not None:
            return parsed if parsed.tzinfo else parsed.replace(tzinfo=UTC)
    return datetime.fromtimestamp(0, UTC)


class JsonDocumentStore:
    def __init__(self, path: Path) -> None:
        self._path = Path(path)
        self._lock = threading.RLock()

    @property
    def path(self) -> Path:
        return self._path

    def _load(self) -> Document:
        try:
            if not self._path.exists():
                write_json_atomic(self._path, _empty_document())
                logger.info(f"json_store: created {self._path}")
            data = read_json(self._path)
        except (OSError, ValueError) as exc:
            logger.exception(f"json_store: failed to read {self._path}")
            raise StorageError() from exc

        if not isinstance(data, dict):
            logger.error(f"json_store: {self._path} does not hold a JSON object")
            raise StorageError()
        for name in _COLLECTIONS:
            items = data.get(name)
            data[name] = [item for item in items if isinstance(item, dict)] if isinstance(items, list) else []
        return data

    def _save(self, data: Document) -> None:
        try:
            write_json_atomic(self._path, data)
        except (OSError, TypeError, ValueError) as exc:
            logger.exception(f"json_store: failed to write {self._path}")
            raise StorageError() from exc

    def read(self, collection: str) -> list[dict[str, Any]]:
        with self._lock:
            return list(self._load()[collection])

    @contextmanager
    def transaction(self) -> Iterator[Document]:
        """Yield the whole document; it is written back only if the block succeeds."""
        with self._lock:
            data = self._load()
            yield data
            self._save(data)


def _record_handle(record: dict[str, Any]) -> str:
    # Records written by the earlier server carry ``email`` and ``password`` only.
    return str(record.get("handle") or record.get("email") or record.get("username") or "")


def _account_from_record(record: dict[str, Any], handle_key: str) -> Account:
    return Account(
        id=str(record["id"]),
        handle=_record_handle(record),
        handle_key=handle_key,
        password_hash=str(record.get("password_hash") or record.get("password") or ""),
        created_at=_parse_timestamp(record.get("created_at")),
        display_name=record.get("display_name") or record.get("name"),
    )


def _account_to_record(account: Account) -> dict[str, Any]:
    return {
        "id": account.id,
        "handle": account.handle,
        "handle_key": account.handle_key,
        "password_hash": account.password_hash,
        "display_name": account.display_name,
        "created_at": account.created_at.isoformat(),
    }


class JsonAccountRepository(AccountRepository):
    def __init__(self, store: JsonDocumentStore, handle_policy: HandlePolicy | None = None) -> None:
        self._store = store
        self._handle_policy = handle_policy or HandlePolicy()

    def _key(self, record: dict[str, Any]) -> str:
        return record.get("handle_key") or self._handle_policy.normalize(_record_handle(record))

    def _accounts(self, records: list[dict[str, Any]]) -> Iterator[Account]:
        for record in records:
            key = self._key(record)
            if key and "id" in record:
                yield _account_from_record(record, key)

    def find_by_handle(self, handle_key: str) -> Account | None:
        for account in self._accounts(self._store.read("users")):
            if account.handle_key == handle_key:
                return account
        return None

    def find_by_id(self, account_id: str) -> Account | None:
        for account in self._accounts(self._store.read("users")):
            if account.id == account_id:
                return account
        return None

    def add(self, account: Account) -> Account:
        with self._store.transaction() as data:
            if any(self._key(rec) == account.handle_key for rec in data["users"]):
                raise UserAlreadyExistsError()
            data["users"].append(_account_to_record(account))
        return account

    def list_all(self) -> Sequence[Account]:
        return list(self._accounts(self._store.read("users")))


class JsonMovieRepository(MovieRepository):
    def __init__(self, store: JsonDocumentStore) -> None:
        self._store = store

    def list_all(self) -> Sequence[Movie]:
        return [
            Movie(
                id=str(rec["id"]),
                title=str(rec.get("title", "")),
                poster=str(rec.get("poster") or ""),
                created_at=_parse_timestamp(rec.get("created_at")),
            )
            for rec in self._store.read("movies")
            if "id" in rec
        ]

    def add(self, movie: Movie) -> Movie:
        with self._store.transaction() as data:
            data["movies"].append(
                {
                    "id": movie.id,
                    "title": movie.title,
                    "poster": movie.poster,
                    "created_at": movie.created_at.isoformat(),
                }
            )
        return movie

    def delete(self, movie_id: str) -> bool:
        with self._store.transaction() as data:
            before = len(data["movies"])
            data["movies"] = [rec for rec in data["movies"] if str(rec.get("id")) != movie_id]
            return len(data["movies"]) != before
