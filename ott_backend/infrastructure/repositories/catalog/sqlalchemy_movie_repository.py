# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence

from ott_backend.domain.catalog.entities import Movie
from ott_backend.domain.catalog.repositories import MovieRepository
from ott_backend.infrastructure.db.models import MovieRow
from ott_backend.infrastructure.repositories.sqlalchemy_common import SessionScope, as_utc


class SqlAlchemyMovieRepository(MovieRepository):
    def __init__(self, session_scope: SessionScope) -> None:
        self._session_scope = session_scope

    def list_all(self) -> Sequence[Movie]:
        with self._session_scope() as session:
            rows = session.query(MovieRow).order_by(MovieRow.seq.asc()).all()
            return [
                Movie(
                    id=row.id,
                    title=row.title,
                    poster=row.poster or "",
                    created_at=as_utc(row.created_at),
                )
                for row in rows
            ]

    def add(self, movie: Movie) -> Movie:
        with self._session_scope() as session:
            session.add(
                MovieRow(
                    id=movie.id,
                    title=movie.title,
                    poster=movie.poster,
                    created_at=movie.created_at,
                )
            )
        return movie

    def delete(self, movie_id: str) -> bool:
        with self._session_scope() as session:
            deleted = session.query(MovieRow).filter(MovieRow.id == movie_id).delete()
            return bool(deleted)
