# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import uuid
from datetime import UTC, datetime

from ott_backend.domain.catalog.entities import Movie
from ott_backend.domain.catalog.exceptions import TitleRequiredError
from ott_backend.domain.catalog.repositories import MovieRepository


class AddMovieUseCase:
    def __init__(self, *, movies: MovieRepository) -> None:
        self._movies = movies

    def execute(self, title: str | None, poster: str | None = None) -> Movie:
        title = (title or "").strip()
        if not title:
            raise TitleRequiredError()
        movie = Movie(
            id=uuid.uuid4().hex,
            title=title,
            poster=(poster or "").strip(),
            created_at=datetime.now(UTC),
        )
        return self._movies.add(movie)
