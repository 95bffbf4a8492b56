# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from ott_backend.domain.catalog.entities import Movie
from ott_backend.domain.catalog.repositories import MovieRepository


class ListMoviesUseCase:
    def __init__(self, *, movies: MovieRepository) -> None:
        self._movies = movies

    def execute(self) -> list[Movie]:
        return list(self._movies.list_all())
