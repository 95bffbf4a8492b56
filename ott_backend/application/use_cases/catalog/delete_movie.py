# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Use-case for removing a catalog entry."""

from __future__ import annotations

from ott_backend.domain.catalog.exceptions import MovieNotFoundError
from ott_backend.domain.catalog.repositories import MovieRepository


class DeleteMovieUseCase:
    def __init__(self, *, movies: MovieRepository) -> None:
        self._movies = movies

    def execute(self, movie_id: str) -> None:
        if not self._movies.delete(movie_id):
            raise MovieNotFoundError(movie_id)
