# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify, request
from pydantic import ValidationError

from ott_backend.application.credential_gate import CredentialGate
from ott_backend.application.use_cases.catalog.add_movie import AddMovieUseCase
from ott_backend.application.use_cases.catalog.delete_movie import DeleteMovieUseCase
from ott_backend.application.use_cases.catalog.list_movies import ListMoviesUseCase
from ott_backend.interfaces.http.dto.catalog import MovieCreateDTO
from ott_backend.interfaces.http.session import current_claims, session_required
from ott_backend.shared.errors.validation import raise_validation_error
from ott_backend.shared.logging import logger


class CatalogController:
    def __init__(
        self,
        *,
        gate: CredentialGate,
        list_movies: ListMoviesUseCase,
        add_movie: AddMovieUseCase,
        delete_movie: DeleteMovieUseCase,
    ) -> None:
        self._gate = gate
        self._list_movies = list_movies
        self._add_movie = add_movie
        self._delete_movie = delete_movie

    def list_movies(self) -> Response:
        movies = self._list_movies.execute()
        return jsonify([movie.to_public() for movie in movies])

    def create(self) -> tuple[Response, int]:
        try:
            dto = MovieCreateDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        movie = self._add_movie.execute(dto.title, dto.poster)
        logger.info(f"movies.create: ok id={movie.id} by={current_claims().account_id}")
        return jsonify(movie.to_public()), 201

    def delete(self, movie_id: str) -> tuple[Response, int]:
        self._delete_movie.execute(movie_id)
        logger.info(f"movies.delete: ok id={movie_id} by={current_claims().account_id}")
        return jsonify({"ok": True}), 200

    def as_blueprint(self, url_prefix: str = "") -> Blueprint:
        protected = session_required(self._gate)
        bp = Blueprint("catalog", __name__, url_prefix=url_prefix or None)
        bp.add_url_rule("/movies", view_func=self.list_movies, methods=["GET"])
        bp.add_url_rule(
            "/movies", endpoint="create", view_func=protected(self.create), methods=["POST"]
        )
        bp.add_url_rule(
            "/movies/<movie_id>",
            endpoint="delete",
            view_func=protected(self.delete),
            methods=["DELETE"],
        )
        return bp
