# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from ott_backend.shared.errors.base import NotFoundError, ValidationError


class TitleRequiredError(ValidationError):
    default_code = "title_required"
    default_message = "title required"


class MovieNotFoundError(NotFoundError):
    default_code = "movie_not_found"

    def __init__(self, movie_id: str) -> None:
        super().__init__(context={"movie_id": movie_id})
