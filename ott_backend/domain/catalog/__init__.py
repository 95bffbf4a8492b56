# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .entities import Movie
from .exceptions import MovieNotFoundError, TitleRequiredError
from .repositories import MovieRepository

__all__ = ["Movie", "MovieNotFoundError", "MovieRepository", "TitleRequiredError"]
