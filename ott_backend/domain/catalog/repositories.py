# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from .entities import Movie


class MovieRepository(Protocol):
    def list_all(self) -> Sequence[Movie]: ...
    def add(self, movie: Movie) -> Movie: ...
    def delete(self, movie_id: str) -> bool: ...
