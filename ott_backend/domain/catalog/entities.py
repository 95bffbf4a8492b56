# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any


@dataclass(slots=True, frozen=True)
class Movie:

    id: str
    title: str
    poster: str
    created_at: datetime

    def to_public(self) -> dict[str, Any]:
        return {"id": self.id, "title": self.title, "poster": self.poster}
