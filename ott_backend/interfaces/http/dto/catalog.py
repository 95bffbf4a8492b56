# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class MovieCreateDTO(BaseModel):
    model_config = ConfigDict(extra="ignore")

    title: str | None = Field(None, max_length=512)
    poster: str | None = Field(None, max_length=2048)
