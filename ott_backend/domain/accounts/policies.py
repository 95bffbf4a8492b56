# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class HandlePolicy:
    """How login handles are compared for uniqueness and lookup.

    Handles are stored as submitted (minus surrounding whitespace); the
    normalized key is what the store indexes. With ``case_sensitive=False``
    ``Alice@Example.com`` and ``alice@example.com`` are the same account.
    """

    case_sensitive: bool = False

    def normalize(self, handle: str) -> str:
        value = handle.strip()
        if self.case_sensitive:
            return value
        return value.casefold()
