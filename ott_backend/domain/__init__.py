# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .accounts import Account, HandlePolicy, SessionClaims
from .catalog import Movie

__all__ = [
    "Account",
    "HandlePolicy",
    "Movie",
    "SessionClaims",
]
