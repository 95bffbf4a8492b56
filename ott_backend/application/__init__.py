# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .credential_gate import CredentialGate

__all__ = ["CredentialGate"]
