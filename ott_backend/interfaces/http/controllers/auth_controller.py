# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify, request
from pydantic import ValidationError

from ott_backend.application.credential_gate import CredentialGate
from ott_backend.domain.accounts.exceptions import InvalidCredentialsError
from ott_backend.interfaces.http.dto.auth import (
    AccountDTO,
    LoginRequestDTO,
    LoginResponseDTO,
    ProfileResponseDTO,
    RegisterRequestDTO,
    RegisterResponseDTO,
)
from ott_backend.interfaces.http.session import current_claims, session_required
from ott_backend.shared.errors.validation import raise_validation_error
from ott_backend.shared.logging import logger


def _get_client_ip() -> str | None:
    ip_address = request.headers.get("X-Forwarded-For", request.remote_addr)
    if ip_address and "," in ip_address:
        ip_address = ip_address.split(",")[0].strip()
    return ip_address


class AuthController:
    def __init__(self, *, gate: CredentialGate) -> None:
        self._gate = gate

    def register(self) -> tuple[Response, int]:
        try:
            dto = RegisterRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        account = self._gate.register(dto.handle, dto.password, dto.display_name)

        payload = RegisterResponseDTO(user=AccountDTO.from_account(account)).model_dump()
        logger.info(f"auth.register: ok account_id={account.id} ip={_get_client_ip()}")
        return jsonify(payload), 201

    def login(self) -> tuple[Response, int]:
        try:
            dto = LoginRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        try:
            session = self._gate.login(dto.handle, dto.password)
        except InvalidCredentialsError:
            logger.warning(f"auth.login: invalid credentials from {_get_client_ip()}")
            raise

        payload = LoginResponseDTO(
            token=session.token, user=AccountDTO.from_account(session.account)
        ).model_dump()
        logger.info(
            f"auth.login: ok account_id={session.account.id} "
            f"exp={session.expires_at.isoformat()}"
        )
        return jsonify(payload), 200

    def profile(self) -> tuple[Response, int]:
        claims = current_claims()
        payload = ProfileResponseDTO(
            user=AccountDTO(id=claims.account_id, handle=claims.handle)
        ).model_dump()
        return jsonify(payload), 200

    def as_blueprint(self, url_prefix: str = "") -> Blueprint:
        bp = Blueprint("auth", __name__, url_prefix=url_prefix or None)
        bp.add_url_rule("/register", view_func=self.register, methods=["POST"])
        bp.add_url_rule("/login", view_func=self.login, methods=["POST"])
        bp.add_url_rule(
            "/profile",
            endpoint="profile",
            view_func=session_required(self._gate)(self.profile),
            methods=["GET"],
        )
        return bp
