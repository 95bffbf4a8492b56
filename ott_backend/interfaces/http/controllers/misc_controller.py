# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime

from flask import Blueprint, jsonify

from ott_backend.shared.logging import logger


class MiscController:
    def __init__(self, *, service_name: str, storage_check: Callable[[], bool]) -> None:
        self._service_name = service_name
        self._storage_check = storage_check

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("misc", __name__)
        bp.add_url_rule("/", view_func=self.index, methods=["GET"])
        bp.add_url_rule("/health", view_func=self.health, methods=["GET"])
        return bp

    def index(self):
        return jsonify(
            {
                "ok": True,
                "service": self._service_name,
                "time": datetime.now(UTC).isoformat(),
            }
        )

    def health(self):
        status: dict[str, object] = {"ok": True}
        try:
            self._storage_check()
            status["storage"] = "ok"
        except Exception as exc:
            logger.error(f"health: storage check failed ({type(exc).__name__})")
            status["ok"] = False
            status["storage"] = "error"
            return jsonify(status), 503
        return jsonify(status), 200
