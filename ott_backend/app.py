# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Flask, Response
from flask_cors import CORS

from ott_backend.infrastructure.container import Container
from ott_backend.shared.config import AppConfig, load_config
from ott_backend.shared.logging import logger, setup_logging
from ott_backend.shared.middleware.error_handler import configure_error_handling
from ott_backend.shared.middleware.request_logger import configure_request_logging

CONTAINER_EXTENSION = "ott_backend.container"


def create_app(config: AppConfig | None = None) -> Flask:
    config = config or load_config()
    setup_logging("DEBUG" if config.debug_logging else None)

    container = Container(config)
    container.init_storage()

    app = Flask(__name__)
    app.json.sort_keys = False
    configure_error_handling(app, debug_mode=config.debug_logging)
    configure_request_logging(app, debug_mode=config.debug_logging)

    CORS(
        app,
        resources={r"/*": {"origins": config.security.allowed_origins}},
        supports_credentials="*" not in config.security.allowed_origins,
    )

    app.extensions[CONTAINER_EXTENSION] = container
    app.register_blueprint(container.misc_controller.as_blueprint())
    app.register_blueprint(container.auth_controller.as_blueprint(config.api_prefix))
    app.register_blueprint(container.catalog_controller.as_blueprint(config.api_prefix))

    @app.after_request
    def _add_security_headers(resp: Response) -> Response:
        resp.headers.setdefault("X-Frame-Options", "DENY")
        resp.headers.setdefault("Referrer-Policy", "no-referrer")
        resp.headers.setdefault("X-Content-Type-Options", "nosniff")
        resp.headers.setdefault("Cache-Control", "no-store")
        if config.security.enable_hsts:
            resp.headers.setdefault(
                "Strict-Transport-Security",
                "max-age=31536000; includeSubDomains",
            )
        return resp

    logger.info(
        f"Flask app initialized (env={config.app_env}, prefix={config.api_prefix or '/'})"
    )
    return app


def main() -> None:
    config = load_config()
    app = create_app(config)
    logger.info(f"Server listening on {config.port}")
    app.run(host="0.0.0.0", port=config.port)


if __name__ == "__main__":
    main()
