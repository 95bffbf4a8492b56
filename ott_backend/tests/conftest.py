from __future__ import annotations

import os
import tempfile

os.environ.setdefault(
    "LOG_FILE", os.path.join(tempfile.mkdtemp(prefix="ott-backend-logs-"), "app.log")
)

from collections.abc import Iterator  # noqa: E402
from pathlib import Path  # noqa: E402

import pytest  # noqa: E402
from flask import Flask  # noqa: E402
from flask.testing import FlaskClient  # noqa: E402

from ott_backend.app import create_app  # noqa: E402
from ott_backend.shared.config import (  # noqa: E402
    AppConfig,
    AuthConfig,
    DatabaseConfig,
    StorageConfig,
)

TEST_JWT_SECRET = "test-jwt-secret-with-enough-bytes-for-hs256"


def make_config(tmp_path: Path, *, backend: str = "json", **overrides) -> AppConfig:
    auth_overrides = overrides.pop("auth", {})
    return AppConfig(
        app_env="test",
        storage=StorageConfig(backend=backend, json_db_path=tmp_path / "db.json"),
        database=DatabaseConfig(url="sqlite://"),
        auth=AuthConfig(jwt_secret=TEST_JWT_SECRET, bcrypt_rounds=4, **auth_overrides),
        **overrides,
    )


@pytest.fixture()
def app_config(tmp_path: Path) -> AppConfig:
    return make_config(tmp_path)


@pytest.fixture()
def flask_app(app_config: AppConfig) -> Flask:
    return create_app(app_config)


@pytest.fixture()
def client(flask_app: Flask) -> Iterator[FlaskClient]:
    with flask_app.test_client() as test_client:
        yield test_client


@pytest.fixture()
def config_factory(tmp_path: Path):
    def _make(**overrides) -> AppConfig:
        return make_config(tmp_path, **overrides)

    return _make
