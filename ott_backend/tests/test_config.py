from __future__ import annotations

import pytest

from ott_backend.shared.config import AppConfig, AuthConfig, SecurityConfig


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("PORT", "TOKEN_TTL_SECONDS", "BCRYPT_ROUNDS", "HANDLE_CASE_SENSITIVE", "API_PREFIX"):
        monkeypatch.delenv(name, raising=False)

    config = AppConfig()

    assert config.port == 8080
    assert config.api_prefix == ""
    assert config.auth.token_ttl_seconds == 7 * 24 * 3600
    assert config.auth.bcrypt_rounds == 10
    assert config.auth.handle_case_sensitive is False


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ALLOWED_ORIGINS", "https://a.example.com, https://b.example.com")
    monkeypatch.setenv("HANDLE_CASE_SENSITIVE", "yes")
    monkeypatch.setenv("TOKEN_TTL_SECONDS", "3600")

    assert SecurityConfig().allowed_origins == ["https://a.example.com", "https://b.example.com"]
    auth = AuthConfig()
    assert auth.handle_case_sensitive is True
    assert auth.token_ttl_seconds == 3600


def test_api_prefix_is_normalized() -> None:
    assert AppConfig(api_prefix="api/").api_prefix == "/api"
    assert AppConfig(api_prefix="/api/auth").api_prefix == "/api/auth"


def test_production_refuses_default_secret() -> None:
    with pytest.raises(SystemExit):
        AppConfig(app_env="production", auth=AuthConfig(jwt_secret="super-secret-change-this"))


def test_production_accepts_strong_secret() -> None:
    config = AppConfig(
        app_env="production",
        auth=AuthConfig(jwt_secret="a-real-random-secret-value-for-production-use"),
        security=SecurityConfig(allowed_origins=["https://app.example.com"], enable_hsts=True),
    )

    assert config.is_production()
