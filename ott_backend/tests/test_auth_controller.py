from __future__ import annotations

import pytest
from flask.testing import FlaskClient

from ott_backend.app import create_app
from ott_backend.shared.config import AppConfig


def bearer(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


def _register(client: FlaskClient, handle: str = "alice", password: str = "s3cret!"):
    return client.post("/register", json={"handle": handle, "secret": password})


def _login(client: FlaskClient, handle: str = "alice", password: str = "s3cret!"):
    return client.post("/login", json={"handle": handle, "secret": password})


def test_register_login_profile_scenario(client: FlaskClient) -> None:
    register = _register(client)
    assert register.status_code == 201
    assert register.get_json()["message"] == "Registered successfully"

    login = _login(client)
    assert login.status_code == 200
    body = login.get_json()
    token = body["token"]
    assert body["user"]["handle"] == "alice"

    profile = client.get("/profile", headers=bearer(token))
    assert profile.status_code == 200
    assert profile.get_json()["user"] == {"id": body["user"]["id"], "handle": "alice"}

    anonymous = client.get("/profile")
    assert anonymous.status_code == 401
    assert anonymous.get_json()["error"] == "unauthorized"


def test_register_accepts_email_password_field_names(client: FlaskClient) -> None:
    response = client.post(
        "/register", json={"email": "bob@example.com", "password": "hunter22", "name": "Bob"}
    )
    assert response.status_code == 201

    login = client.post("/login", json={"email": "BOB@example.com", "password": "hunter22"})
    assert login.status_code == 200
    assert login.get_json()["user"]["handle"] == "bob@example.com"


@pytest.mark.parametrize(
    "payload",
    [{}, {"handle": "alice"}, {"secret": "s3cret!"}, {"handle": "", "secret": ""}],
)
def test_register_missing_fields_returns_400(client: FlaskClient, payload: dict) -> None:
    response = client.post("/register", json=payload)

    assert response.status_code == 400
    assert response.get_json()["error"] == "missing_fields"


def test_register_non_string_field_returns_400(client: FlaskClient) -> None:
    response = client.post("/register", json={"handle": 42, "secret": ["x"]})

    assert response.status_code == 400
    body = response.get_json()
    assert body["error"] == "validation_error"
    assert "handle" in body["context"]["fields"]


def test_register_duplicate_returns_409(client: FlaskClient) -> None:
    assert _register(client).status_code == 201

    response = _register(client, password="another-one")

    assert response.status_code == 409
    assert response.get_json()["error"] == "user_already_exists"


def test_login_failures_share_one_response(client: FlaskClient) -> None:
    _register(client)

    wrong_password = _login(client, password="wrong")
    unknown_handle = _login(client, handle="nobody")

    assert wrong_password.status_code == unknown_handle.status_code == 401
    assert wrong_password.get_json() == unknown_handle.get_json()
    assert wrong_password.get_json()["error"] == "invalid_credentials"


def test_login_missing_fields_returns_400(client: FlaskClient) -> None:
    response = client.post("/login", json={"handle": "alice"})

    assert response.status_code == 400


@pytest.mark.parametrize(
    "header",
    ["Bearer garbage", "Basic YWxpY2U6czNjcmV0IQ==", "Bearer "],
)
def test_profile_rejects_bad_authorization(client: FlaskClient, header: str) -> None:
    response = client.get("/profile", headers={"Authorization": header})

    assert response.status_code == 401
    assert response.get_json() == {"error": "unauthorized", "message": "Unauthorized"}


def test_token_response_does_not_leak_hash(client: FlaskClient) -> None:
    _register(client)
    body = _login(client).get_json()

    assert "password" not in str(body)
    assert "$2b$" not in str(body)


def test_routes_follow_configured_prefix(config_factory) -> None:
    config: AppConfig = config_factory(api_prefix="api/auth/")
    app = create_app(config)

    with app.test_client() as client:
        assert client.post("/api/auth/register", json={"username": "carol", "password": "pw"}).status_code == 201
        assert client.post("/register", json={"username": "carol", "password": "pw"}).status_code == 404
        login = client.post("/api/auth/login", json={"username": "carol", "password": "pw"})
        assert login.status_code == 200
        token = login.get_json()["token"]
        assert client.get("/api/auth/profile", headers=bearer(token)).status_code == 200


def test_health_and_security_headers(client: FlaskClient) -> None:
    response = client.get("/", headers={"X-Request-ID": "req-123"})

    assert response.status_code == 200
    body = response.get_json()
    assert body["ok"] is True
    assert body["service"] == "ott-backend"
    assert response.headers["X-Content-Type-Options"] == "nosniff"
    assert response.headers["X-Request-ID"] == "req-123"


def test_cors_allows_configured_origins(client: FlaskClient) -> None:
    allowed = client.get("/movies", headers={"Origin": "https://my-ott.vercel.app"})
    blocked = client.get("/movies", headers={"Origin": "https://evil.example.com"})

    assert allowed.headers.get("Access-Control-Allow-Origin") == "https://my-ott.vercel.app"
    assert "Access-Control-Allow-Origin" not in blocked.headers


def test_unknown_route_and_wrong_method_return_json(client: FlaskClient) -> None:
    missing = client.get("/nope")
    wrong_method = client.put("/login", json={})

    assert missing.status_code == 404
    assert missing.is_json
    assert missing.get_json() == {"error": "not_found"}
    assert wrong_method.status_code == 405
    assert wrong_method.get_json() == {"error": "method_not_allowed"}
    assert "POST" in wrong_method.headers["Allow"]
