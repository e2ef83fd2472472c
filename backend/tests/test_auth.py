"""로그인, 토큰 검증, 역할 가드"""
from datetime import datetime, timedelta, timezone

import pytest
from jose import jwt

from conftest import ADMIN, CUSTOMER, DRIVER, bearer, login
from mineralwater.config import Settings
from mineralwater.core.security import create_access_token, decode_access_token
from mineralwater.errors import Unauthorized


@pytest.mark.parametrize("creds,role", [(ADMIN, "admin"), (DRIVER, "driver"), (CUSTOMER, "customer")])
def test_login_token_carries_stored_role(client, settings, creds, role):
    body = login(client, *creds)
    assert body["user"]["role"] == role
    assert body["user"]["email"] == creds[0]
    assert set(body["user"]) == {"id", "name", "email", "role"}
    claims = decode_access_token(settings, body["token"])
    assert claims["role"] == role
    assert claims["email"] == creds[0]
    assert claims["id"] == body["user"]["id"]


def test_token_expires_after_seven_days(client, settings):
    token = login(client, *ADMIN)["token"]
    claims = jwt.get_unverified_claims(token)
    assert claims["exp"] - claims["iat"] == 7 * 24 * 3600


def test_unknown_email_and_wrong_password_look_the_same(client):
    a = client.post("/api/login", json={"email": "nobody@example.com", "password": "adminpass"})
    b = client.post("/api/login", json={"email": "admin@example.com", "password": "wrong"})
    assert a.status_code == b.status_code == 401
    assert a.json() == b.json() == {"error": "Invalid credentials"}
    assert "token" not in a.json()


def test_login_requires_email_and_password(client):
    r = client.post("/api/login", json={"email": "admin@example.com"})
    assert r.status_code == 400
    assert r.json() == {"error": "Email and password required"}


def test_invalid_token_is_distinguished_from_missing(client):
    r = client.get("/api/admin/dashboard", headers=bearer("not-a-jwt"))
    assert r.status_code == 401
    assert r.json() == {"error": "Invalid token"}

    r = client.get("/api/admin/dashboard", headers={"Authorization": "Token abc"})
    assert r.status_code == 401
    assert r.json() == {"error": "Invalid token"}


def test_expired_token_rejected(client, settings):
    expired = Settings(database_url="sqlite://", secret_key=settings.secret_key, token_expire_days=-1)
    token = create_access_token(expired, 1, "admin", "admin@example.com")
    r = client.get("/api/admin/dashboard", headers=bearer(token))
    assert r.status_code == 401
    assert r.json() == {"error": "Invalid token"}


def test_token_signed_with_other_secret_rejected(client):
    other = Settings(database_url="sqlite://", secret_key="rotated-secret")
    token = create_access_token(other, 1, "admin", "admin@example.com")
    r = client.get("/api/admin/dashboard", headers=bearer(token))
    assert r.status_code == 401


def test_token_without_identity_claims_rejected(settings):
    now = datetime.now(timezone.utc)
    token = jwt.encode({"sub": "1", "exp": now + timedelta(hours=1)}, settings.secret_key, algorithm="HS256")
    with pytest.raises(Unauthorized):
        decode_access_token(settings, token)


def test_driver_token_fails_admin_and_customer_routes(client, driver_headers):
    for path in ("/api/admin/dashboard", "/api/customer/dashboard"):
        r = client.get(path, headers=driver_headers)
        assert r.status_code == 403
        assert r.json() == {"error": "Forbidden"}
    r = client.post("/api/customer/complaint", json={"message": "hi"}, headers=driver_headers)
    assert r.status_code == 403
    assert client.get("/api/driver/dashboard", headers=driver_headers).status_code == 200


def test_admin_has_no_implicit_access_to_driver_routes(client, admin_headers):
    r = client.get("/api/driver/dashboard", headers=admin_headers)
    assert r.status_code == 403


def test_me_returns_profile(client, driver_headers):
    r = client.get("/api/me", headers=driver_headers)
    assert r.status_code == 200
    body = r.json()
    assert body["email"] == "driver@example.com"
    assert body["role"] == "driver"
    assert "password_hash" not in body
