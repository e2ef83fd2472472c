"""Smoke tests - API 기본 동작 확인"""


def test_health(client):
    """헬스체크"""
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"status": "ok"}


def test_login_fail(client):
    """잘못된 로그인"""
    r = client.post("/api/login", json={"email": "x@example.com", "password": "y"})
    assert r.status_code == 401
    assert r.json() == {"error": "Invalid credentials"}


def test_dashboards_unauth(client):
    """인증 없이 대시보드"""
    for path in ("/api/admin/dashboard", "/api/driver/dashboard", "/api/customer/dashboard"):
        r = client.get(path)
        assert r.status_code == 401
        assert r.json() == {"error": "Unauthorized"}


def test_unknown_path_is_json_error(client):
    r = client.get("/api/nope")
    assert r.status_code == 404
    assert "error" in r.json()


def test_cors_allows_listed_and_platform_origins(client):
    r = client.get("/health", headers={"Origin": "http://localhost:5173"})
    assert r.headers["access-control-allow-origin"] == "http://localhost:5173"
    assert r.headers["access-control-allow-credentials"] == "true"

    r = client.get("/health", headers={"Origin": "https://water-x75b.onrender.com"})
    assert r.headers["access-control-allow-origin"] == "https://water-x75b.onrender.com"


def test_cors_rejects_other_origins(client):
    r = client.get("/health", headers={"Origin": "https://evil.example.com"})
    assert "access-control-allow-origin" not in r.headers
