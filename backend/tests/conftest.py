"""공용 픽스처 - 테스트마다 새 인메모리 SQLite + 데모 데이터"""
import pytest
from fastapi.testclient import TestClient

from mineralwater.config import Settings
from mineralwater.main import create_app

ADMIN = ("admin@example.com", "adminpass")
DRIVER = ("driver@example.com", "driverpass")
CUSTOMER = ("customer@example.com", "customerpass")


@pytest.fixture
def settings():
    return Settings(
        database_url="sqlite://",
        secret_key="test-secret",
        auto_create_schema=True,
        auto_seed=True,
        log_level="WARNING",
    )


@pytest.fixture
def client(settings):
    with TestClient(create_app(settings)) as c:
        yield c


@pytest.fixture
def db(client):
    """앱과 같은 DB에 붙는 세션 - 쓰기 후 바로 commit 할 것"""
    session = client.app.state.database.session()
    try:
        yield session
    finally:
        session.close()


def login(client, email, password):
    r = client.post("/api/login", json={"email": email, "password": password})
    assert r.status_code == 200, r.text
    return r.json()


def bearer(token):
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def admin_headers(client):
    return bearer(login(client, *ADMIN)["token"])


@pytest.fixture
def driver_headers(client):
    return bearer(login(client, *DRIVER)["token"])


@pytest.fixture
def customer_headers(client):
    return bearer(login(client, *CUSTOMER)["token"])
