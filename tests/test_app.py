import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from orderdesk.config import Settings
from orderdesk.db import Database, mask_database_url
from orderdesk.main import create_app


def _app_with_failing_routes(environment: str, database):
    settings = Settings(environment=environment, database_url="sqlite://", jwt_secret="s", bcrypt_rounds=4)
    app = create_app(settings, database)

    @app.get("/boom")
    def boom():
        raise RuntimeError("segredo interno")

    @app.get("/db-boom")
    def db_boom():
        raise OperationalError("SELECT 1", {}, Exception("conexão perdida"))

    return TestClient(app, raise_server_exceptions=False)


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "ok"
    assert body["db_ok"] is True
    assert body["version"]


def test_security_headers(client):
    response = client.get("/health")
    assert response.headers["x-content-type-options"] == "nosniff"
    assert response.headers["x-frame-options"] == "DENY"
    assert "strict-transport-security" in response.headers


def test_unexpected_error_hides_detail_outside_development(database):
    client = _app_with_failing_routes("production", database)

    for path in ("/boom", "/db-boom"):
        response = client.get(path)
        assert response.status_code == 500
        assert response.json() == {"detail": "Internal server error"}


def test_unexpected_error_shows_detail_in_development(database):
    client = _app_with_failing_routes("development", database)

    response = client.get("/boom")
    assert response.status_code == 500
    assert response.json()["detail"] == "segredo interno"


def test_lifespan_checks_database(settings, database):
    with TestClient(create_app(settings, database)) as client:
        assert client.get("/health").json()["db_ok"] is True


@pytest.mark.parametrize("url,expected", [
    ("postgresql+psycopg://user:senha@db:5432/orders", "postgresql+psycopg://user:***@db:5432/orders"),
    ("sqlite:///./orderdesk.db", "sqlite:///./orderdesk.db"),
])
def test_mask_database_url(url, expected):
    assert mask_database_url(url) == expected


def test_database_check_connection(settings):
    database = Database(settings)
    database.create_all()
    assert database.check_connection() is True
    database.dispose()
