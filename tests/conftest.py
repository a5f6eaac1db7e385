from __future__ import annotations

import os
from typing import Any, Callable

import pytest
from fastapi.testclient import TestClient


def pytest_configure() -> None:
    # Ensure the SQLAlchemy engine is created against sqlite for tests.
    os.environ["ORM_DB_URL"] = "sqlite:///./test.db"
    os.environ["ORM_USE_MYSQL"] = "false"
    os.environ["ENVIRONMENT"] = "test"
    os.environ["GITHUB_TOKEN"] = "test-github-token"
    os.environ["CASCADE_DELETE_POSTS"] = "true"


@pytest.fixture()
def client() -> Any:
    from app.database import Base, engine
    from app.main import create_app

    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)

    app = create_app()
    with TestClient(app) as c:
        yield c


@pytest.fixture()
def register(client) -> Callable[..., dict[str, str]]:
    """Register a user and return bearer auth headers for it."""

    def _register(email: str, name: str = "Test User", password: str = "SecretPass123") -> dict[str, str]:
        r = client.post("/auth/register", json={"name": name, "email": email, "password": password})
        assert r.status_code == 201, r.text
        return {"Authorization": f"Bearer {r.json()['access_token']}"}

    return _register
