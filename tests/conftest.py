"""Shared fixtures: a throwaway SQLite database and an API client."""

from __future__ import annotations

import os
import sys
import tempfile
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

TEST_DB_PATH = Path(tempfile.gettempdir()) / "schoolhub_notices_test.db"
os.environ["DATABASE_URL"] = f"sqlite:///{TEST_DB_PATH}"
os.environ["SECRET_KEY"] = "test-secret"
os.environ["ACCESS_TOKEN_EXPIRE_MINUTES"] = "30"
os.environ["PASSWORD_HASH_ROUNDS"] = "1000"
os.environ["APP_TIMEZONE"] = "UTC"

from app.config import reset_settings_cache  # noqa: E402

reset_settings_cache()

from app.application.use_cases.groups import create_group  # noqa: E402
from app.application.use_cases.users import create_user  # noqa: E402
from app.domain.entities import ADMIN_ROLE_ALIAS, USER_ROLE_ALIAS  # noqa: E402
from app.infrastructure.database import (  # noqa: E402
    Base,
    SessionLocal,
    engine,
    initialize_database,
)

DEFAULT_PASSWORD = "Secret123"


@pytest.fixture(autouse=True)
def reset_database():
    """Ensure every test starts from empty tables with the default roles."""

    Base.metadata.drop_all(bind=engine)
    initialize_database()
    yield
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture()
def session():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture()
def make_user(session):
    """Factory creating users with unique emails."""

    counter = {"value": 0}

    def _make_user(first_name: str = "Test", *, admin: bool = False, password: str = DEFAULT_PASSWORD):
        counter["value"] += 1
        return create_user(
            session,
            first_name=first_name,
            last_name=f"User{counter['value']}",
            email=f"{first_name.lower()}{counter['value']}@school.edu",
            password=password,
            role_alias=ADMIN_ROLE_ALIAS if admin else USER_ROLE_ALIAS,
        )

    return _make_user


@pytest.fixture()
def make_group(session):
    def _make_group(name: str, members):
        return create_group(session, name=name, member_ids=[member.id for member in members])

    return _make_group


@pytest.fixture()
def client():
    pytest.importorskip("httpx")
    from fastapi.testclient import TestClient

    from main import create_app

    with TestClient(create_app()) as test_client:
        yield test_client


@pytest.fixture()
def auth_headers(client):
    """Return a function that logs a user in and builds the bearer header."""

    def _auth_headers(user, password: str = DEFAULT_PASSWORD) -> dict[str, str]:
        response = client.post(
            "/auth/token",
            data={"username": user.email, "password": password},
        )
        assert response.status_code == 200, response.text
        return {"Authorization": f"Bearer {response.json()['access_token']}"}

    return _auth_headers
