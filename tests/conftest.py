"""Shared pytest fixtures for the application tests."""

from __future__ import annotations

import os

# Settings are read at import time; configure the test environment first.
os.environ.update(
    {
        "DATABASE_URL": "sqlite://",
        "JWT_SECRET": "test-access-secret",
        "JWT_REFRESH_SECRET": "test-refresh-secret",
        "JWT_EXPIRATION": "15m",
        "JWT_REFRESH_EXPIRATION": "7d",
        "BCRYPT_COST": "4",
        "LOG_LEVEL": "WARNING",
    }
)

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlmodel import Session, SQLModel  # noqa: E402

from app.core.security import hash_password  # noqa: E402
from app.database import create_db_and_tables, engine  # noqa: E402
from app.main import app  # noqa: E402
from app.models.user import User  # noqa: E402

API = "/api/v1"
DEFAULT_PASSWORD = "longenough1"


@pytest.fixture(autouse=True)
def _tables():
    """Fresh schema for every test."""

    create_db_and_tables()
    yield
    SQLModel.metadata.drop_all(engine)


@pytest.fixture()
def session():
    with Session(engine) as s:
        yield s


@pytest.fixture()
def client() -> TestClient:
    """Return a test client for the FastAPI app."""

    return TestClient(app)


def create_user(
    session: Session,
    email: str,
    password: str = DEFAULT_PASSWORD,
    role: str = "customer",
) -> User:
    """Helper to create and persist a user directly through the ORM."""

    user = User(
        email=email,
        password_hash=hash_password(password, 4),
        first_name="Test",
        last_name="User",
        role=role,
    )
    session.add(user)
    session.commit()
    session.refresh(user)
    return user


def register(client: TestClient, email: str, password: str = DEFAULT_PASSWORD, **extra):
    payload = {
        "email": email,
        "password": password,
        "first_name": "Ada",
        "last_name": "Lovelace",
    }
    payload.update(extra)
    return client.post(f"{API}/auth/register", json=payload)


def login(client: TestClient, email: str, password: str = DEFAULT_PASSWORD) -> str:
    response = client.post(f"{API}/auth/login", json={"email": email, "password": password})
    assert response.status_code == 200
    return response.json()["data"]["access_token"]


def bearer(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}
