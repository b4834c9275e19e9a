"""
Shared fixtures: a fresh app (and in-memory store) per test, plus bearer
tokens minted directly for the seeded users.
"""
from __future__ import annotations

from typing import Callable, Dict, Optional

import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.core.tokens import create_access_token
from app.main import create_app

ADMIN = "user1@abc.com"
STUDENT_1 = ("user2@abc.com", "650610001")
STUDENT_2 = ("user3@abc.com", "650610002")


@pytest.fixture
def settings() -> Settings:
    return Settings(
        SECRET_KEY="test-secret",
        ALGORITHM="HS256",
        ACCESS_TOKEN_EXPIRE_MINUTES=5,
        LOG_LEVEL="WARNING",
        RESET_REQUIRES_ADMIN=False,
        CORS_ORIGINS=["*"],
    )


@pytest.fixture
def app(settings: Settings):
    return create_app(settings=settings)


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


@pytest.fixture
def make_token(settings: Settings) -> Callable[..., str]:
    def _make(username: str, role: str, student_id: Optional[str] = None) -> str:
        return create_access_token(sub=username, student_id=student_id, role=role, settings=settings)
    return _make


@pytest.fixture
def admin_token(make_token) -> str:
    return make_token(ADMIN, "ADMIN")


@pytest.fixture
def student_token(make_token) -> str:
    return make_token(STUDENT_1[0], "STUDENT", STUDENT_1[1])


@pytest.fixture
def other_student_token(make_token) -> str:
    return make_token(STUDENT_2[0], "STUDENT", STUDENT_2[1])


def bearer(token: str) -> Dict[str, str]:
    return {"Authorization": f"Bearer {token}"}
