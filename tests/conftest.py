"""Pytest configuration and shared fixtures"""
import os
import tempfile
from pathlib import Path

import pytest

# Point the app at a throwaway database before anything imports settings
_tmp_dir = tempfile.mkdtemp()
os.environ["DATABASE_URL"] = f"sqlite:///{Path(_tmp_dir) / 'test.sqlite'}"
os.environ["BCRYPT_ROUNDS"] = "4"

from fastapi.testclient import TestClient

from signup_api.db.sessions import SessionLocal
from signup_api.main import app
from signup_api.repositories import user_repository


VALID_USER = {
    "username": "user1",
    "email": "user1@mail.com",
    "password": "P4ssword",
}


@pytest.fixture
def db():
    """Database session for direct repository access"""
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture(autouse=True)
def clean_users(db):
    """Start every test with an empty users table"""
    user_repository.truncate(db)
    yield


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def valid_user():
    return dict(VALID_USER)


@pytest.fixture
def post_user(client):
    """POST a registration payload, optionally with an Accept-Language header"""
    def _post(user=None, language=None):
        headers = {"Accept-Language": language} if language else {}
        return client.post("/api/1.0/users", json=dict(VALID_USER) if user is None else user, headers=headers)
    return _post
