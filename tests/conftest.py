"""
pytest configuration and fixtures for the User API test suite.

Every test gets its own uniquely named in‑memory store, so tests never
see each other's data.  ``seeded_*`` fixtures start from a store that
already holds the well‑known test user.
"""

import uuid

import pytest
from fastapi.testclient import TestClient

from user_api.app.core.db import Database, DbContext
from user_api.app.main import create_app
from user_api.app.schemas.user import User
from user_api.app.services.user_service import UserService


TEST_USER_ID = uuid.UUID("0bd7888d-28e0-4f99-be78-bc4987c4ba9c")


def make_test_user() -> User:
    return User(id=TEST_USER_ID, name="Test User", email="test.user@example.com")


@pytest.fixture
def test_user() -> User:
    return make_test_user()


@pytest.fixture
def database():
    """Empty isolated store"""
    db = Database.in_memory(f"UserApiTest_{uuid.uuid4()}")
    db.init_db()
    yield db
    db.close()


@pytest.fixture
def seeded_database(database):
    """Store holding exactly the test user"""
    with DbContext(database) as context:
        context.add(make_test_user())
        context.save()
    return database


@pytest.fixture
def context(database):
    with DbContext(database) as ctx:
        yield ctx


@pytest.fixture
def seeded_context(seeded_database):
    with DbContext(seeded_database) as ctx:
        yield ctx


@pytest.fixture
def user_service(context) -> UserService:
    return UserService(context)


@pytest.fixture
def seeded_user_service(seeded_context) -> UserService:
    return UserService(seeded_context)


@pytest.fixture
def client(database):
    with TestClient(create_app(database)) as test_client:
        yield test_client


@pytest.fixture
def seeded_client(seeded_database):
    with TestClient(create_app(seeded_database)) as test_client:
        yield test_client
