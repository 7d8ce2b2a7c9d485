"""Shared fixtures: a throwaway SQLite database and a test client bound to it."""

import pytest
from fastapi.testclient import TestClient

from user_api.app.api.dependencies import get_user_service
from user_api.app.core.db import init_db
from user_api.app.main import app
from user_api.app.repositories.user_repository import SQLiteUserRepository
from user_api.app.services.user_service import UserService


@pytest.fixture
def db_path(tmp_path):
    path = str(tmp_path / "users.db")
    init_db(path)
    return path


@pytest.fixture
def repository(db_path):
    return SQLiteUserRepository(db_path)


@pytest.fixture
def client(repository):
    """TestClient whose endpoints use the temporary database."""
    app.dependency_overrides[get_user_service] = lambda: UserService(repository)
    yield TestClient(app)
    app.dependency_overrides.clear()
