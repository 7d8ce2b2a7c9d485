"""Endpoint tests with the service replaced by a mock."""

from unittest.mock import create_autospec

import pytest
from fastapi.testclient import TestClient

from user_api.app.api.dependencies import get_user_service
from user_api.app.core.exceptions import DuplicateEmailError
from user_api.app.main import app
from user_api.app.models.user import User
from user_api.app.schemas.user import UserCreate, UserUpdate
from user_api.app.services.user_service import UserService


@pytest.fixture
def user_service():
    service = create_autospec(UserService, instance=True)
    app.dependency_overrides[get_user_service] = lambda: service
    yield service
    app.dependency_overrides.clear()


@pytest.fixture
def api(user_service):
    return TestClient(app)


def test_list_users(api, user_service):
    user_service.list_users.return_value = [
        User(id=1, name="홍길동", email="hong@test.com"),
        User(id=2, name="김철수", email="kim@test.com"),
    ]

    response = api.get("/api/users")

    assert response.status_code == 200
    assert [u["name"] for u in response.json()] == ["홍길동", "김철수"]


def test_get_user(api, user_service):
    user_service.get_user.return_value = User(id=1, name="홍길동", email="hong@test.com")

    response = api.get("/api/users/1")

    assert response.status_code == 200
    assert response.json() == {"id": 1, "name": "홍길동", "email": "hong@test.com"}


def test_get_user_not_found(api, user_service):
    user_service.get_user.return_value = None

    response = api.get("/api/users/999")

    assert response.status_code == 404
    assert response.content == b""


def test_create_user(api, user_service):
    user_service.create_user.return_value = User(id=1, name="홍길동", email="hong@test.com")

    response = api.post("/api/users", json={"name": "홍길동", "email": "hong@test.com"})

    assert response.status_code == 200
    assert response.json()["email"] == "hong@test.com"
    user_service.create_user.assert_awaited_once_with(UserCreate(name="홍길동", email="hong@test.com"))


def test_create_user_duplicate_email(api, user_service):
    user_service.create_user.side_effect = DuplicateEmailError("hong@test.com")

    response = api.post("/api/users", json={"name": "홍길동", "email": "hong@test.com"})

    assert response.status_code == 409


def test_update_user(api, user_service):
    user_service.update_user.return_value = User(id=1, name="김철수", email="hong@test.com")

    response = api.put("/api/users/1", json={"name": "김철수", "email": None})

    assert response.status_code == 200
    assert response.json()["name"] == "김철수"
    user_service.update_user.assert_awaited_once_with(1, UserUpdate(name="김철수", email=None))


def test_update_user_not_found(api, user_service):
    user_service.update_user.return_value = None

    response = api.put("/api/users/999", json={"name": "없는사람"})

    assert response.status_code == 404


def test_delete_user(api, user_service):
    user_service.delete_user.return_value = True

    response = api.delete("/api/users/1")

    assert response.status_code == 204
    assert response.content == b""


def test_delete_user_not_found(api, user_service):
    user_service.delete_user.return_value = False

    response = api.delete("/api/users/999")

    assert response.status_code == 404


def test_health():
    assert TestClient(app).get("/health").json() == {"status": "ok"}
