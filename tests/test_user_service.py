from unittest.mock import create_autospec

import pytest

from user_api.app.models.user import User
from user_api.app.repositories.user_repository import UserRepository
from user_api.app.schemas.user import UserCreate, UserUpdate
from user_api.app.services.user_service import UserService


@pytest.fixture
def user_repository():
    return create_autospec(UserRepository, instance=True)


@pytest.fixture
def user_service(user_repository):
    return UserService(user_repository)


@pytest.mark.asyncio
async def test_list_users(user_service, user_repository):
    user_repository.find_all.return_value = [
        User(id=1, name="홍길동", email="hong@test.com"),
        User(id=2, name="김철수", email="kim@test.com"),
    ]

    result = await user_service.list_users()

    assert len(result) == 2
    assert result[0].name == "홍길동"
    assert result[1].email == "kim@test.com"


@pytest.mark.asyncio
async def test_get_user_found(user_service, user_repository):
    user_repository.find_by_id.return_value = User(id=1, name="홍길동", email="hong@test.com")

    result = await user_service.get_user(1)

    assert result is not None
    assert result.name == "홍길동"


@pytest.mark.asyncio
async def test_get_user_missing(user_service, user_repository):
    user_repository.find_by_id.return_value = None

    assert await user_service.get_user(2) is None


@pytest.mark.asyncio
async def test_get_user_by_email(user_service, user_repository):
    user_repository.find_by_email.return_value = User(id=1, name="홍길동", email="hong@test.com")

    result = await user_service.get_user_by_email("hong@test.com")

    assert result.id == 1
    user_repository.find_by_email.assert_called_once_with("hong@test.com")


@pytest.mark.asyncio
async def test_get_user_by_email_missing(user_service, user_repository):
    user_repository.find_by_email.return_value = None

    assert await user_service.get_user_by_email("notfound@test.com") is None


@pytest.mark.asyncio
async def test_create_user(user_service, user_repository):
    user_repository.save.return_value = User(id=1, name="홍길동", email="hong@test.com")

    result = await user_service.create_user(UserCreate(name="홍길동", email="hong@test.com"))

    assert result.id == 1
    user_repository.save.assert_called_once_with(User(name="홍길동", email="hong@test.com"))


@pytest.mark.asyncio
async def test_update_user(user_service, user_repository):
    user_repository.find_by_id.return_value = User(id=1, name="홍길동", email="hong@test.com")
    user_repository.save.side_effect = lambda user: user

    result = await user_service.update_user(1, UserUpdate(name="김철수", email="kim@test.com"))

    assert result == User(id=1, name="김철수", email="kim@test.com")
    user_repository.save.assert_called_once()


@pytest.mark.asyncio
async def test_update_user_missing(user_service, user_repository):
    user_repository.find_by_id.return_value = None

    result = await user_service.update_user(2, UserUpdate(name="김철수", email="kim@test.com"))

    assert result is None
    user_repository.save.assert_not_called()


@pytest.mark.asyncio
async def test_delete_user(user_service, user_repository):
    user_repository.exists_by_id.return_value = True

    assert await user_service.delete_user(1) is True
    user_repository.delete_by_id.assert_called_once_with(1)


@pytest.mark.asyncio
async def test_delete_user_missing(user_service, user_repository):
    user_repository.exists_by_id.return_value = False

    assert await user_service.delete_user(2) is False
    user_repository.delete_by_id.assert_not_called()


@pytest.mark.asyncio
async def test_update_user_deleted_concurrently(user_service, user_repository):
    user_repository.find_by_id.return_value = User(id=1, name="홍길동", email="hong@test.com")
    user_repository.save.return_value = None

    result = await user_service.update_user(1, UserUpdate(name="김철수"))

    assert result is None
