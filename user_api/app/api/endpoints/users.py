"""
User endpoints.

Five routes map onto ``UserService``: list, get, create, update and
delete.  A missing user yields a 404 without a body; a duplicate
e‑mail is turned into a 409 by the exception handler registered in
``main``.
"""

from typing import List, Union

from fastapi import APIRouter, Depends, Response, status

from user_api.app.api.dependencies import get_user_service
from user_api.app.schemas.user import UserCreate, UserRead, UserUpdate
from user_api.app.services.user_service import UserService


router = APIRouter()


def _not_found() -> Response:
    return Response(status_code=status.HTTP_404_NOT_FOUND)


@router.get("", response_model=List[UserRead])
async def list_users(service: UserService = Depends(get_user_service)) -> List[UserRead]:
    """Return every stored user."""
    users = await service.list_users()
    return [UserRead.model_validate(user) for user in users]


@router.get("/{user_id}", response_model=UserRead, responses={404: {"description": "User not found"}})
async def get_user(
    user_id: int,
    service: UserService = Depends(get_user_service),
) -> Union[UserRead, Response]:
    user = await service.get_user(user_id)
    if user is None:
        return _not_found()
    return UserRead.model_validate(user)


@router.post("", response_model=UserRead, responses={409: {"description": "Email already in use"}})
async def create_user(data: UserCreate, service: UserService = Depends(get_user_service)) -> UserRead:
    """Create a user and return it with its generated ID."""
    user = await service.create_user(data)
    return UserRead.model_validate(user)


@router.put(
    "/{user_id}",
    response_model=UserRead,
    responses={404: {"description": "User not found"}, 409: {"description": "Email already in use"}},
)
async def update_user(
    user_id: int,
    data: UserUpdate,
    service: UserService = Depends(get_user_service),
) -> Union[UserRead, Response]:
    """Replace the user's name and, when provided, its e‑mail."""
    user = await service.update_user(user_id, data)
    if user is None:
        return _not_found()
    return UserRead.model_validate(user)


@router.delete(
    "/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={404: {"description": "User not found"}},
)
async def delete_user(user_id: int, service: UserService = Depends(get_user_service)) -> Response:
    if not await service.delete_user(user_id):
        return _not_found()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
