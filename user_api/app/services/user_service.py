"""
Business logic for users.

``UserService`` forwards each use case to a ``UserRepository``.  The
only decision it makes is to return ``None`` (or ``False`` for
deletes) when a lookup misses, leaving the HTTP mapping to the
endpoints.  Uniqueness of e‑mail addresses is enforced by the
repository, which raises ``DuplicateEmailError``.
"""

import logging
from typing import List, Optional

from user_api.app.models.user import User
from user_api.app.repositories.user_repository import UserRepository
from user_api.app.schemas.user import UserCreate, UserUpdate


logger = logging.getLogger(__name__)


class UserService:
    """Use cases for the user resource."""

    def __init__(self, repository: UserRepository) -> None:
        self.repository = repository

    async def list_users(self) -> List[User]:
        """Return all stored users."""
        return self.repository.find_all()

    async def get_user(self, user_id: int) -> Optional[User]:
        """Retrieve a user by ID, or ``None`` if no row matches."""
        return self.repository.find_by_id(user_id)

    async def get_user_by_email(self, email: str) -> Optional[User]:
        return self.repository.find_by_email(email)

    async def create_user(self, data: UserCreate) -> User:
        """Store a new user and return it with its generated ID."""
        user = self.repository.save(User(name=data.name, email=data.email))
        logger.info("Created user %s", user.id)
        return user

    async def update_user(self, user_id: int, data: UserUpdate) -> Optional[User]:
        """Update a user's name and, if given, e‑mail.

        Returns the updated user, or ``None`` without writing anything
        when the user does not exist.
        """
        user = self.repository.find_by_id(user_id)
        if user is None:
            return None
        user.update_user_info(name=data.name, email=data.email)
        user = self.repository.save(user)
        if user is None:
            # Deleted between the lookup and the write.
            return None
        logger.info("Updated user %s", user_id)
        return user

    async def delete_user(self, user_id: int) -> bool:
        """Delete a user.

        Returns ``True`` if the user existed and was removed, ``False``
        otherwise.
        """
        if not self.repository.exists_by_id(user_id):
            return False
        self.repository.delete_by_id(user_id)
        logger.info("Deleted user %s", user_id)
        return True
