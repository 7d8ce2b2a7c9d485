"""
API dependencies.

Provides the service instances injected into endpoints.  Tests replace
``get_user_service`` through ``app.dependency_overrides``.
"""

from user_api.app.repositories.user_repository import SQLiteUserRepository
from user_api.app.services.user_service import UserService


def get_user_service() -> UserService:
    """Return a ``UserService`` bound to the configured database."""
    return UserService(SQLiteUserRepository())
