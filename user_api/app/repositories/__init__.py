"""
Persistence layer.

Repositories hide SQL from the service layer.  Services depend on the
abstract ``UserRepository`` so that tests can substitute a mock.
"""

from .user_repository import SQLiteUserRepository, UserRepository  # noqa: F401
