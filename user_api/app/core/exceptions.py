"""
Custom exceptions for the User API.
"""


class UserAPIError(Exception):
    """Base class for errors raised by the service and repository layers."""
    pass


class DuplicateEmailError(UserAPIError):
    """Raised when a write would store an email that another user already has."""

    def __init__(self, email: str) -> None:
        super().__init__(f"Email {email} is already in use")
        self.email = email
