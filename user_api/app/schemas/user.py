"""
Pydantic models for user data.

Defines the request bodies for creating and updating users and the
response model returned by every user endpoint.
"""

from typing import Optional

from pydantic import BaseModel, Field


class UserBase(BaseModel):
    name: Optional[str] = Field(None, examples=["홍길동"])
    email: Optional[str] = Field(None, examples=["hong@test.com"])


class UserCreate(UserBase):
    """Schema for creating a user."""


class UserUpdate(UserBase):
    """Schema for updating a user.

    ``name`` replaces the stored value even when omitted (it becomes
    ``null``).  ``email`` is only changed when provided.
    """


class UserRead(UserBase):
    """Schema for reading a user from the API."""

    id: int

    # Allows ``UserRead.model_validate(user)`` on the ``User`` dataclass.
    model_config = {
        "from_attributes": True,
    }
