"""
User entity.

A ``User`` is the single record stored by the service.  The ``id`` is
assigned by the database on first save and never changes afterwards;
``name`` and ``email`` are the only mutable fields.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class User:
    """A stored user."""

    name: Optional[str] = None
    email: Optional[str] = None
    id: Optional[int] = None

    def update_user_info(self, name: Optional[str], email: Optional[str]) -> None:
        """Overwrite ``name`` and, when given, ``email``.

        ``name`` is assigned even when it is ``None``.  A ``None`` email
        keeps the current address.
        """
        self.name = name
        if email is not None:
            self.email = email
