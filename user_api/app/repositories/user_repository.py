"""
Repository for ``User`` entities.

``UserRepository`` declares the find/save/delete operations the
service layer relies on.  ``SQLiteUserRepository`` implements them on
top of the ``users`` table created by ``core.db.init_db``.  Every call
opens its own short‑lived connection, and all queries use
parameterized statements.
"""

from __future__ import annotations

import abc
import logging
import sqlite3
from dataclasses import replace
from typing import List, Optional

from user_api.app.core.db import get_cursor
from user_api.app.core.exceptions import DuplicateEmailError
from user_api.app.models.user import User


logger = logging.getLogger(__name__)

# Range of an SQLite INTEGER column.
SQLITE_MIN_INTEGER = -(2 ** 63)
SQLITE_MAX_INTEGER = 2 ** 63 - 1


class UserRepository(abc.ABC):
    """Persistence interface for users."""

    @abc.abstractmethod
    def find_all(self) -> List[User]:
        ...

    @abc.abstractmethod
    def find_by_id(self, user_id: int) -> Optional[User]:
        ...

    @abc.abstractmethod
    def find_by_email(self, email: str) -> Optional[User]:
        ...

    @abc.abstractmethod
    def save(self, user: User) -> Optional[User]:
        """Insert ``user`` when it has no id, otherwise update its row.

        Returns the stored entity, carrying the generated id after an
        insert, or ``None`` when the row to update no longer exists.
        """

    @abc.abstractmethod
    def exists_by_id(self, user_id: int) -> bool:
        ...

    @abc.abstractmethod
    def delete_by_id(self, user_id: int) -> None:
        ...

    @abc.abstractmethod
    def delete_all(self) -> None:
        ...

    @abc.abstractmethod
    def count(self) -> int:
        ...


class SQLiteUserRepository(UserRepository):
    """``UserRepository`` backed by the SQLite ``users`` table.

    Ids outside SQLite's signed 64‑bit range cannot match a row, so
    lookups and deletes with such ids behave as for any unknown id
    instead of reaching the driver.

    Parameters
    ----------
    database_path : Optional[str]
        Database file to use.  Defaults to the path configured through
        ``settings.database_url``.
    """

    def __init__(self, database_path: Optional[str] = None) -> None:
        self.database_path = database_path

    @staticmethod
    def _row_to_user(row: sqlite3.Row) -> User:
        return User(id=row["id"], name=row["name"], email=row["email"])

    @staticmethod
    def _storable_id(user_id: int) -> bool:
        return SQLITE_MIN_INTEGER <= user_id <= SQLITE_MAX_INTEGER

    def find_all(self) -> List[User]:
        with get_cursor(self.database_path) as cursor:
            rows = cursor.execute("SELECT id, name, email FROM users ORDER BY id").fetchall()
        return [self._row_to_user(row) for row in rows]

    def find_by_id(self, user_id: int) -> Optional[User]:
        if not self._storable_id(user_id):
            return None
        with get_cursor(self.database_path) as cursor:
            row = cursor.execute(
                "SELECT id, name, email FROM users WHERE id = ?",
                (user_id,),
            ).fetchone()
        return self._row_to_user(row) if row else None

    def find_by_email(self, email: str) -> Optional[User]:
        with get_cursor(self.database_path) as cursor:
            row = cursor.execute(
                "SELECT id, name, email FROM users WHERE email = ?",
                (email,),
            ).fetchone()
        return self._row_to_user(row) if row else None

    def save(self, user: User) -> Optional[User]:
        if user.id is not None and not self._storable_id(user.id):
            return None
        try:
            with get_cursor(self.database_path) as cursor:
                if user.id is None:
                    cursor.execute(
                        "INSERT INTO users (name, email) VALUES (?, ?)",
                        (user.name, user.email),
                    )
                    return replace(user, id=cursor.lastrowid)
                cursor.execute(
                    "UPDATE users SET name = ?, email = ? WHERE id = ?",
                    (user.name, user.email, user.id),
                )
                if cursor.rowcount == 0:
                    logger.warning("User %s vanished before update", user.id)
                    return None
                return user
        except sqlite3.IntegrityError as exc:
            # The only constraint on the table besides the primary key.
            if "users.email" in str(exc):
                logger.warning("Rejected duplicate email %s", user.email)
                raise DuplicateEmailError(user.email) from exc
            raise

    def exists_by_id(self, user_id: int) -> bool:
        if not self._storable_id(user_id):
            return False
        with get_cursor(self.database_path) as cursor:
            row = cursor.execute("SELECT 1 FROM users WHERE id = ?", (user_id,)).fetchone()
        return row is not None

    def delete_by_id(self, user_id: int) -> None:
        if not self._storable_id(user_id):
            return
        with get_cursor(self.database_path) as cursor:
            cursor.execute("DELETE FROM users WHERE id = ?", (user_id,))

    def delete_all(self) -> None:
        with get_cursor(self.database_path) as cursor:
            cursor.execute("DELETE FROM users")

    def count(self) -> int:
        with get_cursor(self.database_path) as cursor:
            row = cursor.execute("SELECT COUNT(*) AS count FROM users").fetchone()
        return row["count"]
