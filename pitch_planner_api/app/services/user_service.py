"""
Business logic for user accounts.

Users register with a login and password; the password is stored as
a salted PBKDF2 hash.  A user's id is the identity the entity
resources check ownership against.
"""

import logging
import sqlite3
from typing import Optional

from pitch_planner_api.app.core.db import get_connection
from pitch_planner_api.app.core.security import hash_password, verify_password
from pitch_planner_api.app.schemas.user import UserCreate, UserRead


class UserService:
    """Service for managing user accounts."""

    @classmethod
    async def create_user(cls, data: UserCreate) -> UserRead:
        """Create a new user.

        Raises ``ValueError`` if the login is already taken.
        """
        logger = logging.getLogger(__name__)
        conn = get_connection()
        try:
            cursor = conn.cursor()
            try:
                cursor.execute(
                    "INSERT INTO users (login, email, password) VALUES (?, ?, ?)",
                    (data.login.lower(), data.email, hash_password(data.password)),
                )
            except sqlite3.IntegrityError:
                raise ValueError(f"Login {data.login} is already in use")
            user_id = cursor.lastrowid
            conn.commit()
            logger.info("Registered user %s (%s)", data.login, user_id)
            row = cursor.execute("SELECT * FROM users WHERE id = ?", (user_id,)).fetchone()
            return cls._row_to_user_read(row)
        finally:
            conn.close()

    @classmethod
    async def authenticate(cls, login: str, password: str) -> Optional[UserRead]:
        """Return the user if the credentials match an activated account."""
        conn = get_connection()
        try:
            row = conn.execute(
                "SELECT * FROM users WHERE login = ?",
                (login.lower(),),
            ).fetchone()
        finally:
            conn.close()
        if not row or not row["activated"]:
            return None
        if not verify_password(password, row["password"]):
            return None
        return cls._row_to_user_read(row)

    @classmethod
    async def get_user_by_id(cls, user_id: int) -> Optional[UserRead]:
        conn = get_connection()
        try:
            row = conn.execute("SELECT * FROM users WHERE id = ?", (user_id,)).fetchone()
            if not row:
                return None
            return cls._row_to_user_read(row)
        finally:
            conn.close()

    @staticmethod
    def _row_to_user_read(row: sqlite3.Row) -> UserRead:
        return UserRead(
            id=row["id"],
            login=row["login"],
            email=row["email"],
            activated=bool(row["activated"]),
        )
