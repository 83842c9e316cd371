"""SQLite-backed repository for registered users."""

import sqlite3
from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional

from ..database import ExerciseDatabase, new_object_id


@dataclass
class User:
    """User entity: a registered identity with a unique username."""

    id: str
    username: str
    created_at: Optional[datetime] = None


class UserRepository:
    """
    SQLite-backed repository for User entities.

    Users are only ever created and read; there is no update or delete.
    """

    def __init__(self, db: ExerciseDatabase):
        self.db = db

    def _row_to_user(self, row: sqlite3.Row) -> User:
        """Convert a database row to a User entity."""
        created_at = row["created_at"]
        if isinstance(created_at, str) and created_at:
            created_at = datetime.fromisoformat(created_at)

        return User(
            id=row["id"],
            username=row["username"],
            created_at=created_at,
        )

    def create(self, username: str) -> User:
        """
        Create a new user.

        Args:
            username: The username (must be unique)

        Returns:
            The created User entity with its assigned identifier

        Raises:
            DuplicateKeyError: If the username already exists
        """
        user_id = new_object_id()
        now = datetime.now().isoformat()

        with self.db.get_connection() as conn:
            conn.execute(
                "INSERT INTO users (id, username, created_at) VALUES (?, ?, ?)",
                (user_id, username, now),
            )

        return User(id=user_id, username=username, created_at=datetime.fromisoformat(now))

    def get_by_id(self, user_id: str) -> Optional[User]:
        """
        Retrieve a user by their identifier.

        Returns:
            The User entity if found, None otherwise
        """
        with self.db.get_connection() as conn:
            row = conn.execute(
                "SELECT * FROM users WHERE id = ?",
                (user_id,)
            ).fetchone()

            if row:
                return self._row_to_user(row)
            return None

    def get_all(self) -> List[User]:
        """Retrieve all users in insertion order."""
        with self.db.get_connection() as conn:
            rows = conn.execute("SELECT * FROM users ORDER BY rowid").fetchall()
            return [self._row_to_user(row) for row in rows]
