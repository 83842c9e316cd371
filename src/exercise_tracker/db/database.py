"""SQLite database handle shared by the user and exercise repositories."""

import re
import sqlite3
import uuid
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Union

from ..exceptions import DuplicateKeyError, StoreError
from .schema import SCHEMA

_OBJECT_ID_RE = re.compile(r"^[0-9a-f]{24}$")


def new_object_id() -> str:
    """Generate a record identifier (24 lowercase hex characters)."""
    return uuid.uuid4().hex[:24]


def is_object_id(value: str) -> bool:
    """Check whether a value is shaped like a record identifier."""
    return bool(value) and _OBJECT_ID_RE.match(value) is not None


class ExerciseDatabase:
    """
    SQLite database manager.

    One instance is created at startup and shared by every request. Each
    operation borrows a short-lived connection through :meth:`get_connection`;
    the handle itself is never closed while the process runs.
    """

    def __init__(self, db_path: Union[str, Path]):
        """
        Initialize the database and apply the schema.

        Args:
            db_path: Path to SQLite database file (see ``Settings.database_path``)
        """
        self.db_path = Path(db_path)
        self._init_db()

    def _init_db(self):
        """Initialize database tables."""
        with self.get_connection() as conn:
            conn.executescript(SCHEMA)

    @contextmanager
    def get_connection(self) -> Iterator[sqlite3.Connection]:
        """
        Get database connection with context manager.

        Commits on success and rolls back on failure. Driver errors are
        re-raised as StoreError with the driver's message unchanged.
        """
        try:
            conn = sqlite3.connect(str(self.db_path))
        except sqlite3.Error as e:
            raise StoreError(str(e), operation="connect") from e
        conn.row_factory = sqlite3.Row
        try:
            yield conn
            conn.commit()
        except sqlite3.IntegrityError as e:
            conn.rollback()
            if "UNIQUE" in str(e):
                raise DuplicateKeyError(str(e)) from e
            raise StoreError(str(e)) from e
        except sqlite3.Error as e:
            conn.rollback()
            raise StoreError(str(e)) from e
        except Exception:
            conn.rollback()
            raise
        finally:
            conn.close()
