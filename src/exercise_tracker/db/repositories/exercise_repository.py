"""SQLite-backed repository for exercise entries.

Entries are append-only. Lookups take an :class:`ExerciseQuery` whose date
conditions are keyed by comparison operator (``"gte"``, ``"lte"``), the way a
document-store query document would express them.
"""

import math
import sqlite3
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional

from ...exceptions import StoreError
from ...utils.dates import from_storage, to_storage
from ..database import ExerciseDatabase, new_object_id

_OPERATORS = {
    "gte": ">=",
    "lte": "<=",
}


@dataclass
class Exercise:
    """A single logged activity owned by one user."""

    id: str
    user_id: str
    description: str
    duration: float
    date: Optional[datetime]  # None is the invalid date
    created_at: Optional[str] = None


@dataclass
class ExerciseQuery:
    """Lookup of a user's exercises.

    A condition whose value is None is still applied and matches nothing.
    """

    user_id: str
    date: Dict[str, Optional[datetime]] = field(default_factory=dict)
    limit: Optional[int] = None


def coerce_duration(value: Any) -> float:
    """Cast a duration to a number the way the store's schema would.

    Raises:
        StoreError: If the value is not numeric
    """
    try:
        number = float(value)
    except (TypeError, ValueError):
        number = math.nan
    if not math.isfinite(number):
        raise StoreError(
            f'Cast to Number failed for value "{value}" at path "duration"',
            operation="insert",
        )
    return number


class ExerciseRepository:
    """SQLite-backed repository for Exercise entities."""

    def __init__(self, db: ExerciseDatabase):
        self.db = db

    def _row_to_exercise(self, row: sqlite3.Row) -> Exercise:
        return Exercise(
            id=row["id"],
            user_id=row["user_id"],
            description=row["description"],
            duration=row["duration"],
            date=from_storage(row["date"]),
            created_at=row["created_at"],
        )

    def add(
        self,
        user_id: str,
        description: str,
        duration: Any,
        date: Optional[datetime],
    ) -> Exercise:
        """
        Persist a new exercise entry.

        The owning user is not checked here.

        Args:
            user_id: Identifier of the owning user
            description: What was done
            duration: Minutes; cast to a number
            date: When it was done; None stores the invalid date

        Returns:
            The stored Exercise

        Raises:
            StoreError: If the duration cannot be cast or the write fails
        """
        exercise = Exercise(
            id=new_object_id(),
            user_id=user_id,
            description=str(description),
            duration=coerce_duration(duration),
            date=date,
            created_at=datetime.now().isoformat(),
        )

        with self.db.get_connection() as conn:
            conn.execute(
                """
                INSERT INTO exercises (id, user_id, description, duration, date, created_at)
                VALUES (?, ?, ?, ?, ?, ?)
                """,
                (
                    exercise.id,
                    exercise.user_id,
                    exercise.description,
                    exercise.duration,
                    to_storage(exercise.date),
                    exercise.created_at,
                ),
            )

        return exercise

    def find(self, query: ExerciseQuery) -> List[Exercise]:
        """
        Find a user's exercises in insertion order.

        Args:
            query: User, date conditions and optional cap

        Returns:
            Matching exercises, at most ``query.limit`` of them when set
        """
        where_clauses = ["user_id = ?"]
        params: List[Any] = [query.user_id]

        for op, value in query.date.items():
            # NULL on either side makes the comparison fail, like a NaN date
            where_clauses.append(f"date {_OPERATORS[op]} ?")
            params.append(to_storage(value))

        sql = f"SELECT * FROM exercises WHERE {' AND '.join(where_clauses)} ORDER BY rowid"
        if query.limit:
            sql += " LIMIT ?"
            params.append(query.limit)

        with self.db.get_connection() as conn:
            rows = conn.execute(sql, params).fetchall()
            return [self._row_to_exercise(row) for row in rows]
