"""
Exercise Log: appending exercise entries and answering history queries.

Every response names the owning user, so both operations join against the
Identity Store.

Appending is write-then-verify: the entry is persisted first and the user
is resolved afterwards. When the user does not exist the caller gets a
not-found error but the entry stays in the store. The two steps share no
transaction. A malformed user id is rejected before anything is written,
since it cannot be stored as an owner reference.
"""

import logging
import math
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional, Union

from ..db.database import is_object_id
from ..db.repositories.exercise_repository import ExerciseQuery, ExerciseRepository
from ..exceptions import UserNotFoundError, ValidationError
from ..utils.dates import format_date, parse_date
from .identity_store import IdentityStore

logger = logging.getLogger(__name__)

Number = Union[int, float]


@dataclass
class LogEntry:
    """Result of an append: the stored entry plus its owner's name."""

    username: str
    description: str
    duration: Number
    date: str
    id: str  # owning user's id


@dataclass
class LogItem:
    """One entry of a log view."""

    description: str
    duration: Number
    date: str


@dataclass
class LogView:
    """A user's filtered, optionally capped exercise history."""

    username: str
    count: int
    id: str
    log: List[LogItem] = field(default_factory=list)


def render_duration(value: float) -> Number:
    """Integral durations render without a fractional part."""
    if float(value).is_integer():
        return int(value)
    return value


def build_date_filter(date_from: Optional[str] = None, date_to: Optional[str] = None) -> Dict[str, Optional[datetime]]:
    """
    Build the date conditions of a log query.

    Empty bounds are ignored. A bound that does not parse is kept as the
    invalid date, which matches no entry.

    Returns:
        ``{"gte": ..., "lte": ...}`` with only the supplied bounds
    """
    conditions: Dict[str, Optional[datetime]] = {}
    if date_from:
        conditions["gte"] = parse_date(date_from)
    if date_to:
        conditions["lte"] = parse_date(date_to)
    return conditions


def coerce_limit(value: Any) -> Optional[int]:
    """
    Turn a ``limit`` parameter into a result cap.

    Anything that is not a finite number of at least 1 means "no cap",
    which includes ``0``, negatives and non-numeric text.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str) and "_" in value:
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number) or number < 1:
        return None
    return int(number)


class ExerciseLog:
    """Appends exercises and serves filtered logs."""

    def __init__(self, identity_store: IdentityStore, exercises: ExerciseRepository):
        self._identity = identity_store
        self._exercises = exercises

    def append_exercise(
        self,
        user_id: str,
        description: Any,
        duration: Any,
        date: Any = None,
    ) -> LogEntry:
        """
        Log an exercise for a user.

        Args:
            user_id: Owning user's identifier
            description: What was done (required)
            duration: Minutes (required)
            date: When; defaults to now, unparseable values become the invalid date

        Returns:
            The stored entry with the owner's username

        Raises:
            ValidationError: If description or duration is missing
            UserNotFoundError: If the id is malformed (nothing stored) or the
                user does not exist (entry already stored)
            StoreError: If the write fails
        """
        if not description or not duration:
            raise ValidationError(
                "description and duration are required",
                fields=["description", "duration"],
            )

        if not is_object_id(user_id):
            logger.warning(f"Refusing exercise for malformed user id {user_id!r}")
            raise UserNotFoundError(user_id)

        exercise_date = parse_date(date) if date else datetime.now()

        exercise = self._exercises.add(
            user_id=user_id,
            description=description,
            duration=duration,
            date=exercise_date,
        )
        logger.info(f"Stored exercise {exercise.id} for user {user_id}")

        user = self._identity.get_user_by_id(user_id)

        return LogEntry(
            username=user.username,
            description=exercise.description,
            duration=render_duration(exercise.duration),
            date=format_date(exercise.date),
            id=user_id,
        )

    def get_log(
        self,
        user_id: str,
        date_from: Optional[str] = None,
        date_to: Optional[str] = None,
        limit: Any = None,
    ) -> LogView:
        """
        Get a user's exercise history.

        Args:
            user_id: Owning user's identifier
            date_from: Inclusive lower date bound
            date_to: Inclusive upper date bound
            limit: Maximum number of entries, earliest first

        Returns:
            The log with ``count`` equal to the number of returned entries

        Raises:
            UserNotFoundError: If the user does not exist
        """
        user = self._identity.get_user_by_id(user_id)

        query = ExerciseQuery(
            user_id=user_id,
            date=build_date_filter(date_from, date_to),
            limit=coerce_limit(limit),
        )
        exercises = self._exercises.find(query)

        log = [
            LogItem(
                description=ex.description,
                duration=render_duration(ex.duration),
                date=format_date(ex.date),
            )
            for ex in exercises
        ]
        return LogView(username=user.username, count=len(log), id=user_id, log=log)
