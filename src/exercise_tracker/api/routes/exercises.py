"""
Exercise API routes.

Appending exercises to a user and reading the user's log.
"""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, Query

from ..deps import get_exercise_log, get_request_body
from ..schemas import ExerciseResponse, LogItemResponse, LogResponse
from ...services.exercise_log import ExerciseLog

router = APIRouter()


@router.post("/{user_id}/exercises", response_model=ExerciseResponse)
def add_exercise(
    user_id: str,
    body: Dict[str, Any] = Depends(get_request_body),
    exercise_log: ExerciseLog = Depends(get_exercise_log),
):
    """
    Log an exercise for a user.

    Body fields: ``description`` and ``duration`` (minutes) are required,
    ``date`` is optional and defaults to now.

    The entry is stored before the user is looked up, so a 404 response
    still leaves the entry behind.
    """
    entry = exercise_log.append_exercise(
        user_id=user_id,
        description=body.get("description"),
        duration=body.get("duration"),
        date=body.get("date"),
    )
    return ExerciseResponse(
        username=entry.username,
        description=entry.description,
        duration=entry.duration,
        date=entry.date,
        id=entry.id,
    )


@router.get("/{user_id}/logs", response_model=LogResponse)
def get_logs(
    user_id: str,
    date_from: Optional[str] = Query(None, alias="from", description="Inclusive start date"),
    date_to: Optional[str] = Query(None, alias="to", description="Inclusive end date"),
    limit: Optional[str] = Query(None, description="Maximum entries; 0 or invalid means no limit"),
    exercise_log: ExerciseLog = Depends(get_exercise_log),
):
    """Get a user's exercise log, optionally filtered by date and capped."""
    view = exercise_log.get_log(
        user_id=user_id,
        date_from=date_from,
        date_to=date_to,
        limit=limit,
    )
    return LogResponse(
        username=view.username,
        count=view.count,
        id=view.id,
        log=[
            LogItemResponse(description=item.description, duration=item.duration, date=item.date)
            for item in view.log
        ],
    )
