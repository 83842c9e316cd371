"""Dependency injection for API routes."""

import json
import logging
from functools import lru_cache
from typing import Any, Dict

from fastapi import Depends, Request

from ..config import get_settings
from ..db.database import ExerciseDatabase
from ..db.repositories.exercise_repository import ExerciseRepository
from ..db.repositories.user_repository import UserRepository
from ..exceptions import ValidationError
from ..services.exercise_log import ExerciseLog
from ..services.identity_store import IdentityStore

logger = logging.getLogger(__name__)


@lru_cache
def get_database() -> ExerciseDatabase:
    """Get the process-wide database handle, creating it on first use."""
    settings = get_settings()
    return ExerciseDatabase(str(settings.database_path))


def get_identity_store(db: ExerciseDatabase = Depends(get_database)) -> IdentityStore:
    """Get the identity store bound to the shared database."""
    return IdentityStore(UserRepository(db))


def get_exercise_log(
    db: ExerciseDatabase = Depends(get_database),
    identity_store: IdentityStore = Depends(get_identity_store),
) -> ExerciseLog:
    """Get the exercise log bound to the shared database."""
    return ExerciseLog(identity_store, ExerciseRepository(db))


async def get_request_body(request: Request) -> Dict[str, Any]:
    """
    Read a JSON or form-encoded request body into a dict.

    Missing or unsupported bodies read as empty so that required-field
    checks report them.
    """
    content_type = request.headers.get("content-type", "").lower()

    if "json" in content_type:
        raw = await request.body()
        if not raw.strip():
            return {}
        try:
            data = json.loads(raw)
        except ValueError as e:
            logger.warning(f"Rejected malformed JSON body: {e}")
            raise ValidationError("malformed JSON body") from e
        if not isinstance(data, dict):
            raise ValidationError("request body must be an object")
        return data

    if "form" in content_type:
        form = await request.form()
        return {key: value for key, value in form.items() if isinstance(value, str)}

    return {}
