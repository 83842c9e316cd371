"""Repository implementations for database persistence."""

from .user_repository import User, UserRepository
from .exercise_repository import Exercise, ExerciseQuery, ExerciseRepository

__all__ = [
    "User",
    "UserRepository",
    "Exercise",
    "ExerciseQuery",
    "ExerciseRepository",
]
