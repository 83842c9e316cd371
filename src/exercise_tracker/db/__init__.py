"""Database module for the exercise tracker."""

from .database import ExerciseDatabase, new_object_id, is_object_id
from .schema import SCHEMA

__all__ = ["ExerciseDatabase", "SCHEMA", "new_object_id", "is_object_id"]
