"""Services for user registration and exercise logging."""

from .identity_store import IdentityStore
from .exercise_log import ExerciseLog, LogEntry, LogItem, LogView

__all__ = ["IdentityStore", "ExerciseLog", "LogEntry", "LogItem", "LogView"]
