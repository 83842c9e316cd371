"""Pytest configuration and fixtures."""

import os
import tempfile

import pytest

from exercise_tracker.db.database import ExerciseDatabase
from exercise_tracker.db.repositories.exercise_repository import ExerciseRepository
from exercise_tracker.db.repositories.user_repository import UserRepository
from exercise_tracker.services.exercise_log import ExerciseLog
from exercise_tracker.services.identity_store import IdentityStore


@pytest.fixture
def temp_db_path():
    """Create a temporary database file path."""
    with tempfile.NamedTemporaryFile(suffix=".db", delete=False) as f:
        db_path = f.name
    yield db_path
    try:
        os.unlink(db_path)
    except OSError:
        pass


@pytest.fixture
def db(temp_db_path):
    """Create a database with the schema applied."""
    return ExerciseDatabase(temp_db_path)


@pytest.fixture
def user_repo(db):
    return UserRepository(db)


@pytest.fixture
def exercise_repo(db):
    return ExerciseRepository(db)


@pytest.fixture
def identity_store(user_repo):
    return IdentityStore(user_repo)


@pytest.fixture
def exercise_log(identity_store, exercise_repo):
    return ExerciseLog(identity_store, exercise_repo)


@pytest.fixture
def alice(identity_store):
    """A registered user named alice."""
    return identity_store.create_user("alice")
