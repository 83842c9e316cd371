"""
Identity Store: registration and lookup of users.

Owns the User records. Username uniqueness is left to the store's unique
constraint; a duplicate surfaces as the store's own error.
"""

import logging
from typing import Any, List

from ..db.database import is_object_id
from ..db.repositories.user_repository import User, UserRepository
from ..exceptions import UserNotFoundError, ValidationError

logger = logging.getLogger(__name__)


class IdentityStore:
    """Creates, lists and resolves users."""

    def __init__(self, users: UserRepository):
        self._users = users

    def create_user(self, username: Any) -> User:
        """
        Register a new user.

        Args:
            username: Requested username; must be non-empty

        Returns:
            The created User with its assigned identifier

        Raises:
            ValidationError: If username is missing or empty
            DuplicateKeyError: If the username is already taken
        """
        if not username:
            raise ValidationError("username is required", fields=["username"])
        if not isinstance(username, str):
            username = str(username)

        user = self._users.create(username)
        logger.info(f"Created user {user.id} ({user.username})")
        return user

    def list_users(self) -> List[User]:
        """Return every user in insertion order."""
        return self._users.get_all()

    def get_user_by_id(self, user_id: str) -> User:
        """
        Resolve a user identifier.

        Malformed identifiers are reported as not found without querying.

        Raises:
            UserNotFoundError: If no such user exists
        """
        if not is_object_id(user_id):
            logger.warning(f"Malformed user id {user_id!r}")
            raise UserNotFoundError(user_id)

        user = self._users.get_by_id(user_id)
        if user is None:
            logger.warning(f"User {user_id} not found")
            raise UserNotFoundError(user_id)
        return user
