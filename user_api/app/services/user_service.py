"""
Business logic for users.

``UserService`` validates its input, checks that referenced records
exist and then delegates the write to the persistence context.  Each
mutating operation is a single check, mutate and commit step and
returns the number of rows the commit affected.
"""

import logging
from typing import List, Optional
from uuid import UUID

from ..core.db import DbContext
from ..core.errors import InvalidArgumentError, NotFoundError
from ..schemas.user import User


logger = logging.getLogger(__name__)


class UserService:
    """Service for creating, retrieving, updating and deleting users.

    The persistence context is passed in explicitly; the service holds
    no other state, so one instance per request is cheap.
    """

    def __init__(self, context: DbContext) -> None:
        if context is None:
            raise InvalidArgumentError("context cannot be None")
        self._context = context

    async def list_users(self) -> List[User]:
        """Return every stored user, in no particular order."""
        return self._context.query()

    async def get_user(self, user_id: UUID) -> User:
        """Retrieve a user by ID.

        Raises ``NotFoundError`` if no user has that ID.
        """
        user = self._context.find(user_id)
        if user is None:
            logger.warning("User %s not found", user_id)
            raise NotFoundError(f"User with ID {user_id} not found.")
        return user

    async def create_user(self, user: Optional[User]) -> int:
        """Insert ``user`` and commit.

        The ID is not checked for uniqueness here; a collision is
        reported by the store as ``DuplicateKeyError``.
        """
        if user is None:
            raise InvalidArgumentError("user cannot be None")
        logger.info("Creating user %s", user.id)
        self._context.add(user)
        return self._context.save()

    async def update_user(self, user: Optional[User]) -> int:
        """Replace the stored fields of an existing user and commit."""
        if user is None:
            raise InvalidArgumentError("user cannot be None")
        if not self._context.exists(user.id):
            logger.warning("Cannot update missing user %s", user.id)
            raise NotFoundError(f"User with ID {user.id} not found.")
        logger.info("Updating user %s", user.id)
        self._context.update(user)
        return self._context.save()

    async def delete_user(self, user_id: UUID) -> int:
        user = self._context.find(user_id)
        if user is None:
            logger.warning("Cannot delete missing user %s", user_id)
            raise NotFoundError(f"User with ID {user_id} not found.")
        logger.info("Deleting user %s", user_id)
        self._context.remove(user)
        return self._context.save()
