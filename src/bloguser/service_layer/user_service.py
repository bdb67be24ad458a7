"""Blog user service: the create / add / get use-cases."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from bloguser.domain.model import BlogUser, Role
from bloguser.interfaces.user_registry import (
    UserIdMismatchError,
    UserRegistryError,
)

if TYPE_CHECKING:
    from bloguser.interfaces.id_generator import IdGenerator
    from bloguser.interfaces.user_registry import UserRegistry

logger = logging.getLogger(__name__)


class BlogUserService:
    """Application service for blog users.

    Creating a user only builds the record; it is stored by a separate call to
    `add_user`. The storage key is passed independently of the record, so a
    record may be stored under a key other than its own ``id`` unless the
    service is built with ``enforce_matching_ids=True``.

    Args:
        registry: The store that owns added records.
        id_generator: Source of fresh user ids.
        enforce_matching_ids: When True, `add_user` rejects keys that differ
            from ``user.id`` with `UserIdMismatchError`.
    """

    def __init__(
        self,
        registry: UserRegistry,
        id_generator: IdGenerator,
        *,
        enforce_matching_ids: bool = False,
    ) -> None:
        self.registry = registry
        self._id_generator = id_generator
        self._enforce_matching_ids = enforce_matching_ids

    def create_user(self, name: str, role: Role = Role.READER) -> BlogUser:
        """Build a new user with a freshly generated id. Does not store it."""
        user = BlogUser(id=self._id_generator.new_id(), name=name, role=role)
        logger.debug("Created user %s", user)
        return user

    def add_user(self, user_id: str, user: BlogUser) -> None:
        """Store ``user`` under ``user_id``.

        Raises:
            UserAlreadyExistsError: If ``user_id`` is already taken.
            UserIdMismatchError: In strict mode, if ``user_id != user.id``.
        """
        if self._enforce_matching_ids and user_id != user.id:
            logger.debug("Rejected user %s under key %r", user, user_id)
            raise UserIdMismatchError(user_id, user.id)
        try:
            self.registry.add(user_id, user)
        except UserRegistryError as e:
            logger.debug("Failed to add user %r: %s", user_id, e)
            raise
        logger.debug("Added user %s under key %r", user, user_id)

    def get_user(self, user_id: str) -> BlogUser:
        """Return the user stored under ``user_id``.

        Raises:
            UserNotFoundError: If nothing is stored under ``user_id``.
        """
        try:
            user = self.registry.get(user_id)
        except UserRegistryError as e:
            logger.debug("Failed to get user %r: %s", user_id, e)
            raise
        logger.debug("Fetched user %r", user_id)
        return user

    def has_user(self, user_id: str) -> bool:
        """Return True if a user is stored under ``user_id``."""
        return user_id in self.registry
