"""Interface for the store that maps user ids to user records.

Defines the `UserRegistry` abstraction: an owned key-value container with
insert-once semantics. Keys are chosen by the caller and are not required to
match the record's own ``id``.
"""

from __future__ import annotations

import abc
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from bloguser.domain.model import BlogUser


class UserRegistry(abc.ABC):
    """User id → user record store with duplicate detection.

    Rules:
        • Each key maps to at most one record.
        • A key, once added, is never rebound or removed.
        • Failed operations leave the registry unchanged.
    """

    # -------- Query --------

    @abc.abstractmethod
    def get(self, user_id: str) -> BlogUser:
        """Return the record stored under a key.

        Args:
            user_id: The key to look up.

        Returns:
            BlogUser: The record exactly as it was added.

        Raises:
            UserNotFoundError: If nothing is stored under ``user_id``.
        """

    @abc.abstractmethod
    def __contains__(self, user_id: object) -> bool:
        """Return True if a record is stored under ``user_id``."""

    @abc.abstractmethod
    def __len__(self) -> int:
        """Return the number of stored records."""

    # -------- Command --------

    @abc.abstractmethod
    def add(self, user_id: str, user: BlogUser) -> None:
        """Store a record under a key (no duplicates allowed).

        Behavior:
            • If ``user_id`` is free, bind it to ``user``.
            • If ``user_id`` is taken, raise and keep the existing record,
              even when ``user`` equals it.

        Args:
            user_id: The key to store under.
            user: The record to store.

        Raises:
            UserAlreadyExistsError: If ``user_id`` is already present.
        """
