"""In-memory implementation of the UserRegistry interface."""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING

from bloguser.interfaces.user_registry import (
    UserAlreadyExistsError,
    UserNotFoundError,
    UserRegistry,
)

if TYPE_CHECKING:
    from bloguser.domain.model import BlogUser


class InMemoryUserRegistry(UserRegistry):
    """Dict-backed UserRegistry.

    Each call holds an internal lock, so the existence check and the insert in
    `add` happen as one step: when several threads add the same key, exactly
    one wins. Nothing is persisted; the records live as long as the instance.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._users: dict[str, BlogUser] = {}

    def get(self, user_id: str) -> BlogUser:
        with self._lock:
            try:
                return self._users[user_id]
            except KeyError:
                raise UserNotFoundError(user_id) from None

    def __contains__(self, user_id: object) -> bool:
        with self._lock:
            return user_id in self._users

    def __len__(self) -> int:
        with self._lock:
            return len(self._users)

    def add(self, user_id: str, user: BlogUser) -> None:
        with self._lock:
            if user_id in self._users:
                raise UserAlreadyExistsError(user_id)
            self._users[user_id] = user
