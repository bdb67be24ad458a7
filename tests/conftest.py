"""Global pytest fixtures for BLOGUSER."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from bloguser.adapters.id_generators import SimpleIdGenerator, UUIDv4Generator
from bloguser.adapters.user_registry import InMemoryUserRegistry
from bloguser.service_layer.user_service import BlogUserService

# pylint: disable=redefined-outer-name


@pytest.fixture
def make_service() -> Callable[..., BlogUserService]:
    """Factory for user services backed by a fresh in-memory registry.

    Example:
        ```py
        def test_something(make_service):
            service = make_service(sequential_ids=True, enforce_matching_ids=True)
        ```
    """

    def _make(
        *, sequential_ids: bool = False, enforce_matching_ids: bool = False
    ) -> BlogUserService:
        id_generator = SimpleIdGenerator() if sequential_ids else UUIDv4Generator()
        return BlogUserService(
            InMemoryUserRegistry(),
            id_generator,
            enforce_matching_ids=enforce_matching_ids,
        )

    return _make


@pytest.fixture
def service(make_service) -> BlogUserService:
    """A user service with UUIDv4 ids and an empty registry."""
    return make_service()
