"""Fixtures for user_registry contract tests."""

from collections.abc import Iterable

import pytest

from bloguser.adapters.user_registry import InMemoryUserRegistry
from bloguser.domain.model import BlogUser, Role
from bloguser.interfaces.user_registry import UserRegistry


@pytest.fixture(params=["memory"])
def user_registry(
    request: pytest.FixtureRequest,
) -> Iterable[UserRegistry]:
    """Return a fresh, empty UserRegistry for the requested backend.

    Supported params:
      - `"memory"` → InMemoryUserRegistry

    Extend by adding new identifiers to `params` and branching below.
    """

    match request.param:
        case "memory":
            yield InMemoryUserRegistry()
        case _:
            raise ValueError(f"unknown user registry type: {request.param}")


@pytest.fixture
def john() -> BlogUser:
    """A reader named John Doe."""
    return BlogUser(id="user-john", name="John Doe")


@pytest.fixture
def jane() -> BlogUser:
    """A writer named Jane Roe."""
    return BlogUser(id="user-jane", name="Jane Roe", role=Role.WRITER)
