"""Fixtures for id_generator contract tests."""

from collections.abc import Iterable

import pytest

from bloguser.adapters.id_generators import (
    SimpleIdGenerator,
    ULIDGenerator,
    UUIDv4Generator,
)
from bloguser.interfaces.id_generator import IdGenerator


@pytest.fixture(params=["uuid4", "ulid", "simple"])
def id_generator(
    request: pytest.FixtureRequest,
) -> Iterable[IdGenerator]:
    """Return a fresh IdGenerator instance for the requested backend.

    Supported params:
      - `"uuid4"` → UUIDv4Generator
      - `"ulid"` → ULIDGenerator
      - `"simple"` → SimpleIdGenerator

    Each invocation yields a brand-new IdGenerator instance for isolation.
    """

    match request.param:
        case "uuid4":
            yield UUIDv4Generator()
        case "ulid":
            yield ULIDGenerator()
        case "simple":
            yield SimpleIdGenerator()
        case _:
            raise ValueError(f"unknown id generator type: {request.param}")
