"""ID generators for BLOGUSER."""

import threading
import uuid

from ulid import monotonic

from bloguser.interfaces.id_generator import IdGenerator

# pylint: disable=too-few-public-methods


class UUIDv4Generator(IdGenerator):
    """UUIDv4 generator (the default scheme for user ids).

    Ids are 122 random bits rendered in the canonical 36-character form
    (``xxxxxxxx-xxxx-4xxx-yxxx-xxxxxxxxxxxx``). Collisions are possible in
    principle but negligible in practice.
    """

    def new_id(self) -> str:
        """Generate a new UUID."""
        return str(uuid.uuid4())


class ULIDGenerator(IdGenerator):
    """Thread-safe monotonic ULID generator.

    ULIDs are 26-character, lexicographically sortable identifiers made of a
    millisecond timestamp and a random component. Uses the `ulid-py` library.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()

    def new_id(self) -> str:
        """Generate a new ULID (serialized across threads)."""
        with self._lock:
            return str(monotonic.new())


class SimpleIdGenerator(IdGenerator):
    """Sequential, zero-padded ids.

    Note:
        Not suitable for production use; primarily for tests and demos where
        predictable ids make output easy to read.
    """

    def __init__(self, length: int = 8) -> None:
        self._lock = threading.Lock()
        self._counter = 0
        self._length = length

    def new_id(self) -> str:
        """Generate the next id in sequence."""
        with self._lock:
            self._counter += 1
            return f"{self._counter:0{self._length}d}"
