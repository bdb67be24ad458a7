"""Interface for ID generators."""

import abc

# pylint: disable=too-few-public-methods


class IdGenerator(abc.ABC):
    """Contract for an ID generator.

    Implementations must never return the same identifier twice for the
    lifetime of the instance, including when called from several threads.
    """

    @abc.abstractmethod
    def new_id(self) -> str:
        """Generate a new unique identifier."""
