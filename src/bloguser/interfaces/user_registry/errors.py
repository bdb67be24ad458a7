"""Errors raised by UserRegistry implementations and the user service."""


class UserRegistryError(Exception):
    """Base class for UserRegistry errors."""


class UserAlreadyExistsError(UserRegistryError):
    """Raised when adding a user under a key the registry already holds.

    Attributes:
        user_id (str): The key that is already taken.
    """

    def __init__(self, user_id: str):
        super().__init__(f"User '{user_id}' already exists.")
        self.user_id = user_id


class UserNotFoundError(UserRegistryError):
    """Raised when looking up a key the registry does not hold.

    Attributes:
        user_id (str): The key that was not found.
    """

    def __init__(self, user_id: str):
        super().__init__(f"User '{user_id}' not found.")
        self.user_id = user_id


class UserIdMismatchError(UserRegistryError):
    """Raised in strict mode when the storage key differs from the record's own id.

    Attributes:
        user_id (str): The key the caller asked to store under.
        record_id (str): The id carried by the record.
    """

    def __init__(self, user_id: str, record_id: str):
        super().__init__(
            f"Cannot store user '{record_id}' under mismatched key '{user_id}'."
        )
        self.user_id = user_id
        self.record_id = record_id
