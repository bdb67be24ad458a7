"""Module including the user record and role value objects."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Role(Enum):
    """Enumeration of blog user roles.

    Roles are labels only; nothing in BLOGUSER enforces permissions.
    """

    WRITER = "writer"
    READER = "reader"

    @classmethod
    def parse(cls, text: str) -> Role:
        """Return the role named by ``text``.

        Matches either the member name or its value, case-insensitively, so
        ``"WRITER"``, ``"writer"`` and ``" Writer "`` all resolve to
        ``Role.WRITER``.

        Args:
            text: The role name or value to parse.

        Returns:
            Role: The matching role.

        Raises:
            ValueError: If ``text`` names no role.
        """
        normalized = text.strip().lower()
        for role in cls:
            if normalized in (role.value, role.name.lower()):
                return role
        choices = ", ".join(role.value for role in cls)
        raise ValueError(f"Unknown role {text!r}; expected one of: {choices}.")


@dataclass(frozen=True)
class BlogUser:
    """Value object describing a blog user.

    Attributes:
        id: Opaque unique identifier generated when the user is created.
        name: Display name supplied by the caller.
        role: The user's role. Defaults to ``Role.READER``.
    """

    id: str  # pylint: disable=invalid-name
    name: str
    role: Role = Role.READER

    def to_dict(self) -> dict[str, str]:
        """Return a JSON-friendly mapping of the record."""
        return {"id": self.id, "name": self.name, "role": self.role.value}
