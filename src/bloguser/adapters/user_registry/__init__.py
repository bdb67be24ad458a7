"""Contains concrete implementations of the UserRegistry interface."""

from .memory import InMemoryUserRegistry

__all__ = [
    "InMemoryUserRegistry",
]
