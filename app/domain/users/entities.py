"""
Domain entities for the users bounded context.

Entities contain no framework imports and no IO operations.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class User:
    """A directory user, identified by a unique username."""

    username: str
    email: str
