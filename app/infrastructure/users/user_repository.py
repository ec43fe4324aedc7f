"""
Adapter: In-memory user directory.

Implements the UserRepository port over a fixed list created once
at import time. The list is never mutated.
"""

from typing import Optional

from app.domain.users.entities import User
from app.domain.users.ports import UserRepository

DEFAULT_USERS: tuple[User, ...] = (
    User(username="john-doe", email="john@test.com"),
    User(username="jane-doe", email="jane@test.com"),
)


class InMemoryUserRepository(UserRepository):
    """Read-only repository backed by a tuple of users."""

    def __init__(self, users: tuple[User, ...] = DEFAULT_USERS) -> None:
        self._users = tuple(users)

    def list_all(self) -> list[User]:
        """Return every user, in insertion order."""
        return list(self._users)

    def find_by_username(self, username: str) -> Optional[User]:
        """Return the first user whose username equals ``username``."""
        return next((u for u in self._users if u.username == username), None)
