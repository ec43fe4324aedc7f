"""
Port interfaces (ABCs) for the users bounded context.

Infrastructure adapters implement these interfaces.
The domain layer never depends on concrete implementations.
"""

from abc import ABC, abstractmethod
from typing import Optional

from app.domain.users.entities import User


class UserRepository(ABC):
    """Port for reading users."""

    @abstractmethod
    def list_all(self) -> list[User]:
        """Return every user, in insertion order."""
        raise NotImplementedError

    @abstractmethod
    def find_by_username(self, username: str) -> Optional[User]:
        """Return the user with exactly this username, or None."""
        raise NotImplementedError


class MessageResolver(ABC):
    """Port for turning message keys into display strings."""

    @abstractmethod
    def get_message(
        self, key: str, *args: str, locale: Optional[str] = None
    ) -> str:
        """Resolve a client-facing message.

        Args:
            key: Message key, e.g. ``user.not.found``.
            *args: Values substituted into ``{0}``, ``{1}``, ... in order.
            locale: Locale tag. None means the default locale.

        Returns:
            The formatted message.
        """
        raise NotImplementedError

    @abstractmethod
    def get_log_message(self, key: str, *args: str) -> str:
        """Resolve a diagnostic message in the default locale."""
        raise NotImplementedError
