"""
Data Transfer Objects for the users application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior.
"""

from dataclasses import dataclass

from app.domain.users.entities import User


@dataclass(frozen=True)
class GetUserByUsernameQuery:
    """Input DTO for looking up a single user.

    Attributes:
        username: Exact, case-sensitive username to match.
    """

    username: str


@dataclass(frozen=True)
class UserResult:
    """Output DTO for a single user.

    Attributes:
        username: Unique username.
        email: Contact email address.
    """

    username: str
    email: str

    @classmethod
    def from_entity(cls, user: User) -> "UserResult":
        return cls(username=user.username, email=user.email)
