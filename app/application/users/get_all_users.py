"""
Use case: List all users.

Returns the full user directory in insertion order.
"""

from app.application.users.dtos import UserResult
from app.domain.users.ports import UserRepository


class GetAllUsersUseCase:
    """Application service for listing users."""

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    def execute(self) -> list[UserResult]:
        """Return every user as a UserResult DTO."""
        return [UserResult.from_entity(u) for u in self._user_repo.list_all()]
