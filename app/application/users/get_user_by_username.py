"""
Use case: Look up a user by username.

Raises ResourceNotFoundError when the username is unknown. The error
is never caught here; the centralized error handlers turn it into a
localized 404 response.
"""

import logging

from app.application.users.dtos import GetUserByUsernameQuery, UserResult
from app.domain.users.errors import ResourceNotFoundError
from app.domain.users.ports import MessageResolver, UserRepository

logger = logging.getLogger(__name__)

USER_NOT_FOUND = "user.not.found"
USER_NOT_FOUND_LOG = "user.not.found.log"


class GetUserByUsernameUseCase:
    """Application service for single-user lookup."""

    def __init__(
        self, user_repo: UserRepository, messages: MessageResolver
    ) -> None:
        self._user_repo = user_repo
        self._messages = messages

    def execute(self, query: GetUserByUsernameQuery) -> UserResult:
        """Execute the lookup.

        Args:
            query: Input DTO with the username.

        Returns:
            The matching user.

        Raises:
            ResourceNotFoundError: If no user has this exact username.
        """
        user = self._user_repo.find_by_username(query.username)
        if user is None:
            logger.error(
                self._messages.get_log_message(USER_NOT_FOUND_LOG, query.username)
            )
            raise ResourceNotFoundError(USER_NOT_FOUND, query.username)
        return UserResult.from_entity(user)
