"""
Dependency injection for the users bounded context.

Provides FastAPI dependency functions that wire the adapters created
in ``create_app`` (and kept on ``app.state``) into use cases via
constructor injection.
"""

from fastapi import Request

from app.application.users.get_all_users import GetAllUsersUseCase
from app.application.users.get_user_by_username import GetUserByUsernameUseCase
from app.domain.users.ports import MessageResolver, UserRepository


def get_user_repository(request: Request) -> UserRepository:
    """Return the application's user repository."""
    return request.app.state.user_repository


def get_message_resolver(request: Request) -> MessageResolver:
    """Return the application's message resolver."""
    return request.app.state.message_source


def get_all_users_use_case(request: Request) -> GetAllUsersUseCase:
    """Build GetAllUsersUseCase with its infrastructure dependencies."""
    return GetAllUsersUseCase(user_repo=get_user_repository(request))


def get_user_by_username_use_case(request: Request) -> GetUserByUsernameUseCase:
    """Build GetUserByUsernameUseCase with its infrastructure dependencies."""
    return GetUserByUsernameUseCase(
        user_repo=get_user_repository(request),
        messages=get_message_resolver(request),
    )
