"""
FastAPI router for the users bounded context.

All routes delegate to use cases. No business logic here.
Error mapping is handled by centralized error handlers.
"""

from fastapi import APIRouter, Depends

from app.application.users.dtos import GetUserByUsernameQuery
from app.application.users.get_all_users import GetAllUsersUseCase
from app.application.users.get_user_by_username import GetUserByUsernameUseCase
from app.interfaces.users.dependencies import (
    get_all_users_use_case,
    get_user_by_username_use_case,
)
from app.interfaces.users.schemas import UserResponse
from app.shared.errors.schemas import ProblemDetail

router = APIRouter(prefix="/users", tags=["users"])


@router.get(
    "",
    response_model=list[UserResponse],
    summary="List users",
    description="Return every user in the directory, in insertion order.",
)
def get_all_users(
    use_case: GetAllUsersUseCase = Depends(get_all_users_use_case),
) -> list[UserResponse]:
    """List all users."""
    return [
        UserResponse(username=r.username, email=r.email)
        for r in use_case.execute()
    ]


@router.get(
    "/{username}",
    response_model=UserResponse,
    responses={404: {"model": ProblemDetail}},
    summary="Get user by username",
    description="Return a single user. Unknown usernames yield a localized 404.",
)
def get_user_by_username(
    username: str,
    use_case: GetUserByUsernameUseCase = Depends(get_user_by_username_use_case),
) -> UserResponse:
    """Look up a user by exact username."""
    result = use_case.execute(GetUserByUsernameQuery(username=username))
    return UserResponse(username=result.username, email=result.email)
