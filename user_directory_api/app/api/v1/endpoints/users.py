"""
User endpoints for API v1.

CRUD routes over the upstream user directory.  Reads reflect the
upstream state; create, update and delete answer with the resulting
record but do not persist anything.  Errors raised by the service are
rendered by the ``ServiceError`` handler registered in ``main``.
"""

from typing import Annotated, List

from fastapi import APIRouter, Depends, Path, Query, status

from user_directory_api.app.api.deps import get_user_service
from user_directory_api.app.schemas.response import ApiResponse
from user_directory_api.app.schemas.user import User, UserCreate, UserQuery, UserUpdate
from user_directory_api.app.services.user_service import UserService

router = APIRouter()

UserId = Annotated[int, Path(gt=0, description="Positive user identifier")]


@router.get("", response_model=ApiResponse[List[User]], response_model_exclude_none=True)
async def list_users(
    query: Annotated[UserQuery, Query()],
    service: UserService = Depends(get_user_service),
) -> ApiResponse[List[User]]:
    """Return all users, optionally filtered by ``username`` and ``email``.

    Both filters are exact, case-insensitive matches and may be
    combined.
    """
    users = await service.find_users(query.username, query.email)
    return ApiResponse(data=users)


@router.get("/{user_id}", response_model=ApiResponse[User], response_model_exclude_none=True)
async def get_user(user_id: UserId, service: UserService = Depends(get_user_service)) -> ApiResponse[User]:
    """Retrieve a single user by ID.  Returns HTTP 404 if it does not exist."""
    user = await service.get_user(user_id)
    return ApiResponse(data=user)


@router.post(
    "",
    response_model=ApiResponse[User],
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
async def create_user(user_in: UserCreate, service: UserService = Depends(get_user_service)) -> ApiResponse[User]:
    """Create a user.

    The new record gets the next free ID and is returned, but the
    upstream directory is read-only so it will not show up in later
    listings.
    """
    user = await service.create_user(user_in)
    return ApiResponse(data=user, message="User created successfully")


@router.api_route(
    "/{user_id}",
    methods=["PUT", "PATCH"],
    response_model=ApiResponse[User],
    response_model_exclude_none=True,
)
async def update_user(
    user_id: UserId,
    user_in: UserUpdate,
    service: UserService = Depends(get_user_service),
) -> ApiResponse[User]:
    """Merge the provided fields into an existing user.

    Only fields present in the body change; ``address`` and ``company``
    are replaced as whole objects.
    """
    user = await service.update_user(user_id, user_in)
    return ApiResponse(data=user, message="User updated successfully")


@router.delete("/{user_id}", response_model=ApiResponse[None], response_model_exclude_none=True)
async def delete_user(user_id: UserId, service: UserService = Depends(get_user_service)) -> ApiResponse[None]:
    """Delete a user by ID.  Returns HTTP 404 if it does not exist."""
    await service.delete_user(user_id)
    return ApiResponse(message="User deleted successfully")
