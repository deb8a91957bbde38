"""
User management API endpoints.

WHAT: RESTful API for user CRUD operations.

HOW: FastAPI router; every handler delegates to UserService. Rejections
are raised as AppException subclasses and turned into status codes by the
exception handlers:
- 400 InvalidAgeError / EmailConflictError / request validation
- 404 ResourceNotFoundError
"""

from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from blog_api.db.session import get_db
from blog_api.schemas.user import UserCreate, UserResponse, UserUpdate
from blog_api.services.user_service import UserService


router = APIRouter(prefix="/users", tags=["users"])


@router.get(
    "",
    response_model=List[UserResponse],
    summary="List users",
)
async def list_users(db: AsyncSession = Depends(get_db)) -> List[UserResponse]:
    """Return every user."""
    users = await UserService(db).list_users()
    return [UserResponse.model_validate(u) for u in users]


@router.get(
    "/{user_id}",
    response_model=UserResponse,
    summary="Get user",
)
async def get_user(user_id: UUID, db: AsyncSession = Depends(get_db)) -> UserResponse:
    """
    Get a user by ID.

    Raises:
        ResourceNotFoundError (404): If the user doesn't exist
    """
    user = await UserService(db).get_user(user_id)
    return UserResponse.model_validate(user)


@router.post(
    "",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create user",
)
async def create_user(data: UserCreate, db: AsyncSession = Depends(get_db)) -> UserResponse:
    """
    Create a new user.

    Raises:
        InvalidAgeError (400): If age is negative
        EmailConflictError (400): If the email is already used
    """
    user = await UserService(db).create_user(data)
    return UserResponse.model_validate(user)


@router.put(
    "/{user_id}",
    response_model=UserResponse,
    summary="Update user",
    description="Partial update: only supplied, non-null fields change",
)
async def update_user(
    user_id: UUID,
    data: UserUpdate,
    db: AsyncSession = Depends(get_db),
) -> UserResponse:
    """
    Partially update a user.

    Raises:
        ResourceNotFoundError (404): If the user doesn't exist
        InvalidAgeError (400): If a negative age is supplied
        EmailConflictError (400): If the new email is already used
    """
    user = await UserService(db).update_user(user_id, data)
    return UserResponse.model_validate(user)


@router.delete(
    "/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete user",
)
async def delete_user(user_id: UUID, db: AsyncSession = Depends(get_db)) -> None:
    """
    Delete a user. Does not cascade to posts or comments.

    Raises:
        ResourceNotFoundError (404): If the user doesn't exist
    """
    await UserService(db).delete_user(user_id)
