"""
Post API endpoints.

WHAT: RESTful API for post CRUD operations, with listing optionally
filtered by owner (GET /posts?userId=...).
"""

from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from blog_api.db.session import get_db
from blog_api.schemas.post import PostCreate, PostResponse, PostUpdate
from blog_api.services.post_service import PostService


router = APIRouter(prefix="/posts", tags=["posts"])


@router.get(
    "",
    response_model=List[PostResponse],
    summary="List posts",
)
async def list_posts(
    user_id: Optional[UUID] = Query(
        default=None,
        alias="userId",
        description="Only return posts owned by this user",
    ),
    db: AsyncSession = Depends(get_db),
) -> List[PostResponse]:
    """List posts, optionally filtered by owning user."""
    posts = await PostService(db).list_posts(user_id=user_id)
    return [PostResponse.model_validate(p) for p in posts]


@router.get(
    "/{post_id}",
    response_model=PostResponse,
    summary="Get post",
)
async def get_post(post_id: UUID, db: AsyncSession = Depends(get_db)) -> PostResponse:
    """
    Get a post by ID.

    Raises:
        ResourceNotFoundError (404): If the post doesn't exist
    """
    post = await PostService(db).get_post(post_id)
    return PostResponse.model_validate(post)


@router.post(
    "",
    response_model=PostResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create post",
)
async def create_post(data: PostCreate, db: AsyncSession = Depends(get_db)) -> PostResponse:
    """
    Create a new post.

    Raises:
        UserNotFoundError (400): If userId doesn't name an existing user
    """
    post = await PostService(db).create_post(data)
    return PostResponse.model_validate(post)


@router.put(
    "/{post_id}",
    response_model=PostResponse,
    summary="Update post",
    description="Partial update of title and/or content",
)
async def update_post(
    post_id: UUID,
    data: PostUpdate,
    db: AsyncSession = Depends(get_db),
) -> PostResponse:
    """
    Partially update a post.

    Raises:
        ResourceNotFoundError (404): If the post doesn't exist
    """
    post = await PostService(db).update_post(post_id, data)
    return PostResponse.model_validate(post)


@router.delete(
    "/{post_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete post",
)
async def delete_post(post_id: UUID, db: AsyncSession = Depends(get_db)) -> None:
    """
    Delete a post. Does not cascade to comments.

    Raises:
        ResourceNotFoundError (404): If the post doesn't exist
    """
    await PostService(db).delete_post(post_id)
