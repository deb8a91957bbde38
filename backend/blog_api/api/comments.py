"""
Comment API endpoints.

WHAT: Create, read and delete comments; list optionally filtered by post
(GET /comments?postId=...). There is no update endpoint.
"""

from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from blog_api.db.session import get_db
from blog_api.schemas.comment import CommentCreate, CommentResponse
from blog_api.services.comment_service import CommentService


router = APIRouter(prefix="/comments", tags=["comments"])


@router.get(
    "",
    response_model=List[CommentResponse],
    summary="List comments",
)
async def list_comments(
    post_id: Optional[UUID] = Query(
        default=None,
        alias="postId",
        description="Only return comments on this post",
    ),
    db: AsyncSession = Depends(get_db),
) -> List[CommentResponse]:
    """List comments, optionally filtered by post."""
    comments = await CommentService(db).list_comments(post_id=post_id)
    return [CommentResponse.model_validate(c) for c in comments]


@router.get(
    "/{comment_id}",
    response_model=CommentResponse,
    summary="Get comment",
)
async def get_comment(comment_id: UUID, db: AsyncSession = Depends(get_db)) -> CommentResponse:
    """
    Get a comment by ID.

    Raises:
        ResourceNotFoundError (404): If the comment doesn't exist
    """
    comment = await CommentService(db).get_comment(comment_id)
    return CommentResponse.model_validate(comment)


@router.post(
    "",
    response_model=CommentResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create comment",
)
async def create_comment(
    data: CommentCreate,
    db: AsyncSession = Depends(get_db),
) -> CommentResponse:
    """
    Create a new comment.

    Raises:
        PostNotFoundError (400): If postId doesn't name an existing post
        UserNotFoundError (400): If the post exists but userId doesn't
    """
    comment = await CommentService(db).create_comment(data)
    return CommentResponse.model_validate(comment)


@router.delete(
    "/{comment_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete comment",
)
async def delete_comment(comment_id: UUID, db: AsyncSession = Depends(get_db)) -> None:
    """
    Delete a comment.

    Raises:
        ResourceNotFoundError (404): If the comment doesn't exist
    """
    await CommentService(db).delete_comment(comment_id)
