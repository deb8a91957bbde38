"""
Comment Service.

WHAT: Orchestrates comment requests. Comments are created, read and
deleted; there is no update operation.
"""

import logging
from typing import List, Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from blog_api.core.exceptions import ResourceNotFoundError
from blog_api.dao.comment import CommentDAO
from blog_api.dao.post import PostDAO
from blog_api.dao.user import UserDAO
from blog_api.models.comment import Comment
from blog_api.models.factory import EntityFactory
from blog_api.schemas.comment import CommentCreate
from blog_api.services.validation import IntegrityValidator


logger = logging.getLogger(__name__)


class CommentService:
    """Service for comment operations."""

    def __init__(self, session: AsyncSession, factory: Optional[EntityFactory] = None):
        """
        Initialize CommentService.

        Args:
            session: Async database session
            factory: Entity factory (defaults to uuid4 ids and UTC now)
        """
        self.session = session
        self.comment_dao = CommentDAO(session)
        self.validator = IntegrityValidator(
            users=UserDAO(session),
            posts=PostDAO(session),
            factory=factory,
        )

    async def list_comments(self, post_id: Optional[UUID] = None) -> List[Comment]:
        """
        List comments, optionally only those on one post.

        Args:
            post_id: Post filter; None returns every comment
        """
        if post_id is not None:
            logger.info(f"Fetching comments for post: {post_id}")
            return await self.comment_dao.get_by_post(post_id)
        logger.info("Fetching all comments")
        return await self.comment_dao.get_all()

    async def get_comment(self, comment_id: UUID) -> Comment:
        """
        Get a comment by ID.

        Raises:
            ResourceNotFoundError: If the comment doesn't exist
        """
        logger.info(f"Fetching comment by ID: {comment_id}")
        comment = await self.comment_dao.get_by_id(comment_id)
        if not comment:
            raise ResourceNotFoundError.for_id("Comment", comment_id)
        return comment

    async def create_comment(self, data: CommentCreate) -> Comment:
        """
        Create a new comment.

        Raises:
            PostNotFoundError: If the post doesn't exist
            UserNotFoundError: If the post exists but the user doesn't
        """
        logger.info(f"Creating new comment on post: {data.post_id}")
        comment = await self.validator.validate_comment_create(data)
        comment = await self.comment_dao.save(comment)
        logger.info(f"Comment created successfully with ID: {comment.id}")
        return comment

    async def delete_comment(self, comment_id: UUID) -> None:
        """
        Delete a comment.

        Raises:
            ResourceNotFoundError: If the comment doesn't exist
        """
        logger.info(f"Deleting comment: {comment_id}")
        if not await self.comment_dao.delete(comment_id):
            raise ResourceNotFoundError.for_id("Comment", comment_id)
        logger.info(f"Comment deleted successfully: {comment_id}")
