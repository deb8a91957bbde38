"""
Comment Data Access Object (DAO).

WHAT: Database operations for the Comment model.
"""

from typing import List
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession

from blog_api.dao.base import BaseDAO
from blog_api.models.comment import Comment


class CommentDAO(BaseDAO[Comment]):
    """Data Access Object for Comment model."""

    def __init__(self, session: AsyncSession):
        """
        Initialize CommentDAO.

        Args:
            session: Async database session
        """
        super().__init__(Comment, session)

    async def get_by_post(self, post_id: UUID) -> List[Comment]:
        """
        Get all comments on a post.

        Args:
            post_id: Post ID

        Returns:
            List of comments on the post
        """
        return await self.get_all(post_id=post_id)

    async def get_by_user(self, user_id: UUID) -> List[Comment]:
        """
        Get all comments written by a user.

        Args:
            user_id: Author user ID

        Returns:
            List of comments by the user
        """
        return await self.get_all(user_id=user_id)
