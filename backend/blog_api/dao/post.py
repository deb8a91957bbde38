"""
Post Data Access Object (DAO).

WHAT: Database operations for the Post model.
"""

from typing import List
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession

from blog_api.dao.base import BaseDAO
from blog_api.models.post import Post


class PostDAO(BaseDAO[Post]):
    """
    Data Access Object for Post model.

    HOW: Extends BaseDAO with the owner lookup used by GET /posts?userId=.
    """

    def __init__(self, session: AsyncSession):
        """
        Initialize PostDAO.

        Args:
            session: Async database session
        """
        super().__init__(Post, session)

    async def get_by_user(self, user_id: UUID) -> List[Post]:
        """
        Get all posts owned by a user.

        Args:
            user_id: Owning user ID

        Returns:
            List of posts (empty if the user has none or doesn't exist)
        """
        return await self.get_all(user_id=user_id)
