"""
User Data Access Object.

WHY: UserDAO provides database operations for the User model, following
the DAO pattern for separation of concerns and testability. Email lookups
go through the generic filters (exists(email=...)), which compare exactly
as stored, matching the case-sensitive unique index.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from blog_api.dao.base import BaseDAO
from blog_api.models.user import User


class UserDAO(BaseDAO[User]):
    """Data Access Object for User model."""

    def __init__(self, session: AsyncSession):
        """
        Initialize UserDAO.

        Args:
            session: Async database session
        """
        super().__init__(User, session)
