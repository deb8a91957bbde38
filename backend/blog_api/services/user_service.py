"""
User Service.

WHAT: Orchestrates one user request: load, validate, persist, log.

WHY: Routers stay thin and the validation layer stays free of writes.
This is also where a unique-index violation from the database is turned
back into the same EmailConflictError the pre-check raises, closing the
window between check and insert.
"""

import logging
from typing import List, Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from blog_api.core.exceptions import (
    EmailConflictError,
    ResourceAlreadyExistsError,
    ResourceNotFoundError,
)
from blog_api.dao.post import PostDAO
from blog_api.dao.user import UserDAO
from blog_api.models.factory import EntityFactory
from blog_api.models.user import User
from blog_api.schemas.user import UserCreate, UserUpdate
from blog_api.services.validation import IntegrityValidator


logger = logging.getLogger(__name__)


class UserService:
    """
    Service for user operations.

    HOW: Coordinates UserDAO and IntegrityValidator.
    """

    def __init__(self, session: AsyncSession, factory: Optional[EntityFactory] = None):
        """
        Initialize UserService.

        Args:
            session: Async database session
            factory: Entity factory (defaults to uuid4 ids and UTC now)
        """
        self.session = session
        self.user_dao = UserDAO(session)
        self.validator = IntegrityValidator(
            users=self.user_dao,
            posts=PostDAO(session),
            factory=factory,
        )

    async def list_users(self) -> List[User]:
        """Return every user."""
        logger.info("Fetching all users")
        return await self.user_dao.get_all()

    async def get_user(self, user_id: UUID) -> User:
        """
        Get a user by ID.

        Raises:
            ResourceNotFoundError: If the user doesn't exist
        """
        logger.info(f"Fetching user by ID: {user_id}")
        user = await self.user_dao.get_by_id(user_id)
        if not user:
            raise ResourceNotFoundError.for_id("User", user_id)
        return user

    async def _save(self, user: User) -> User:
        # Read before saving: a failed flush rolls back and expires the instance
        email = user.email
        try:
            return await self.user_dao.save(user)
        except ResourceAlreadyExistsError as e:
            # Lost the race with a concurrent insert of the same email
            logger.warning(f"Email already exists (unique index): {email}")
            raise EmailConflictError(email) from e

    async def create_user(self, data: UserCreate) -> User:
        """
        Create a new user.

        Args:
            data: Creation request

        Returns:
            The saved user

        Raises:
            EmailConflictError: If the email is taken
            InvalidAgeError: If age is negative
        """
        logger.info(f"Creating new user: {data.email}")
        user = await self.validator.validate_user_create(data)
        user = await self._save(user)
        logger.info(f"User created successfully with ID: {user.id}")
        return user

    async def update_user(self, user_id: UUID, patch: UserUpdate) -> User:
        """
        Partially update a user.

        Raises:
            ResourceNotFoundError: If the user doesn't exist
            InvalidAgeError: If a negative age is supplied
            EmailConflictError: If the new email is taken
        """
        logger.info(f"Updating user: {user_id}")
        existing = await self.get_user(user_id)
        user = await self.validator.validate_user_update(existing, patch)
        user = await self._save(user)
        logger.info(f"User updated successfully: {user_id}")
        return user

    async def delete_user(self, user_id: UUID) -> None:
        """
        Delete a user. Posts and comments referencing it are left in place.

        Raises:
            ResourceNotFoundError: If the user doesn't exist
        """
        logger.info(f"Deleting user: {user_id}")
        if not await self.user_dao.delete(user_id):
            raise ResourceNotFoundError.for_id("User", user_id)
        logger.info(f"User deleted successfully: {user_id}")
