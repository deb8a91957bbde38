"""
Post Service.

WHAT: Orchestrates post requests: owner check on create, partial update,
optional filtering by owner on list.
"""

import logging
from typing import List, Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from blog_api.core.exceptions import ResourceNotFoundError
from blog_api.dao.post import PostDAO
from blog_api.dao.user import UserDAO
from blog_api.models.factory import EntityFactory
from blog_api.models.post import Post
from blog_api.schemas.post import PostCreate, PostUpdate
from blog_api.services.validation import IntegrityValidator


logger = logging.getLogger(__name__)


class PostService:
    """Service for post operations."""

    def __init__(self, session: AsyncSession, factory: Optional[EntityFactory] = None):
        """
        Initialize PostService.

        Args:
            session: Async database session
            factory: Entity factory (defaults to uuid4 ids and UTC now)
        """
        self.session = session
        self.post_dao = PostDAO(session)
        self.validator = IntegrityValidator(
            users=UserDAO(session),
            posts=self.post_dao,
            factory=factory,
        )

    async def list_posts(self, user_id: Optional[UUID] = None) -> List[Post]:
        """
        List posts, optionally only those owned by one user.

        Args:
            user_id: Owner filter; None returns every post
        """
        if user_id is not None:
            logger.info(f"Fetching posts for user: {user_id}")
            return await self.post_dao.get_by_user(user_id)
        logger.info("Fetching all posts")
        return await self.post_dao.get_all()

    async def get_post(self, post_id: UUID) -> Post:
        """
        Get a post by ID.

        Raises:
            ResourceNotFoundError: If the post doesn't exist
        """
        logger.info(f"Fetching post by ID: {post_id}")
        post = await self.post_dao.get_by_id(post_id)
        if not post:
            raise ResourceNotFoundError.for_id("Post", post_id)
        return post

    async def create_post(self, data: PostCreate) -> Post:
        """
        Create a new post.

        Raises:
            UserNotFoundError: If the owning user doesn't exist
        """
        logger.info(f"Creating new post by user: {data.user_id}")
        post = await self.validator.validate_post_create(data)
        post = await self.post_dao.save(post)
        logger.info(f"Post created successfully with ID: {post.id}")
        return post

    async def update_post(self, post_id: UUID, patch: PostUpdate) -> Post:
        """
        Partially update a post's title and/or content.

        Raises:
            ResourceNotFoundError: If the post doesn't exist
        """
        logger.info(f"Updating post: {post_id}")
        existing = await self.get_post(post_id)
        post = await self.validator.validate_post_update(existing, patch)
        post = await self.post_dao.save(post)
        logger.info(f"Post updated successfully: {post_id}")
        return post

    async def delete_post(self, post_id: UUID) -> None:
        """
        Delete a post. Its comments are left in place.

        Raises:
            ResourceNotFoundError: If the post doesn't exist
        """
        logger.info(f"Deleting post: {post_id}")
        if not await self.post_dao.delete(post_id):
            raise ResourceNotFoundError.for_id("Post", post_id)
        logger.info(f"Post deleted successfully: {post_id}")
