"""
Referential-integrity validation layer.

WHAT: Decides whether a proposed create/update is accepted, and computes
the entity that results from it. Accept means "return the entity to
persist"; reject means "raise one of the ValidationError subclasses".

WHY: These are the only decisions in the service. Keeping them apart from
the DAOs and the routers means they can be tested against InMemoryDAO with
a fixed clock, and means every rule has exactly one home.

HOW: Reads go through the Repository protocol. Nothing here saves or
deletes; the caller persists what is returned. Checks run in a fixed order
and the first failure wins:

- user create:    email uniqueness, then age
- user update:    age (only if supplied), then email (only if changed)
- post create:    owning user exists
- comment create: post exists, then user exists

Existence and uniqueness checks are advisory. They can race with a
concurrent request; the unique index on users.email is what actually
guarantees uniqueness (see UserService).
"""

import logging
from typing import Optional

from blog_api.core.exceptions import (
    EmailConflictError,
    InvalidAgeError,
    PostNotFoundError,
    UserNotFoundError,
)
from blog_api.dao.base import Repository
from blog_api.models.comment import Comment
from blog_api.models.factory import EntityFactory
from blog_api.models.post import Post
from blog_api.models.user import User
from blog_api.schemas.comment import CommentCreate
from blog_api.schemas.post import PostCreate, PostUpdate
from blog_api.schemas.user import UserCreate, UserUpdate


logger = logging.getLogger(__name__)


def check_age(age: Optional[int]) -> None:
    """
    Reject negative ages. A missing age is valid.

    Raises:
        InvalidAgeError: If age is negative
    """
    if age is not None and age < 0:
        raise InvalidAgeError(age=age)


class IntegrityValidator:
    """
    Business rules for users, posts and comments.

    Example:
        >>> validator = IntegrityValidator(users=user_dao, posts=post_dao)
        >>> user = await validator.validate_user_create(UserCreate(...))
        >>> await user_dao.save(user)
    """

    def __init__(
        self,
        users: Repository[User],
        posts: Repository[Post],
        factory: Optional[EntityFactory] = None,
    ):
        """
        Initialize the validator.

        Args:
            users: Read access to stored users
            posts: Read access to stored posts
            factory: Builds new entities (defaults to uuid4 ids and UTC now)
        """
        self.users = users
        self.posts = posts
        self.factory = factory or EntityFactory()

    async def _check_email_available(self, email: str) -> None:
        if await self.users.exists(email=email):
            logger.warning(f"Email already exists: {email}")
            raise EmailConflictError(email)

    async def validate_user_create(self, candidate: UserCreate) -> User:
        """
        Validate a new user.

        Args:
            candidate: Structurally valid creation request

        Returns:
            New User with a generated id (not yet saved)

        Raises:
            EmailConflictError: If a stored user already has this email
            InvalidAgeError: If age is negative (checked after the email)
        """
        await self._check_email_available(candidate.email)
        check_age(candidate.age)
        return self.factory.new_user(
            email=candidate.email,
            name=candidate.name,
            age=candidate.age,
        )

    async def validate_user_update(self, existing: User, patch: UserUpdate) -> User:
        """
        Merge a partial update into an existing user.

        WHAT: Fields that are absent or null in the patch are left unchanged.
        The email uniqueness check only runs when the email actually changes,
        so re-sending a user's own email never conflicts.

        Args:
            existing: The stored user
            patch: Fields to change

        Returns:
            The same User instance with the patch applied

        Raises:
            InvalidAgeError: If a negative age is supplied (wins over email)
            EmailConflictError: If the new email belongs to another user

        On rejection, existing is left untouched.
        """
        changes = patch.model_dump(exclude_none=True)

        if "age" in changes:
            check_age(changes["age"])

        if "email" in changes and changes["email"] != existing.email:
            await self._check_email_available(changes["email"])
        else:
            changes.pop("email", None)

        for field, value in changes.items():
            setattr(existing, field, value)
        return existing

    async def validate_post_create(self, candidate: PostCreate) -> Post:
        """
        Validate a new post.

        Args:
            candidate: Structurally valid creation request

        Returns:
            New Post with generated id and created_at (not yet saved)

        Raises:
            UserNotFoundError: If the owning user doesn't exist
        """
        if not await self.users.exists_by_id(candidate.user_id):
            logger.warning(f"User not found: {candidate.user_id}")
            raise UserNotFoundError(candidate.user_id)

        return self.factory.new_post(
            title=candidate.title,
            content=candidate.content,
            user_id=candidate.user_id,
        )

    async def validate_post_update(self, existing: Post, patch: PostUpdate) -> Post:
        """
        Merge a partial update into an existing post.

        WHAT: Only title and content can change and both are optional. The
        owner is immutable, so nothing needs re-checking; this never rejects.

        Args:
            existing: The stored post
            patch: Fields to change

        Returns:
            The same Post instance with the patch applied
        """
        for field, value in patch.model_dump(exclude_none=True).items():
            setattr(existing, field, value)
        return existing

    async def validate_comment_create(self, candidate: CommentCreate) -> Comment:
        """
        Validate a new comment.

        WHAT: The post is checked before the user. If the post is missing
        the user is never looked up, so a request with both references
        wrong is reported as PostNotFoundError.

        Args:
            candidate: Structurally valid creation request

        Returns:
            New Comment with generated id and created_at (not yet saved)

        Raises:
            PostNotFoundError: If the post doesn't exist
            UserNotFoundError: If the post exists but the user doesn't
        """
        if not await self.posts.exists_by_id(candidate.post_id):
            logger.warning(f"Post not found: {candidate.post_id}")
            raise PostNotFoundError(candidate.post_id)

        if not await self.users.exists_by_id(candidate.user_id):
            logger.warning(f"User not found: {candidate.user_id}")
            raise UserNotFoundError(candidate.user_id)

        return self.factory.new_comment(
            content=candidate.content,
            post_id=candidate.post_id,
            user_id=candidate.user_id,
        )
