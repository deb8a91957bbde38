"""
Test factories for creating test data.

WHY: Factories provide a consistent, reusable way to create stored
entities, bypassing the validation layer so tests can set up any state
(including dangling references) directly.
"""

from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from blog_api.models import Comment, EntityFactory, Post, User


_entities = EntityFactory()


class UserFactory:
    """Factory for creating User test instances."""

    _counter = 0

    @classmethod
    async def create(
        cls,
        session: AsyncSession,
        email: Optional[str] = None,
        name: str = "Test User",
        age: Optional[int] = 30,
    ) -> User:
        """
        Create and commit a user.

        Args:
            session: Database session
            email: Email (unique one generated if omitted)
            name: Display name
            age: Age or None

        Returns:
            Created User instance
        """
        if email is None:
            cls._counter += 1
            email = f"user{cls._counter}@example.com"

        user = _entities.new_user(email=email, name=name, age=age)
        session.add(user)
        await session.commit()
        await session.refresh(user)
        return user


class PostFactory:
    """Factory for creating Post test instances."""

    @staticmethod
    async def create(
        session: AsyncSession,
        user: Optional[User] = None,
        title: str = "Test Post",
        content: str = "Test content",
    ) -> Post:
        """
        Create and commit a post, creating an owner if none is given.

        Args:
            session: Database session
            user: Owning user
            title: Post title
            content: Post body

        Returns:
            Created Post instance
        """
        if user is None:
            user = await UserFactory.create(session)

        post = _entities.new_post(title=title, content=content, user_id=user.id)
        session.add(post)
        await session.commit()
        await session.refresh(post)
        return post


class CommentFactory:
    """Factory for creating Comment test instances."""

    @staticmethod
    async def create(
        session: AsyncSession,
        post: Optional[Post] = None,
        user: Optional[User] = None,
        content: str = "Test comment",
    ) -> Comment:
        """
        Create and commit a comment, creating its post/author if not given.

        Args:
            session: Database session
            post: Post being commented on
            user: Comment author
            content: Comment text

        Returns:
            Created Comment instance
        """
        if user is None:
            user = await UserFactory.create(session)
        if post is None:
            post = await PostFactory.create(session, user=user)

        comment = _entities.new_comment(content=content, post_id=post.id, user_id=user.id)
        session.add(comment)
        await session.commit()
        await session.refresh(comment)
        return comment
