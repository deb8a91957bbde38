"""
Entity factory.

WHAT: Builds new User, Post and Comment instances with their
system-assigned fields (id, created_at) filled in.

WHY: Identifier generation and timestamping are the only side effects of
constructing an entity. Doing them here, from an injected clock and id
generator, keeps the validation layer deterministic: tests pass a fixed
clock and a counter instead of patching uuid/datetime.
"""

import uuid
from datetime import datetime, timezone
from typing import Callable, Optional

from blog_api.models.user import User
from blog_api.models.post import Post
from blog_api.models.comment import Comment


Clock = Callable[[], datetime]
IdGenerator = Callable[[], uuid.UUID]


def utc_now() -> datetime:
    """Current UTC time as a naive datetime (the DateTime columns are naive)."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


class EntityFactory:
    """
    Factory for new entities.

    Example:
        >>> factory = EntityFactory(clock=lambda: datetime(2024, 1, 1))
        >>> post = factory.new_post("Title", "Body", user_id=some_user_id)
        >>> post.created_at
        datetime.datetime(2024, 1, 1, 0, 0)
    """

    def __init__(
        self,
        clock: Optional[Clock] = None,
        id_generator: Optional[IdGenerator] = None,
    ):
        """
        Initialize the factory.

        Args:
            clock: Returns the creation instant (defaults to UTC now)
            id_generator: Returns a fresh identifier (defaults to uuid4)
        """
        self.clock = clock or utc_now
        self.id_generator = id_generator or uuid.uuid4

    def new_user(self, email: str, name: str, age: Optional[int] = None) -> User:
        """Build a User with a fresh id. Users carry no timestamp."""
        return User(id=self.id_generator(), email=email, name=name, age=age)

    def new_post(self, title: str, content: str, user_id: uuid.UUID) -> Post:
        """Build a Post with a fresh id and created_at set to the clock's instant."""
        return Post(
            id=self.id_generator(),
            title=title,
            content=content,
            user_id=user_id,
            created_at=self.clock(),
        )

    def new_comment(self, content: str, post_id: uuid.UUID, user_id: uuid.UUID) -> Comment:
        """Build a Comment with a fresh id and created_at set to the clock's instant."""
        return Comment(
            id=self.id_generator(),
            content=content,
            post_id=post_id,
            user_id=user_id,
            created_at=self.clock(),
        )
