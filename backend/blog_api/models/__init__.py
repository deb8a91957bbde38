"""
Database models package.

WHY: Importing every model here registers all tables on Base.metadata,
which create_all relies on at startup and in tests.
"""

from blog_api.models.base import Base, PrimaryKeyMixin, CreatedAtMixin
from blog_api.models.user import User
from blog_api.models.post import Post
from blog_api.models.comment import Comment, COMMENT_MAX_LENGTH
from blog_api.models.factory import EntityFactory, utc_now

__all__ = [
    "Base",
    "PrimaryKeyMixin",
    "CreatedAtMixin",
    "User",
    "Post",
    "Comment",
    "COMMENT_MAX_LENGTH",
    "EntityFactory",
    "utc_now",
]
