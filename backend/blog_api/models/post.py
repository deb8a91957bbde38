"""
Post model.

WHAT: A titled piece of long-form content owned by one user.
"""

from sqlalchemy import Column, String, Text, Uuid

from blog_api.models.base import Base, PrimaryKeyMixin, CreatedAtMixin


class Post(Base, PrimaryKeyMixin, CreatedAtMixin):
    """
    Post model.

    WHY: user_id is validated against the users table when the post is
    created and is immutable afterwards. It is indexed because posts are
    listed by owner.
    """

    __tablename__ = "posts"

    title = Column(String(255), nullable=False)
    content = Column(Text, nullable=False)
    user_id = Column(Uuid, nullable=False, index=True)

    def __repr__(self) -> str:
        return f"<Post(id={self.id}, title={self.title!r}, user_id={self.user_id})>"
