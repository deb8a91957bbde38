"""
Comment model.

WHAT: A short piece of text left by a user on a post. Comments are never
updated; they are created and, at most, deleted.
"""

from sqlalchemy import Column, String, Uuid

from blog_api.models.base import Base, PrimaryKeyMixin, CreatedAtMixin


COMMENT_MAX_LENGTH = 1000


class Comment(Base, PrimaryKeyMixin, CreatedAtMixin):
    """
    Comment model.

    WHY: Both references are checked when the comment is created (post
    first, then user) and are not re-checked afterwards.
    """

    __tablename__ = "comments"

    content = Column(String(COMMENT_MAX_LENGTH), nullable=False)
    post_id = Column(Uuid, nullable=False, index=True)
    user_id = Column(Uuid, nullable=False, index=True)

    def __repr__(self) -> str:
        return f"<Comment(id={self.id}, post_id={self.post_id}, user_id={self.user_id})>"
