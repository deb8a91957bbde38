"""
User model.

WHY: Users author posts and comments. Email is the only unique field
besides the primary key.
"""

from sqlalchemy import Column, Integer, String

from blog_api.models.base import Base, PrimaryKeyMixin


class User(Base, PrimaryKeyMixin):
    """
    User model representing the author of posts and comments.

    WHY: The unique index on email is the authoritative uniqueness guarantee.
    The validation layer's pre-check is advisory and can race with a
    concurrent insert; the index cannot.

    Posts and comments reference users by id only. There is no ORM
    relationship and no foreign key, so deleting a user never cascades.
    """

    __tablename__ = "users"

    email = Column(String(255), unique=True, index=True, nullable=False)
    name = Column(String(255), nullable=False)

    # Optional; non-negative when present (enforced by IntegrityValidator)
    age = Column(Integer, nullable=True)

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email={self.email})>"
