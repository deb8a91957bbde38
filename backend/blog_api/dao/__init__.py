"""
Data Access Objects package.

WHY: DAOs are the only code that talks to the database. Business rules see
them through the Repository protocol.
"""

from blog_api.dao.base import BaseDAO, Repository
from blog_api.dao.memory import InMemoryDAO
from blog_api.dao.user import UserDAO
from blog_api.dao.post import PostDAO
from blog_api.dao.comment import CommentDAO

__all__ = [
    "BaseDAO",
    "Repository",
    "InMemoryDAO",
    "UserDAO",
    "PostDAO",
    "CommentDAO",
]
