"""Database package"""

from blog_api.db.session import AsyncSessionLocal, engine, get_db, init_db
from blog_api.models import Base

__all__ = ["Base", "AsyncSessionLocal", "engine", "get_db", "init_db"]
