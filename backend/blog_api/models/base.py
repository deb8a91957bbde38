"""
Base model class for all SQLAlchemy models.

WHY: Centralizing common model columns (UUID primary key, creation
timestamp) in mixins keeps users, posts and comments consistent.
"""

from sqlalchemy import Column, DateTime, Uuid
from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy models.

    WHY: DeclarativeBase provides the foundation for SQLAlchemy 2.0 models
    with improved type hints and async support.
    """

    pass


class PrimaryKeyMixin:
    """
    Mixin to add a UUID primary key to models.

    WHAT: The column has no database default. Identifiers are assigned by
    EntityFactory before the row is first saved.
    """

    id = Column(Uuid, primary_key=True, index=True)


class CreatedAtMixin:
    """
    Mixin to add an immutable created_at timestamp to models.

    WHAT: Set once by EntityFactory from its clock. There is no onupdate and
    no database default, so the value is never recomputed.
    """

    created_at = Column(DateTime, nullable=False)
