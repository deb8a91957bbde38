"""
Base Data Access Object (DAO) class.

WHY: The DAO pattern separates database operations from business logic.
The validation layer only sees the Repository protocol below, so it runs
unchanged against the SQLAlchemy DAOs in production and against
InMemoryDAO in unit tests.
"""

import logging
from typing import Any, Generic, List, Optional, Protocol, Type, TypeVar
from uuid import UUID

from sqlalchemy import delete, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from blog_api.core.exceptions import ResourceAlreadyExistsError
from blog_api.models.base import Base


logger = logging.getLogger(__name__)

# Type variable for model class
ModelType = TypeVar("ModelType", bound=Base)


class Repository(Protocol[ModelType]):
    """
    Persistence capabilities the business rules rely on.

    WHAT: get, list, save, delete, existence check and field lookup for one
    entity type. Implemented by BaseDAO (SQL) and InMemoryDAO.
    """

    async def get_by_id(self, id: UUID) -> Optional[ModelType]: ...

    async def get_all(self, **filters: Any) -> List[ModelType]: ...

    async def get_by_field(self, field_name: str, value: Any) -> Optional[ModelType]: ...

    async def save(self, instance: ModelType) -> ModelType: ...

    async def delete(self, id: UUID) -> bool: ...

    async def exists(self, **filters: Any) -> bool: ...

    async def exists_by_id(self, id: UUID) -> bool: ...

    async def count(self, **filters: Any) -> int: ...


class BaseDAO(Generic[ModelType]):
    """
    Base Data Access Object providing CRUD operations for all models.

    WHY: Centralizing database operations in DAOs separates data access
    concerns from business logic. Using generics allows type-safe reuse
    across users, posts and comments.

    Type Parameters:
        ModelType: The SQLAlchemy model class this DAO manages
    """

    def __init__(self, model: Type[ModelType], session: AsyncSession):
        """
        Initialize DAO with model class and database session.

        Args:
            model: The SQLAlchemy model class
            session: Async database session
        """
        self.model = model
        self.session = session

    def _filtered(self, query, filters: dict):
        for field, value in filters.items():
            if hasattr(self.model, field):
                query = query.where(getattr(self.model, field) == value)
        return query

    async def get_by_id(self, id: UUID) -> Optional[ModelType]:
        """
        Retrieve a single record by primary key.

        Args:
            id: Primary key value

        Returns:
            The model instance if found, None otherwise
        """
        result = await self.session.execute(select(self.model).where(self.model.id == id))
        return result.scalar_one_or_none()

    async def get_all(self, **filters: Any) -> List[ModelType]:
        """
        Retrieve all records, optionally narrowed by equality filters.

        Args:
            **filters: Field name to value filters (e.g., user_id=...).
                Unknown field names are ignored.

        Returns:
            List of model instances matching the filters
        """
        query = self._filtered(select(self.model), filters)
        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def get_by_field(self, field_name: str, value: Any) -> Optional[ModelType]:
        """
        Retrieve a single record by any field.

        WHY: Lookups by unique fields (email) return one result or None.

        Args:
            field_name: Name of the field to search
            value: Value to match

        Returns:
            The model instance if found, None otherwise

        Raises:
            AttributeError: If field_name doesn't exist on the model
        """
        if not hasattr(self.model, field_name):
            raise AttributeError(f"{self.model.__name__} has no field '{field_name}'")

        result = await self.session.execute(
            select(self.model).where(getattr(self.model, field_name) == value).limit(1)
        )
        return result.scalar_one_or_none()

    async def save(self, instance: ModelType) -> ModelType:
        """
        Insert a new record or flush changes to an existing one.

        WHY: Flushing here surfaces unique-constraint violations at the call
        site instead of at commit time, where they could no longer be mapped
        to a business error.

        Args:
            instance: Model instance (new or already loaded in this session)

        Returns:
            The persisted instance, refreshed from the database

        Raises:
            ResourceAlreadyExistsError: If a unique constraint is violated
        """
        self.session.add(instance)
        try:
            await self.session.flush()
        except IntegrityError as e:
            await self.session.rollback()
            logger.warning(f"Unique constraint violated saving {self.model.__name__}: {e.orig}")
            raise ResourceAlreadyExistsError(
                message=f"{self.model.__name__} violates a unique constraint",
                resource_type=self.model.__name__,
            ) from e
        await self.session.refresh(instance)
        return instance

    async def delete(self, id: UUID) -> bool:
        """
        Delete a record by primary key.

        Args:
            id: Primary key of the record to delete

        Returns:
            True if a record was deleted, False if not found
        """
        result = await self.session.execute(delete(self.model).where(self.model.id == id))
        return result.rowcount > 0

    async def count(self, **filters: Any) -> int:
        """
        Count records matching filters.

        Args:
            **filters: Field name to value filters

        Returns:
            Number of records matching the filters
        """
        query = self._filtered(select(func.count()).select_from(self.model), filters)
        result = await self.session.execute(query)
        return result.scalar_one()

    async def exists(self, **filters: Any) -> bool:
        """
        Check if any records matching filters exist.

        WHY: Stops at the first match; cheaper than counting.

        Args:
            **filters: Field name to value filters

        Returns:
            True if at least one matching record exists
        """
        query = self._filtered(select(self.model.id), filters).limit(1)
        result = await self.session.execute(query)
        return result.scalar_one_or_none() is not None

    async def exists_by_id(self, id: UUID) -> bool:
        """Check if a record with this primary key exists."""
        return await self.exists(id=id)
