"""
In-memory Data Access Object.

WHAT: A dict-backed implementation of the Repository protocol.

WHY: The business rules only need the Repository capabilities, so they can
be exercised without a database. Unique fields are checked inside save(),
which makes check-and-insert atomic for this store (there is no await
between the check and the write).
"""

from typing import Any, Dict, Generic, Iterable, List, Optional, Type
from uuid import UUID

from blog_api.core.exceptions import ResourceAlreadyExistsError
from blog_api.dao.base import ModelType


class InMemoryDAO(Generic[ModelType]):
    """
    Repository over a plain dict keyed by primary key.

    Insertion order is preserved for get_all().

    Example:
        >>> users = InMemoryDAO(User, unique_fields=("email",))
        >>> await users.save(factory.new_user("a@x.com", "A"))
    """

    def __init__(self, model: Type[ModelType], unique_fields: Iterable[str] = ()):
        """
        Initialize an empty store.

        Args:
            model: Model class stored here (used for field checks and messages)
            unique_fields: Fields whose values must be unique across records
        """
        self.model = model
        self.unique_fields = tuple(unique_fields)
        self._records: Dict[UUID, ModelType] = {}

    @staticmethod
    def _matches(instance: ModelType, filters: dict) -> bool:
        return all(getattr(instance, field, None) == value for field, value in filters.items())

    async def get_by_id(self, id: UUID) -> Optional[ModelType]:
        return self._records.get(id)

    async def get_all(self, **filters: Any) -> List[ModelType]:
        filters = {k: v for k, v in filters.items() if hasattr(self.model, k)}
        return [r for r in self._records.values() if self._matches(r, filters)]

    async def get_by_field(self, field_name: str, value: Any) -> Optional[ModelType]:
        if not hasattr(self.model, field_name):
            raise AttributeError(f"{self.model.__name__} has no field '{field_name}'")
        for record in self._records.values():
            if getattr(record, field_name) == value:
                return record
        return None

    async def save(self, instance: ModelType) -> ModelType:
        """
        Insert or replace a record.

        Raises:
            ResourceAlreadyExistsError: If another record holds the same
                value in one of the unique fields
        """
        for field in self.unique_fields:
            value = getattr(instance, field)
            for other_id, other in self._records.items():
                if other_id != instance.id and getattr(other, field) == value:
                    raise ResourceAlreadyExistsError(
                        message=f"{self.model.__name__} violates a unique constraint",
                        resource_type=self.model.__name__,
                        field=field,
                    )
        self._records[instance.id] = instance
        return instance

    async def delete(self, id: UUID) -> bool:
        return self._records.pop(id, None) is not None

    async def count(self, **filters: Any) -> int:
        return len(await self.get_all(**filters))

    async def exists(self, **filters: Any) -> bool:
        return await self.count(**filters) > 0

    async def exists_by_id(self, id: UUID) -> bool:
        return id in self._records
