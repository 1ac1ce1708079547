"""
Generic SQLModel repository: staged writes on a UnitOfWork session, eager reads.
"""

from typing import Generic, TypeVar, Optional, List, Type, TYPE_CHECKING
from sqlalchemy import inspect
from sqlmodel import SQLModel, select

if TYPE_CHECKING:
    from .unit_of_work import UnitOfWork

T = TypeVar("T", bound=SQLModel)


class BaseRepository(Generic[T]):
    """Generic repository implementation with SQLModel CRUD; subclasses add domain queries."""

    def __init__(self, uow: "UnitOfWork", model: Type[T]):
        """Initialize repository with the unit of work that owns the session."""
        self.uow = uow
        self.session = uow.session
        self.model = model

    async def get_by_id(self, id: int) -> Optional[T]:
        """Get entity by ID."""
        statement = select(self.model).where(self.model.id == id)
        result = await self.session.exec(statement)
        return result.first()

    async def get_all(self) -> List[T]:
        """Get all entities."""
        statement = select(self.model)
        result = await self.session.exec(statement)
        return list(result.all())

    async def create(self, entity: T) -> T:
        """Stage entity for insert; the primary key is assigned on flush."""
        self.session.add(entity)
        return entity

    async def update(self, entity: T) -> Optional[T]:
        """Copy every non-key column of entity onto the tracked row with the same ID."""
        tracked = await self.get_by_id(entity.id)
        if tracked is None:
            return None
        for key in self._value_columns():
            setattr(tracked, key, getattr(entity, key))
        return tracked

    async def delete(self, id: int) -> bool:
        """Stage removal of the row with ID; False if there is none."""
        entity = await self.get_by_id(id)
        if entity is None:
            return False
        await self.session.delete(entity)
        return True

    def _value_columns(self) -> List[str]:
        mapper = inspect(self.model)
        return [
            attr.key
            for attr in mapper.column_attrs
            if not any(column.primary_key for column in attr.columns)
        ]
