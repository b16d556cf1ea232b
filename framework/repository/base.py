"""
Repository abstract base class and generic SQLModel implementation.
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar, Optional, List, Type
from sqlmodel import SQLModel, select, func
from sqlmodel.ext.asyncio.session import AsyncSession

T = TypeVar("T", bound=SQLModel)


class IRepository(ABC, Generic[T]):
    """Repository interface; defines the persistence primitives services rely on."""

    @abstractmethod
    async def save(self, entity: T) -> T:
        """Insert when entity.id is None, otherwise update; return the persisted entity."""
        pass

    @abstractmethod
    async def find_all(self) -> List[T]:
        """Get all entities."""
        pass

    @abstractmethod
    async def find_by_id(self, id: int) -> Optional[T]:
        """Get entity by ID, None if absent."""
        pass

    @abstractmethod
    async def exists_by_id(self, id: int) -> bool:
        """Check whether a row with this ID exists."""
        pass

    @abstractmethod
    async def delete_by_id(self, id: int) -> None:
        """Delete entity by ID."""
        pass


class BaseRepository(IRepository[T]):
    """Generic repository implementation with SQLModel CRUD; subclasses can add custom queries."""

    def __init__(self, session: AsyncSession, model: Type[T]):
        """Initialize repository with session and model."""
        self.session = session
        self.model = model

    async def save(self, entity: T) -> T:
        """Persist entity; flush so the store assigns the ID before commit."""
        if entity.id is not None:
            # merge returns the session-bound instance for an existing PK
            entity = await self.session.merge(entity)
        else:
            self.session.add(entity)
        await self.session.flush()
        await self.session.refresh(entity)
        return entity

    async def find_all(self) -> List[T]:
        statement = select(self.model).order_by(self.model.id)
        result = await self.session.exec(statement)
        return list(result.all())

    async def find_by_id(self, id: int) -> Optional[T]:
        return await self.session.get(self.model, id)

    async def exists_by_id(self, id: int) -> bool:
        statement = select(func.count(self.model.id)).where(self.model.id == id)
        result = await self.session.exec(statement)
        return result.one() > 0

    async def delete_by_id(self, id: int) -> None:
        """Delete entity; a missing row is a no-op here."""
        entity = await self.find_by_id(id)
        if entity is not None:
            await self.session.delete(entity)
            await self.session.flush()

    def _where(self, statement, filters: dict):
        """Apply equality filters; unknown column names raise AttributeError."""
        for key, value in filters.items():
            if key not in self.model.model_fields:
                raise AttributeError(f"{self.model.__name__} has no field {key!r}")
            statement = statement.where(getattr(self.model, key) == value)
        return statement

    async def find_one(self, **filters) -> Optional[T]:
        """Find one entity by filters (e.g. name='Eng')."""
        statement = self._where(select(self.model), filters)
        result = await self.session.exec(statement)
        return result.first()

    async def count(self, **filters) -> int:
        """Count entities matching filters."""
        statement = self._where(select(func.count(self.model.id)), filters)
        result = await self.session.exec(statement)
        return result.one()
