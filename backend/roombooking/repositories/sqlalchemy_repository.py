"""
Room Booking Backend — SQLAlchemy Repository
==============================================

What:  AbstractRepository implementation over an AsyncSession.
How:   One instance per (model, session) pair. Every repository built on the
       same session shares its transaction, so a service that touches rooms
       and bookings commits both with one save().
Who:   Built per request by the dependency providers in
       roombooking/dependencies.py, and directly by the tests.

Example:
    rooms = SqlAlchemyRepository(Room, session)
    rooms.add(Room(name="Committee Room 1"))
    await rooms.save()
"""

from typing import Any, List, Optional, Sequence, Type

from sqlalchemy import exists as sql_exists
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql import Select

from roombooking.repositories.base import AbstractRepository, EntityT


class SqlAlchemyRepository(AbstractRepository[EntityT]):
    """Generic async CRUD accessor for one mapped model."""

    def __init__(self, model: Type[EntityT], session: AsyncSession):
        self.model = model
        self.session = session

    def add(self, entity: EntityT) -> None:
        self.session.add(entity)

    def add_all(self, entities: Sequence[EntityT]) -> None:
        self.session.add_all(entities)

    async def remove(self, entity: EntityT) -> None:
        await self.session.delete(entity)

    async def update(self, entity: EntityT) -> EntityT:
        # No-op for instances this session already tracks; re-attaches
        # detached ones so their changes are flushed on save().
        self.session.add(entity)
        return entity

    def query(self) -> Select:
        return select(self.model)

    async def get(self, entity_id: int, *options: Any) -> Optional[EntityT]:
        statement = self.query().where(self.model.id == entity_id)
        if options:
            # Refresh an instance already in the identity map so eager
            # loaders see the rows currently in the database.
            statement = statement.options(*options).execution_options(populate_existing=True)
        return await self.first(statement)

    async def list(self, statement: Optional[Select] = None) -> List[EntityT]:
        if statement is None:
            statement = self.query().order_by(self.model.id)
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def first(self, statement: Select) -> Optional[EntityT]:
        result = await self.session.execute(statement.limit(1))
        return result.scalars().first()

    async def exists(self, *criteria: Any) -> bool:
        statement = select(sql_exists().where(*criteria))
        result = await self.session.execute(statement)
        return bool(result.scalar())

    async def save(self) -> None:
        await self.session.commit()

    async def discard(self) -> None:
        await self.session.rollback()

    def __repr__(self) -> str:
        return f"<SqlAlchemyRepository({self.model.__name__})>"
