"""
Room Booking Backend — Abstract Repository Interface
======================================================

What:  Abstract base class defining the CRUD contract for one entity type.
How:   Concrete implementations inherit from AbstractRepository[T] and bind
       it to a storage technology. Services only use this interface, so a
       test double or another backend can stand in for SQLAlchemy.

Contract:
    - add / remove / update stage changes; nothing is durable until save()
    - query() returns a statement over the entity that callers refine with
      .where() / .order_by() and hand back to list() / first() / exists()
    - discard() throws away every staged change
"""

from abc import ABC, abstractmethod
from typing import Any, Generic, List, Optional, Sequence, TypeVar

from roombooking.models.base import BaseEntity

EntityT = TypeVar("EntityT", bound=BaseEntity)


class AbstractRepository(ABC, Generic[EntityT]):
    """CRUD accessor over a single entity type."""

    @abstractmethod
    def add(self, entity: EntityT) -> None:
        """Stage a new entity for insertion."""
        ...

    @abstractmethod
    def add_all(self, entities: Sequence[EntityT]) -> None:
        ...

    @abstractmethod
    async def remove(self, entity: EntityT) -> None:
        """Stage an entity for deletion."""
        ...

    @abstractmethod
    async def update(self, entity: EntityT) -> EntityT:
        """Stage the current state of an entity; returns the tracked instance."""
        ...

    @abstractmethod
    def query(self) -> Any:
        """A fresh selection over every entity of this type."""
        ...

    @abstractmethod
    async def get(self, entity_id: int, *options: Any) -> Optional[EntityT]:
        """
        Load one entity by id, or None when it does not exist.

        Args:
            entity_id: Primary key value.
            options:   Loader options (e.g. eager-loading a relationship).
        """
        ...

    @abstractmethod
    async def list(self, statement: Any = None) -> List[EntityT]:
        ...

    @abstractmethod
    async def first(self, statement: Any) -> Optional[EntityT]:
        ...

    @abstractmethod
    async def exists(self, *criteria: Any) -> bool:
        """True when at least one entity matches every criterion."""
        ...

    @abstractmethod
    async def save(self) -> None:
        """Make every staged change durable."""
        ...

    @abstractmethod
    async def discard(self) -> None:
        """Drop every staged change."""
        ...
