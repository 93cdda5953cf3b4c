"""
Room Booking Backend — Repository Layer
=========================================

What:  Generic data access per entity type.

Inventory:
    - AbstractRepository (base.py): the CRUD contract services depend on
    - SqlAlchemyRepository (sqlalchemy_repository.py): async SQLAlchemy
      implementation, parameterised by the model class
"""

from roombooking.repositories.base import AbstractRepository
from roombooking.repositories.sqlalchemy_repository import SqlAlchemyRepository

__all__ = ["AbstractRepository", "SqlAlchemyRepository"]
