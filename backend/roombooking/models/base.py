"""
Room Booking Backend — Shared Entity Base
===========================================

What:  Abstract mapped base supplying the integer identity column.
How:   `__abstract__ = True` keeps SQLAlchemy from creating a table for it;
       Person, Room and Booking inherit the `id` primary key.
"""

from sqlalchemy import Integer
from sqlalchemy.orm import Mapped, mapped_column

from roombooking.database import Base


class BaseEntity(Base):
    """Common identity for every stored entity."""

    __abstract__ = True

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
        comment="Surrogate key",
    )

    def __repr__(self) -> str:
        return f"<{type(self).__name__}(id={self.id})>"
