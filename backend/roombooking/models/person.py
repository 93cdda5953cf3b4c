"""
Room Booking Backend — Person SQLAlchemy Model
================================================

What:  ORM model for the `people` table.
Who:   Used by PersonService through the generic repository, and by Alembic.

A person owns zero or more bookings by reference. Deleting a person deletes
their bookings (ORM cascade on the relationship, ON DELETE CASCADE in the
database).
"""

from datetime import date
from typing import TYPE_CHECKING, List

from sqlalchemy import Date, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from roombooking.models.base import BaseEntity

if TYPE_CHECKING:
    from roombooking.models.booking import Booking


class Person(BaseEntity):
    """A person who can book rooms."""

    __tablename__ = "people"

    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    phone_number: Mapped[str] = mapped_column(String(50), nullable=False, default="")
    email: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    date_of_birth: Mapped[date] = mapped_column(Date, nullable=False)

    bookings: Mapped[List["Booking"]] = relationship(
        back_populates="person",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    def update_fields(
        self,
        first_name: str,
        last_name: str,
        phone_number: str,
        email: str,
        date_of_birth: date,
    ) -> None:
        """Full replace of every mutable field."""
        self.first_name = first_name
        self.last_name = last_name
        self.phone_number = phone_number
        self.email = email
        self.date_of_birth = date_of_birth

    def __repr__(self) -> str:
        return f"<Person(id={self.id}, name='{self.first_name} {self.last_name}')>"
