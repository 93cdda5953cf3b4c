"""
Room Booking Backend — Room SQLAlchemy Model
==============================================

What:  ORM model for the `rooms` table.

Room names are unique (`uq_rooms_name`). RoomService checks for duplicates
before saving so the conflict is reported as UnprocessableEntity instead of
surfacing as an IntegrityError.
"""

from typing import TYPE_CHECKING, List

from sqlalchemy import String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from roombooking.models.base import BaseEntity

if TYPE_CHECKING:
    from roombooking.models.booking import Booking


class Room(BaseEntity):
    """A bookable room."""

    __tablename__ = "rooms"

    name: Mapped[str] = mapped_column(String(100), nullable=False)

    bookings: Mapped[List["Booking"]] = relationship(
        back_populates="room",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    __table_args__ = (
        UniqueConstraint("name", name="uq_rooms_name"),
    )

    def update_fields(self, name: str) -> None:
        self.name = name

    def __repr__(self) -> str:
        return f"<Room(id={self.id}, name='{self.name}')>"
