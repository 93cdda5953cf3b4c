"""
Room Booking Backend — Booking SQLAlchemy Model
=================================================

What:  ORM model for the `bookings` table: one person reserving one room
       for a time interval.

Query Patterns:
    - Availability: bookings of a room overlapping a window
      → idx_bookings_room_start on (room_id, start_date)
    - Bookings of a person: WHERE person_id = :id
      → idx_bookings_person
"""

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, ForeignKey, Index, Integer
from sqlalchemy.orm import Mapped, mapped_column, relationship

from roombooking.models.base import BaseEntity

if TYPE_CHECKING:
    from roombooking.models.person import Person
    from roombooking.models.room import Room


class Booking(BaseEntity):
    """
    A reservation of a room by a person.

    Invariants checked by BookingService before saving:
        - start_date is not after end_date
        - end_date - start_date is at most one hour
    Overlaps with other bookings are NOT rejected here; they only matter to
    the room availability query.
    """

    __tablename__ = "bookings"

    person_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("people.id", ondelete="CASCADE"),
        nullable=False,
    )
    room_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("rooms.id", ondelete="CASCADE"),
        nullable=False,
    )
    start_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    end_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)

    person: Mapped["Person"] = relationship(back_populates="bookings")
    room: Mapped["Room"] = relationship(back_populates="bookings")

    __table_args__ = (
        Index("idx_bookings_room_start", "room_id", "start_date"),
        Index("idx_bookings_person", "person_id"),
    )

    def update_fields(
        self,
        person_id: int,
        room_id: int,
        start_date: datetime,
        end_date: datetime,
    ) -> None:
        self.person_id = person_id
        self.room_id = room_id
        self.start_date = start_date
        self.end_date = end_date

    def clone_to_room(self, room_id: int) -> "Booking":
        """Copy of this booking (same person and interval) placed on another room."""
        return Booking(
            person_id=self.person_id,
            room_id=room_id,
            start_date=self.start_date,
            end_date=self.end_date,
        )

    def __repr__(self) -> str:
        return (
            f"<Booking(id={self.id}, room_id={self.room_id}, person_id={self.person_id}, "
            f"start='{self.start_date}', end='{self.end_date}')>"
        )
