"""
Room Booking Backend — Room Service
=====================================

What:  Business rules for rooms: unique names, availability, removal with
       booking transfer.
Who:   Called by the /api/rooms route handlers.

Availability:
    A room is available for the window [start, end) when none of its
    bookings overlaps the window, i.e. for every booking b:

        end <= b.start_date  OR  start >= b.end_date

    A window that sits between two bookings, starts after b ends, or ends
    before b starts all satisfy this. Touching edges do not overlap: with a
    booking [10:00, 11:00) the window [11:00, 12:00) is available.

    The check runs in the database as a correlated NOT EXISTS:

        SELECT rooms.* FROM rooms
        WHERE NOT EXISTS (
            SELECT bookings.id FROM bookings
            WHERE bookings.room_id = rooms.id
              AND bookings.start_date < :end
              AND bookings.end_date > :start
        )

Removal:
    Without move_bookings the room's bookings are deleted with it. With
    move_bookings every booking is re-created on new_room_id (same person,
    start and end) in the same transaction that deletes the source room.
"""

import logging
from datetime import datetime
from typing import List, Optional, Tuple

from sqlalchemy import select
from sqlalchemy.orm import selectinload
from sqlalchemy.sql.elements import ColumnElement

from roombooking.exceptions import NotFoundError, UnprocessableEntityError, ValidationError
from roombooking.models.booking import Booking
from roombooking.models.room import Room
from roombooking.repositories.base import AbstractRepository
from roombooking.schemas.room import RemoveRoomsRequest, RoomRequest, RoomResponse
from roombooking.services.booking_service import INVALID_DATES
from roombooking.services.result import BaseService, service_operation

logger = logging.getLogger(__name__)

INVALID_MODEL = "The room name is missing or blank"


def overlap_criteria(start: datetime, end: datetime) -> Tuple[ColumnElement, ColumnElement]:
    """SQL criteria matching bookings that overlap the window [start, end)."""
    return Booking.start_date < end, Booking.end_date > start


class RoomService(BaseService):
    """CRUD operations on rooms plus the availability query."""

    def __init__(
        self,
        room_repository: AbstractRepository[Room],
        booking_repository: AbstractRepository[Booking],
    ):
        self._repository = room_repository
        self._bookings = booking_repository

    @service_operation
    async def add(self, model: Optional[RoomRequest]) -> int:
        name = self._validated_name(model)

        if await self._repository.exists(Room.name == name):
            raise UnprocessableEntityError(
                f"A room named '{name}' already exists",
                context={"name": name},
            )

        room = Room(name=name)
        self._repository.add(room)
        await self._repository.save()

        logger.info("Room %s created: %s", room.id, name)
        return room.id

    @service_operation
    async def get(self, room_id: int) -> RoomResponse:
        room = await self._repository.get(room_id)
        if room is None:
            raise NotFoundError(resource="room", resource_id=room_id)
        return RoomResponse.model_validate(room)

    @service_operation
    async def get_all(self, name: Optional[str] = None) -> List[RoomResponse]:
        """All rooms ordered by name, optionally restricted to a name prefix."""
        statement = self._filter_by_name(self._repository.query(), name)
        rooms = await self._repository.list(statement.order_by(Room.name))
        return [RoomResponse.model_validate(room) for room in rooms]

    @service_operation
    async def get_available(
        self,
        start_date: datetime,
        end_date: datetime,
        name: Optional[str] = None,
    ) -> List[RoomResponse]:
        """
        Rooms with no booking overlapping [start_date, end_date).

        Args:
            start_date: Start of the candidate window
            end_date:   End of the candidate window
            name:       Optional name prefix filter

        Raises (as BadRequest):
            start_date after end_date
        """
        if start_date > end_date:
            raise ValidationError(
                INVALID_DATES,
                field="start_date",
                context={"start_date": start_date.isoformat(), "end_date": end_date.isoformat()},
            )

        overlapping = select(Booking.id).where(
            Booking.room_id == Room.id,
            *overlap_criteria(start_date, end_date),
        )
        statement = self._repository.query().where(~overlapping.exists())
        statement = self._filter_by_name(statement, name)

        rooms = await self._repository.list(statement.order_by(Room.name))
        logger.debug(
            "%d room(s) available between %s and %s", len(rooms), start_date, end_date
        )
        return [RoomResponse.model_validate(room) for room in rooms]

    @service_operation
    async def update(self, room_id: int, model: Optional[RoomRequest]) -> int:
        room = await self._repository.get(room_id)
        if room is None:
            raise NotFoundError(resource="room", resource_id=room_id)

        name = self._validated_name(model)
        if await self._repository.exists(Room.name == name, Room.id != room_id):
            raise UnprocessableEntityError(
                f"A room named '{name}' already exists",
                context={"name": name, "room_id": room_id},
            )

        room.update_fields(name)
        await self._repository.update(room)
        await self._repository.save()

        logger.info("Room %s renamed to %s", room_id, name)
        return room_id

    @service_operation
    async def remove(
        self,
        room_id: int,
        move_bookings: bool = False,
        new_room_id: Optional[int] = None,
    ) -> int:
        """
        Delete a room, optionally transferring its bookings first.

        Args:
            room_id:       Room to delete
            move_bookings: Re-create every booking on new_room_id before deleting
            new_room_id:   Target room; required when move_bookings is set

        Raises (as failed results):
            NotFound:   room_id or new_room_id does not exist
            BadRequest: move_bookings without a target, or target == room_id
        """
        room = await self._repository.get(room_id, selectinload(Room.bookings))
        if room is None:
            raise NotFoundError(resource="room", resource_id=room_id)

        moved = 0
        if move_bookings:
            if new_room_id is None:
                raise ValidationError(
                    "A target room is required to move bookings", field="new_room_id"
                )
            if new_room_id == room_id:
                raise ValidationError(
                    "Bookings cannot be moved to the room being removed", field="new_room_id"
                )
            if not await self._repository.exists(Room.id == new_room_id):
                raise NotFoundError(resource="room", resource_id=new_room_id)

            clones = [booking.clone_to_room(new_room_id) for booking in room.bookings]
            self._bookings.add_all(clones)
            moved = len(clones)

        await self._repository.remove(room)
        await self._repository.save()

        if moved:
            logger.info("Room %s removed; %d booking(s) moved to room %s", room_id, moved, new_room_id)
        else:
            logger.info("Room %s removed", room_id)
        return room_id

    @service_operation
    async def remove_range(self, model: RemoveRoomsRequest) -> List[int]:
        """
        Remove several rooms with the same transfer options.

        Each room is removed (and saved) on its own; a room that cannot be
        removed is logged and skipped without affecting the others.
        """
        for room_id in model.room_ids:
            result = await self.remove(room_id, model.move_bookings, model.new_room_id)
            if not result.succeeded:
                logger.warning("Skipped removing room %s: %s", room_id, result.error_message)
        return list(model.room_ids)

    # ── Helpers ───────────────────────────────────────────────────────────

    @staticmethod
    def _validated_name(model: Optional[RoomRequest]) -> str:
        if model is None or not model.name or not model.name.strip():
            raise ValidationError(INVALID_MODEL, field="name")
        return model.name.strip()

    @staticmethod
    def _filter_by_name(statement, name: Optional[str]):
        if name and name.strip():
            statement = statement.where(Room.name.startswith(name.strip(), autoescape=True))
        return statement
