"""
Room Booking Backend — Booking Service
========================================

What:  Validates and stores bookings.
Who:   Called by the /api/bookings route handlers.

Booking rules, checked in this order:
    1. start_date after end_date            → BadRequest (invalid dates)
    2. end_date - start_date over one hour  → BadRequest (time range limit)
    3. person or room does not exist        → NotFound
    4. otherwise the booking is saved and its id returned

Overlapping bookings are accepted here. Overlaps only matter to the room
availability query in RoomService.
"""

import logging
from datetime import timedelta
from typing import List, Optional

from roombooking.exceptions import NotFoundError, ValidationError
from roombooking.models.booking import Booking
from roombooking.models.person import Person
from roombooking.models.room import Room
from roombooking.repositories.base import AbstractRepository
from roombooking.schemas.booking import BookingRequest, BookingResponse
from roombooking.services.result import BaseService, service_operation

logger = logging.getLogger(__name__)

MAX_BOOKING_DURATION = timedelta(hours=1)

INVALID_MODEL = "The booking details are missing or invalid"
INVALID_DATES = "The start date must not be after the end date"
TIME_RANGE_LIMIT = "A booking cannot be longer than one hour"


class BookingService(BaseService):
    """Create, read, update and delete bookings."""

    def __init__(
        self,
        booking_repository: AbstractRepository[Booking],
        person_repository: AbstractRepository[Person],
        room_repository: AbstractRepository[Room],
    ):
        self._repository = booking_repository
        self._people = person_repository
        self._rooms = room_repository

    @service_operation
    async def book(self, model: Optional[BookingRequest]) -> int:
        """Validate and save a new booking; returns its id."""
        self._validate_dates(model)
        await self._ensure_references(model)

        booking = Booking(
            person_id=model.person_id,
            room_id=model.room_id,
            start_date=model.start_date,
            end_date=model.end_date,
        )
        self._repository.add(booking)
        await self._repository.save()

        logger.info(
            "Booking %s created: room %s, person %s, %s to %s",
            booking.id,
            booking.room_id,
            booking.person_id,
            model.start_date.isoformat(),
            model.end_date.isoformat(),
        )
        return booking.id

    @service_operation
    async def get(self, booking_id: int) -> BookingResponse:
        booking = await self._get_or_raise(booking_id)
        return BookingResponse.model_validate(booking)

    @service_operation
    async def get_all(
        self,
        person_id: Optional[int] = None,
        room_id: Optional[int] = None,
    ) -> List[BookingResponse]:
        """Bookings ordered by start, optionally for one person and/or one room."""
        statement = self._repository.query()
        if person_id is not None:
            statement = statement.where(Booking.person_id == person_id)
        if room_id is not None:
            statement = statement.where(Booking.room_id == room_id)

        bookings = await self._repository.list(
            statement.order_by(Booking.start_date, Booking.id)
        )
        return [BookingResponse.model_validate(booking) for booking in bookings]

    @service_operation
    async def update(self, booking_id: int, model: Optional[BookingRequest]) -> int:
        """Full replace of person, room and interval; same rules as book()."""
        booking = await self._get_or_raise(booking_id)
        self._validate_dates(model)
        await self._ensure_references(model)

        booking.update_fields(
            person_id=model.person_id,
            room_id=model.room_id,
            start_date=model.start_date,
            end_date=model.end_date,
        )
        await self._repository.update(booking)
        await self._repository.save()

        logger.info("Booking %s updated", booking_id)
        return booking_id

    @service_operation
    async def remove(self, booking_id: int) -> int:
        booking = await self._get_or_raise(booking_id)

        await self._repository.remove(booking)
        await self._repository.save()

        logger.info("Booking %s removed", booking_id)
        return booking_id

    # ── Helpers ───────────────────────────────────────────────────────────

    async def _get_or_raise(self, booking_id: int) -> Booking:
        booking = await self._repository.get(booking_id)
        if booking is None:
            raise NotFoundError(resource="booking", resource_id=booking_id)
        return booking

    @staticmethod
    def _validate_dates(model: Optional[BookingRequest]) -> None:
        if model is None:
            raise ValidationError(INVALID_MODEL)

        context = {
            "start_date": model.start_date.isoformat(),
            "end_date": model.end_date.isoformat(),
        }
        if model.start_date > model.end_date:
            raise ValidationError(INVALID_DATES, field="start_date", context=context)
        if model.end_date - model.start_date > MAX_BOOKING_DURATION:
            raise ValidationError(TIME_RANGE_LIMIT, field="end_date", context=context)

    async def _ensure_references(self, model: BookingRequest) -> None:
        if not await self._people.exists(Person.id == model.person_id):
            raise NotFoundError(resource="person", resource_id=model.person_id)
        if not await self._rooms.exists(Room.id == model.room_id):
            raise NotFoundError(resource="room", resource_id=model.room_id)
