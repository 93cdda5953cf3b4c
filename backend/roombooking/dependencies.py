"""
Room Booking Backend — Service Providers
==========================================

What:  FastAPI dependencies that assemble a service per request.
How:   Each provider receives the request's AsyncSession from
       get_db_session, wraps it in one SqlAlchemyRepository per entity the
       service needs, and returns the service. Every repository of a request
       shares that one session and therefore one transaction.

Tests swap the session by overriding get_db_session in
app.dependency_overrides; the providers themselves stay untouched.
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from roombooking.database import get_db_session
from roombooking.models import Booking, Person, Room
from roombooking.repositories import SqlAlchemyRepository
from roombooking.services import BookingService, PersonService, RoomService


def get_person_service(db: AsyncSession = Depends(get_db_session)) -> PersonService:
    return PersonService(SqlAlchemyRepository(Person, db))


def get_room_service(db: AsyncSession = Depends(get_db_session)) -> RoomService:
    return RoomService(
        room_repository=SqlAlchemyRepository(Room, db),
        booking_repository=SqlAlchemyRepository(Booking, db),
    )


def get_booking_service(db: AsyncSession = Depends(get_db_session)) -> BookingService:
    return BookingService(
        booking_repository=SqlAlchemyRepository(Booking, db),
        person_repository=SqlAlchemyRepository(Person, db),
        room_repository=SqlAlchemyRepository(Room, db),
    )
