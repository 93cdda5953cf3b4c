"""
Room Booking Backend — Test Configuration (conftest.py)
=========================================================

What:  Shared pytest fixtures for the entire test suite.
How:   Every test gets a fresh in-memory SQLite database (aiosqlite with a
       StaticPool, so all sessions share one connection). Service fixtures
       wrap one session; the HTTP client routes every request to a session
       on the same database through app.dependency_overrides.

Fixture Hierarchy (all function-scoped):
    db_engine
    ├── db_session
    │   ├── person_service / room_service / booking_service
    │   └── person_id / room_ids (seed data)
    └── test_client: HTTPX AsyncClient over ASGITransport
"""

import os
from datetime import date, datetime

# Settings are read at import time; point them at SQLite before any
# roombooking module is imported.
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///./test.db"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["DB_CREATE_TABLES"] = "false"

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from roombooking.database import create_tables, get_db_session
from roombooking.models import Booking, Person, Room
from roombooking.repositories import SqlAlchemyRepository
from roombooking.schemas.booking import BookingRequest
from roombooking.schemas.person import PersonRequest
from roombooking.schemas.room import RoomRequest
from roombooking.services import BookingService, PersonService, RoomService


# ══════════════════════════════════════════════════════════════════════════
# Database Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest_asyncio.fixture
async def db_engine():
    """Fresh in-memory database with every table created."""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    await create_tables(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(db_engine):
    return async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db_session(session_factory):
    async with session_factory() as session:
        yield session


# ══════════════════════════════════════════════════════════════════════════
# Service Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def person_service(db_session) -> PersonService:
    return PersonService(SqlAlchemyRepository(Person, db_session))


@pytest.fixture
def room_service(db_session) -> RoomService:
    return RoomService(
        room_repository=SqlAlchemyRepository(Room, db_session),
        booking_repository=SqlAlchemyRepository(Booking, db_session),
    )


@pytest.fixture
def booking_service(db_session) -> BookingService:
    return BookingService(
        booking_repository=SqlAlchemyRepository(Booking, db_session),
        person_repository=SqlAlchemyRepository(Person, db_session),
        room_repository=SqlAlchemyRepository(Room, db_session),
    )


# ══════════════════════════════════════════════════════════════════════════
# Sample Data
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def person_request() -> PersonRequest:
    return PersonRequest(
        first_name="Test First Name",
        last_name="Test Last Name",
        phone_number="123",
        email="test@test.com",
        date_of_birth=date(1996, 10, 10),
    )


@pytest_asyncio.fixture
async def person_id(person_service, person_request) -> int:
    result = await person_service.add(person_request)
    assert result.succeeded
    return result.data


@pytest_asyncio.fixture
async def room_ids(room_service) -> dict:
    """Three rooms keyed by name."""
    ids = {}
    for name in ("Committee Room 1", "Committee Room 2", "Library"):
        result = await room_service.add(RoomRequest(name=name))
        assert result.succeeded
        ids[name] = result.data
    return ids


@pytest.fixture
def make_booking(booking_service, person_id):
    """Book a room for the seeded person; returns the new booking id."""

    async def _make(room_id: int, start: datetime, end: datetime) -> int:
        result = await booking_service.book(
            BookingRequest(person_id=person_id, room_id=room_id, start_date=start, end_date=end)
        )
        assert result.succeeded, result.error_message
        return result.data

    return _make


# ══════════════════════════════════════════════════════════════════════════
# HTTP Client
# ══════════════════════════════════════════════════════════════════════════

@pytest_asyncio.fixture
async def test_client(session_factory):
    """
    HTTPX AsyncClient talking to the FastAPI app in-process.

    Usage:
        async def test_health(test_client):
            response = await test_client.get("/health")
            assert response.status_code == 200
    """
    from roombooking.main import app

    async def override_db_session():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db_session] = override_db_session
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()
