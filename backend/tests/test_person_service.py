"""
Room Booking Backend — Person Service Tests
=============================================

What:  Tests for PersonService validation, filters and CRUD.
How:   Real services over an in-memory SQLite database (see conftest.py).
"""

from datetime import date, datetime, timedelta, timezone

import pytest

from roombooking.exceptions import ResultStatus
from roombooking.schemas.person import PersonRequest


def at(hour: int, minute: int = 0) -> datetime:
    return datetime(2026, 3, 2, hour, minute, tzinfo=timezone.utc)


def person(first_name: str = "Ada", last_name: str = "Lovelace", **fields) -> PersonRequest:
    fields.setdefault("date_of_birth", date(1990, 12, 10))
    return PersonRequest(first_name=first_name, last_name=last_name, **fields)


class TestPersonValidation:

    @pytest.mark.asyncio
    async def test_add_and_get(self, person_service, person_request):
        result = await person_service.add(person_request)
        fetched = await person_service.get(result.data)

        assert result.succeeded
        assert fetched.data.first_name == "Test First Name"
        assert fetched.data.email == "test@test.com"
        assert fetched.data.date_of_birth == date(1996, 10, 10)

    @pytest.mark.asyncio
    async def test_missing_model_rejected(self, person_service):
        result = await person_service.add(None)

        assert result.status == ResultStatus.BAD_REQUEST

    @pytest.mark.asyncio
    async def test_blank_first_name_rejected(self, person_service):
        result = await person_service.add(person(first_name="  "))

        assert result.status == ResultStatus.BAD_REQUEST

    @pytest.mark.asyncio
    async def test_blank_last_name_rejected(self, person_service):
        result = await person_service.add(person(last_name=""))

        assert result.status == ResultStatus.BAD_REQUEST

    @pytest.mark.asyncio
    async def test_future_birth_date_rejected(self, person_service):
        tomorrow = date.today() + timedelta(days=1)

        result = await person_service.add(person(date_of_birth=tomorrow))

        assert result.status == ResultStatus.BAD_REQUEST
        assert "future" in result.error_message


class TestPersonQueries:

    @pytest.mark.asyncio
    async def test_get_missing(self, person_service):
        result = await person_service.get(31)

        assert result.status == ResultStatus.NOT_FOUND

    @pytest.mark.asyncio
    async def test_filters(self, person_service):
        await person_service.add(person("Ada", "Lovelace", email="ada@example.com"))
        await person_service.add(person("Alan", "Turing", date_of_birth=date(1912, 6, 23)))
        await person_service.add(person("Grace", "Hopper"))

        by_first = await person_service.get_all(first_name="A")
        by_last = await person_service.get_all(last_name="Hop")
        by_email = await person_service.get_all(email="ada@")
        by_birth = await person_service.get_all(date_of_birth=date(1912, 6, 23))
        unfiltered = await person_service.get_all(first_name="  ")

        assert [p.last_name for p in by_first.data] == ["Lovelace", "Turing"]
        assert [p.first_name for p in by_last.data] == ["Grace"]
        assert [p.first_name for p in by_email.data] == ["Ada"]
        assert [p.first_name for p in by_birth.data] == ["Alan"]
        assert len(unfiltered.data) == 3


class TestPersonChanges:

    @pytest.mark.asyncio
    async def test_update(self, person_service, person_id):
        result = await person_service.update(person_id, person("Renamed", "Person", phone_number="555"))
        fetched = await person_service.get(person_id)

        assert result.succeeded
        assert fetched.data.first_name == "Renamed"
        assert fetched.data.phone_number == "555"

    @pytest.mark.asyncio
    async def test_update_missing(self, person_service):
        result = await person_service.update(31, person())

        assert result.status == ResultStatus.NOT_FOUND

    @pytest.mark.asyncio
    async def test_invalid_update_keeps_stored_values(self, person_service, person_id):
        result = await person_service.update(person_id, person(first_name=""))
        fetched = await person_service.get(person_id)

        assert result.status == ResultStatus.BAD_REQUEST
        assert fetched.data.first_name == "Test First Name"

    @pytest.mark.asyncio
    async def test_remove_deletes_bookings(
        self, make_booking, person_service, booking_service, person_id, room_ids
    ):
        """Removing a person removes every booking they made."""
        await make_booking(room_ids["Library"], at(9), at(10))
        await make_booking(room_ids["Committee Room 1"], at(11), at(12))

        result = await person_service.remove(person_id)
        fetched = await person_service.get(person_id)
        bookings = await booking_service.get_all(person_id=person_id)

        assert result.succeeded
        assert fetched.status == ResultStatus.NOT_FOUND
        assert bookings.data == []

    @pytest.mark.asyncio
    async def test_remove_missing(self, person_service):
        result = await person_service.remove(31)

        assert result.status == ResultStatus.NOT_FOUND
