"""
Room Booking Backend — API Integration Tests
==============================================

What:  End-to-end tests through the FastAPI app (routing, serialization,
       status codes, error bodies, middleware).
How:   HTTPX AsyncClient over ASGITransport; the database session dependency
       is overridden to use an in-memory SQLite database.
"""

import pytest


PERSON = {
    "first_name": "Test First Name",
    "last_name": "Test Last Name",
    "phone_number": "123",
    "email": "test@test.com",
    "date_of_birth": "1996-10-10",
}


async def create(client, path: str, body: dict) -> int:
    response = await client.post(path, json=body)
    assert response.status_code == 200, response.text
    return response.json()["id"]


class TestPeopleApi:

    @pytest.mark.asyncio
    async def test_crud(self, test_client):
        person_id = await create(test_client, "/api/people", PERSON)

        fetched = await test_client.get(f"/api/people/{person_id}")
        assert fetched.status_code == 200
        assert fetched.json() == {"id": person_id, **PERSON}

        updated = await test_client.put(
            f"/api/people/{person_id}", json={**PERSON, "first_name": "Changed"}
        )
        assert updated.json() == {"id": person_id}

        listed = await test_client.get("/api/people", params={"first_name": "Chan"})
        assert [p["id"] for p in listed.json()] == [person_id]

        removed = await test_client.delete(f"/api/people/{person_id}")
        assert removed.json() == {"id": person_id}

        missing = await test_client.get(f"/api/people/{person_id}")
        assert missing.status_code == 404
        assert missing.json()["error"] == "not_found"

    @pytest.mark.asyncio
    async def test_malformed_body_is_bad_request(self, test_client):
        response = await test_client.post("/api/people", json={})

        assert response.status_code == 400
        body = response.json()
        assert body["error"] == "validation_error"
        assert body["details"]["errors"]

    @pytest.mark.asyncio
    async def test_blank_name_is_bad_request(self, test_client):
        response = await test_client.post("/api/people", json={**PERSON, "last_name": " "})

        assert response.status_code == 400
        assert "Last name" in response.json()["message"]


class TestRoomsApi:

    @pytest.mark.asyncio
    async def test_duplicate_name_is_unprocessable(self, test_client):
        await create(test_client, "/api/rooms", {"name": "Library"})

        response = await test_client.post("/api/rooms", json={"name": "Library"})

        assert response.status_code == 422
        assert response.json()["error"] == "unprocessable_entity"

    @pytest.mark.asyncio
    async def test_availability_and_removal(self, test_client):
        person_id = await create(test_client, "/api/people", PERSON)
        library = await create(test_client, "/api/rooms", {"name": "Library"})
        lounge = await create(test_client, "/api/rooms", {"name": "Lounge"})
        await create(
            test_client,
            "/api/bookings",
            {
                "person_id": person_id,
                "room_id": library,
                "start_date": "2026-03-02T10:00:00Z",
                "end_date": "2026-03-02T11:00:00Z",
            },
        )

        busy = await test_client.get(
            "/api/rooms/available",
            params={"start_date": "2026-03-02T10:15:00Z", "end_date": "2026-03-02T10:45:00Z"},
        )
        free = await test_client.get(
            "/api/rooms/available",
            params={"start_date": "2026-03-02T11:00:00Z", "end_date": "2026-03-02T12:00:00Z"},
        )
        assert [r["name"] for r in busy.json()] == ["Lounge"]
        assert [r["name"] for r in free.json()] == ["Library", "Lounge"]

        removed = await test_client.delete(
            f"/api/rooms/{library}", params={"move_bookings": "true", "new_room_id": lounge}
        )
        assert removed.json() == {"id": library}

        bookings = await test_client.get("/api/bookings", params={"room_id": lounge})
        assert len(bookings.json()) == 1
        assert bookings.json()[0]["start_date"].startswith("2026-03-02T10:00:00")

    @pytest.mark.asyncio
    async def test_inverted_availability_window(self, test_client):
        response = await test_client.get(
            "/api/rooms/available",
            params={"start_date": "2026-03-02T12:00:00Z", "end_date": "2026-03-02T11:00:00Z"},
        )

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_batch_remove(self, test_client):
        first = await create(test_client, "/api/rooms", {"name": "Room A"})
        second = await create(test_client, "/api/rooms", {"name": "Room B"})

        response = await test_client.post(
            "/api/rooms/remove", json={"room_ids": [first, second, 999]}
        )
        remaining = await test_client.get("/api/rooms")

        assert response.status_code == 200
        assert response.json() == {"ids": [first, second, 999]}
        assert remaining.json() == []


class TestBookingsApi:

    @pytest.mark.asyncio
    async def test_booking_over_one_hour_is_bad_request(self, test_client):
        person_id = await create(test_client, "/api/people", PERSON)
        room_id = await create(test_client, "/api/rooms", {"name": "Library"})

        response = await test_client.post(
            "/api/bookings",
            json={
                "person_id": person_id,
                "room_id": room_id,
                "start_date": "2026-03-02T10:00:00Z",
                "end_date": "2026-03-02T11:30:00Z",
            },
        )

        assert response.status_code == 400
        assert response.json()["message"] == "A booking cannot be longer than one hour"

    @pytest.mark.asyncio
    async def test_booking_for_unknown_person_is_not_found(self, test_client):
        room_id = await create(test_client, "/api/rooms", {"name": "Library"})

        response = await test_client.post(
            "/api/bookings",
            json={
                "person_id": 41,
                "room_id": room_id,
                "start_date": "2026-03-02T10:00:00Z",
                "end_date": "2026-03-02T10:30:00Z",
            },
        )

        assert response.status_code == 404


class TestAmbient:

    @pytest.mark.asyncio
    async def test_health(self, test_client):
        response = await test_client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
        assert response.json()["database"] == "connected"

    @pytest.mark.asyncio
    async def test_request_id_echoed(self, test_client):
        response = await test_client.get("/api/rooms", headers={"X-Request-ID": "abc123"})

        assert response.headers["X-Request-ID"] == "abc123"

    @pytest.mark.asyncio
    async def test_request_id_generated(self, test_client):
        response = await test_client.get("/api/rooms/5")

        assert len(response.headers["X-Request-ID"]) == 8
        assert response.json()["request_id"] == response.headers["X-Request-ID"]
