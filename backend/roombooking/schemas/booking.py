"""
Room Booking Backend — Booking Schemas
========================================

What:  Request and response contracts for /api/bookings.

Only types are validated here. The date rules (start not after end, at most
one hour long) belong to BookingService.
"""

from pydantic import BaseModel, Field

from roombooking.schemas.common import UtcDateTime


class BookingRequest(BaseModel):
    """Body of POST /api/bookings and PUT /api/bookings/{id}."""
    person_id: int = Field(description="Person making the booking")
    room_id: int = Field(description="Room being booked")
    start_date: UtcDateTime = Field(description="Start of the booking (ISO 8601)")
    end_date: UtcDateTime = Field(description="End of the booking (ISO 8601)")


class BookingResponse(BaseModel):
    id: int
    person_id: int
    room_id: int
    start_date: UtcDateTime
    end_date: UtcDateTime

    model_config = {"from_attributes": True}
