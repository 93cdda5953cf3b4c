"""
Room Booking Backend — Room Schemas
=====================================

What:  Request and response contracts for /api/rooms.
"""

from typing import List, Optional

from pydantic import BaseModel, Field


class RoomRequest(BaseModel):
    """Body of POST /api/rooms and PUT /api/rooms/{id}."""
    name: str = Field(max_length=100, description="Unique room name")


class RemoveRoomsRequest(BaseModel):
    """
    Body of POST /api/rooms/remove.

    When move_bookings is true every booking of each removed room is
    re-created on new_room_id before the room is deleted.
    """
    room_ids: List[int] = Field(min_length=1, description="Rooms to remove")
    move_bookings: bool = Field(default=False, description="Transfer bookings before removal")
    new_room_id: Optional[int] = Field(default=None, description="Room receiving the bookings")


class RoomResponse(BaseModel):
    id: int
    name: str

    model_config = {"from_attributes": True}
