"""
Room Booking Backend — Rooms Route Handlers
=============================================

What:  CRUD endpoints for rooms, the availability query and batch removal.

Routes:
    GET    /api/rooms                  list (optional name prefix)
    GET    /api/rooms/available        rooms free for [start_date, end_date)
    GET    /api/rooms/{id}             detail
    POST   /api/rooms                  add
    PUT    /api/rooms/{id}             rename
    DELETE /api/rooms/{id}             remove, optionally moving bookings
    POST   /api/rooms/remove           remove several rooms

/available is declared before /{room_id} so it is not parsed as an id.
"""

import logging
from datetime import datetime
from typing import List

from fastapi import APIRouter, Body, Depends, Query

from roombooking.dependencies import get_room_service
from roombooking.routes.base import unwrap, unwrap_id
from roombooking.schemas.common import ErrorResponse, IdListResponse, IdResponse, as_utc
from roombooking.schemas.room import RemoveRoomsRequest, RoomRequest, RoomResponse
from roombooking.services.room_service import RoomService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/rooms", tags=["Rooms"])

NOT_FOUND = {404: {"description": "Room not found", "model": ErrorResponse}}
BAD_REQUEST = {400: {"description": "Invalid request", "model": ErrorResponse}}
DUPLICATE = {422: {"description": "Room name already taken", "model": ErrorResponse}}


@router.get(
    "",
    response_model=List[RoomResponse],
    summary="List rooms",
)
async def list_rooms(
    name: str | None = Query(default=None, description="Room name prefix"),
    service: RoomService = Depends(get_room_service),
) -> List[RoomResponse]:
    return unwrap(await service.get_all(name=name))


@router.get(
    "/available",
    response_model=List[RoomResponse],
    responses=BAD_REQUEST,
    summary="List rooms available in a time range",
    description=(
        "Returns every room with no booking overlapping [start_date, end_date). "
        "A booking that ends exactly at start_date does not overlap."
    ),
)
async def list_available_rooms(
    start_date: datetime = Query(..., description="Start of the window (ISO 8601)"),
    end_date: datetime = Query(..., description="End of the window (ISO 8601)"),
    name: str | None = Query(default=None, description="Room name prefix"),
    service: RoomService = Depends(get_room_service),
) -> List[RoomResponse]:
    result = await service.get_available(as_utc(start_date), as_utc(end_date), name=name)
    return unwrap(result)


@router.get(
    "/{room_id}",
    response_model=RoomResponse,
    responses=NOT_FOUND,
    summary="Get a room by ID",
)
async def get_room(
    room_id: int,
    service: RoomService = Depends(get_room_service),
) -> RoomResponse:
    return unwrap(await service.get(room_id))


@router.post(
    "",
    response_model=IdResponse,
    responses={**BAD_REQUEST, **DUPLICATE},
    summary="Add a room",
)
async def add_room(
    model: RoomRequest = Body(...),
    service: RoomService = Depends(get_room_service),
) -> IdResponse:
    return unwrap_id(await service.add(model))


@router.put(
    "/{room_id}",
    response_model=IdResponse,
    responses={**BAD_REQUEST, **NOT_FOUND, **DUPLICATE},
    summary="Rename a room",
)
async def update_room(
    room_id: int,
    model: RoomRequest = Body(...),
    service: RoomService = Depends(get_room_service),
) -> IdResponse:
    return unwrap_id(await service.update(room_id, model))


@router.delete(
    "/{room_id}",
    response_model=IdResponse,
    responses={**BAD_REQUEST, **NOT_FOUND},
    summary="Remove a room",
    description=(
        "Deletes the room and its bookings. With move_bookings=true every booking "
        "is first re-created on new_room_id."
    ),
)
async def remove_room(
    room_id: int,
    move_bookings: bool = Query(default=False, description="Transfer bookings before removal"),
    new_room_id: int | None = Query(default=None, description="Room receiving the bookings"),
    service: RoomService = Depends(get_room_service),
) -> IdResponse:
    return unwrap_id(await service.remove(room_id, move_bookings, new_room_id))


@router.post(
    "/remove",
    response_model=IdListResponse,
    summary="Remove several rooms",
)
async def remove_rooms(
    model: RemoveRoomsRequest = Body(...),
    service: RoomService = Depends(get_room_service),
) -> IdListResponse:
    ids = unwrap(await service.remove_range(model))
    logger.info("Batch removal requested for %d room(s)", len(ids))
    return IdListResponse(ids=ids)
