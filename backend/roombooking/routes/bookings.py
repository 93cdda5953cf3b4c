"""
Room Booking Backend — Bookings Route Handlers
================================================

What:  CRUD endpoints for bookings under /api/bookings.
"""

from typing import List

from fastapi import APIRouter, Body, Depends, Query

from roombooking.dependencies import get_booking_service
from roombooking.routes.base import unwrap, unwrap_id
from roombooking.schemas.booking import BookingRequest, BookingResponse
from roombooking.schemas.common import ErrorResponse, IdResponse
from roombooking.services.booking_service import BookingService

router = APIRouter(prefix="/api/bookings", tags=["Bookings"])

NOT_FOUND = {404: {"description": "Booking, person or room not found", "model": ErrorResponse}}
BAD_REQUEST = {400: {"description": "Invalid dates or booking longer than one hour", "model": ErrorResponse}}


@router.get(
    "",
    response_model=List[BookingResponse],
    summary="List bookings",
)
async def list_bookings(
    person_id: int | None = Query(default=None, description="Only bookings of this person"),
    room_id: int | None = Query(default=None, description="Only bookings of this room"),
    service: BookingService = Depends(get_booking_service),
) -> List[BookingResponse]:
    return unwrap(await service.get_all(person_id=person_id, room_id=room_id))


@router.get(
    "/{booking_id}",
    response_model=BookingResponse,
    responses=NOT_FOUND,
    summary="Get a booking by ID",
)
async def get_booking(
    booking_id: int,
    service: BookingService = Depends(get_booking_service),
) -> BookingResponse:
    return unwrap(await service.get(booking_id))


@router.post(
    "",
    response_model=IdResponse,
    responses={**BAD_REQUEST, **NOT_FOUND},
    summary="Book a room",
    description=(
        "Books a room for at most one hour. Overlapping bookings are not rejected; "
        "use GET /api/rooms/available to find a free room first."
    ),
)
async def book_room(
    model: BookingRequest = Body(...),
    service: BookingService = Depends(get_booking_service),
) -> IdResponse:
    return unwrap_id(await service.book(model))


@router.put(
    "/{booking_id}",
    response_model=IdResponse,
    responses={**BAD_REQUEST, **NOT_FOUND},
    summary="Replace a booking",
)
async def update_booking(
    booking_id: int,
    model: BookingRequest = Body(...),
    service: BookingService = Depends(get_booking_service),
) -> IdResponse:
    return unwrap_id(await service.update(booking_id, model))


@router.delete(
    "/{booking_id}",
    response_model=IdResponse,
    responses=NOT_FOUND,
    summary="Cancel a booking",
)
async def remove_booking(
    booking_id: int,
    service: BookingService = Depends(get_booking_service),
) -> IdResponse:
    return unwrap_id(await service.remove(booking_id))
