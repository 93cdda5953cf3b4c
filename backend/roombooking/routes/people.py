"""
Room Booking Backend — People Route Handlers
==============================================

What:  CRUD endpoints for people under /api/people.
How:   Each handler delegates to PersonService and maps its result with
       routes.base.unwrap.
"""

from datetime import date
from typing import List

from fastapi import APIRouter, Body, Depends, Query

from roombooking.dependencies import get_person_service
from roombooking.routes.base import unwrap, unwrap_id
from roombooking.schemas.common import ErrorResponse, IdResponse
from roombooking.schemas.person import PersonRequest, PersonResponse
from roombooking.services.person_service import PersonService

router = APIRouter(prefix="/api/people", tags=["People"])

NOT_FOUND = {404: {"description": "Person not found", "model": ErrorResponse}}
BAD_REQUEST = {400: {"description": "Invalid person details", "model": ErrorResponse}}


@router.get(
    "",
    response_model=List[PersonResponse],
    summary="List people",
    description="String filters match by prefix; date_of_birth matches exactly.",
)
async def list_people(
    first_name: str | None = Query(default=None, description="First name prefix"),
    last_name: str | None = Query(default=None, description="Last name prefix"),
    phone_number: str | None = Query(default=None, description="Phone number prefix"),
    email: str | None = Query(default=None, description="Email prefix"),
    date_of_birth: date | None = Query(default=None, description="Exact date of birth"),
    service: PersonService = Depends(get_person_service),
) -> List[PersonResponse]:
    result = await service.get_all(
        first_name=first_name,
        last_name=last_name,
        phone_number=phone_number,
        email=email,
        date_of_birth=date_of_birth,
    )
    return unwrap(result)


@router.get(
    "/{person_id}",
    response_model=PersonResponse,
    responses=NOT_FOUND,
    summary="Get a person by ID",
)
async def get_person(
    person_id: int,
    service: PersonService = Depends(get_person_service),
) -> PersonResponse:
    return unwrap(await service.get(person_id))


@router.post(
    "",
    response_model=IdResponse,
    responses=BAD_REQUEST,
    summary="Add a person",
)
async def add_person(
    model: PersonRequest = Body(...),
    service: PersonService = Depends(get_person_service),
) -> IdResponse:
    return unwrap_id(await service.add(model))


@router.put(
    "/{person_id}",
    response_model=IdResponse,
    responses={**BAD_REQUEST, **NOT_FOUND},
    summary="Replace a person's details",
)
async def update_person(
    person_id: int,
    model: PersonRequest = Body(...),
    service: PersonService = Depends(get_person_service),
) -> IdResponse:
    return unwrap_id(await service.update(person_id, model))


@router.delete(
    "/{person_id}",
    response_model=IdResponse,
    responses=NOT_FOUND,
    summary="Remove a person and their bookings",
)
async def remove_person(
    person_id: int,
    service: PersonService = Depends(get_person_service),
) -> IdResponse:
    return unwrap_id(await service.remove(person_id))
