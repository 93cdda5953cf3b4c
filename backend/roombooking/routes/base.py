"""
Room Booking Backend — Result to Response Mapping
===================================================

What:  Turns a ServiceResult into what a route handler returns.
How:   Success → the payload, serialized by the route's response_model.
       Failure → the matching RoomBookingError is raised, and the global
       exception handlers in main.py render it:

           BadRequest          → 400 ValidationError
           NotFound            → 404 NotFoundError
           UnprocessableEntity → 422 UnprocessableEntityError
           InternalServerError → 500 DatabaseError (generic message)
"""

from typing import Any

from roombooking.exceptions import ResultStatus, error_for_status
from roombooking.schemas.common import IdResponse
from roombooking.services.result import ServiceResult


def unwrap(result: ServiceResult) -> Any:
    """Payload of a successful result; raises the mapped error otherwise."""
    if result.succeeded:
        return result.data
    status = result.status or ResultStatus.INTERNAL_SERVER_ERROR
    raise error_for_status(status, result.error_message or "")


def unwrap_id(result: ServiceResult) -> IdResponse:
    return IdResponse(id=unwrap(result))
