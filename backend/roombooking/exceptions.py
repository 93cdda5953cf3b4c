"""
Room Booking Backend — Custom Exception Hierarchy
===================================================

What:  Application-specific exceptions for the booking error taxonomy.
How:   Each exception carries a message, an optional context dict and the
       ResultStatus it maps to. Services raise them internally; the
       `service_operation` decorator turns them into failed ServiceResults,
       and controllers raise them again so the global handlers in main.py
       can render the HTTP response.

Exception Hierarchy:
    RoomBookingError (base)
    ├── ValidationError           → 400 Bad Request
    ├── NotFoundError             → 404 Not Found
    ├── UnprocessableEntityError  → 422 Unprocessable Entity
    └── DatabaseError             → 500 Internal Server Error
"""

from enum import IntEnum
from typing import Any, Dict, Optional


class ResultStatus(IntEnum):
    """Failure kinds a service operation can report, valued as HTTP status codes."""

    BAD_REQUEST = 400
    NOT_FOUND = 404
    UNPROCESSABLE_ENTITY = 422
    INTERNAL_SERVER_ERROR = 500


class RoomBookingError(Exception):
    """
    Base exception for all application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged but NOT returned to client)
        status:   The ResultStatus this error is reported as
    """

    status: ResultStatus = ResultStatus.INTERNAL_SERVER_ERROR

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(RoomBookingError):
    """
    Raised when client input fails validation.

    When:  Invalid date range, booking longer than an hour, blank names,
           missing fields, inconsistent transfer options.
    HTTP:  400 Bad Request
    """

    status = ResultStatus.BAD_REQUEST

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class NotFoundError(RoomBookingError):
    """
    Raised when a requested resource does not exist.

    SQLAlchemy returns None for missing rows; services convert that None
    into this exception.
    HTTP:  404 Not Found
    """

    status = ResultStatus.NOT_FOUND

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[Any] = None,
        context: Optional[Dict[str, Any]] = None,
        message: Optional[str] = None,
    ):
        if message is None:
            message = f"The requested {resource} was not found"
            if resource_id is not None:
                message = f"{resource} with ID '{resource_id}' was not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id is not None:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)


class UnprocessableEntityError(RoomBookingError):
    """
    Raised when well-formed input conflicts with existing data.

    When:  Adding or renaming a room to a name that is already taken.
    HTTP:  422 Unprocessable Entity
    """

    status = ResultStatus.UNPROCESSABLE_ENTITY

    def __init__(
        self,
        message: str = "The request conflicts with existing data",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class DatabaseError(RoomBookingError):
    """
    Raised when an operation fails unexpectedly.

    The message returned to the client is always generic; details are
    logged server-side only.
    HTTP:  500 Internal Server Error
    """

    status = ResultStatus.INTERNAL_SERVER_ERROR

    def __init__(
        self,
        message: str = "An internal error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


_ERRORS_BY_STATUS = {
    ResultStatus.BAD_REQUEST: ValidationError,
    ResultStatus.NOT_FOUND: NotFoundError,
    ResultStatus.UNPROCESSABLE_ENTITY: UnprocessableEntityError,
    ResultStatus.INTERNAL_SERVER_ERROR: DatabaseError,
}


def error_for_status(status: ResultStatus, message: str) -> RoomBookingError:
    """Build the exception that reports `message` with the given status."""
    error_class = _ERRORS_BY_STATUS.get(status, DatabaseError)
    return error_class(message=message)
