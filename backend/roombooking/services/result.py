"""
Room Booking Backend — Service Result Plumbing
================================================

What:  The uniform outcome every service operation returns, and the
       decorator that produces it.
How:   Service methods are written as plain coroutines that return their
       payload and raise RoomBookingError subclasses on failure. The
       `service_operation` decorator catches at the service boundary:

           payload returned          → ServiceResult.success(payload)
           RoomBookingError raised   → ServiceResult.error(message, exc.status)
           anything else raised      → ServiceResult.error(generic, 500)

       The session is rolled back before a failure is returned, so a half
       staged change never reaches the next save().

Example:
    result = await room_service.add(RoomRequest(name="Committee Room 1"))
    if result.succeeded:
        room_id = result.data
    else:
        log(result.status, result.error_message)
"""

import functools
import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Optional, TypeVar

from roombooking.exceptions import ResultStatus, RoomBookingError
from roombooking.repositories.base import AbstractRepository

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "An unexpected error occurred. Please try again later."


@dataclass(frozen=True)
class ServiceResult:
    """
    Success (with optional payload) or failure (with message and status).

    Attributes:
        succeeded:     True for success results
        data:          Payload of a success result (id, DTO or list of DTOs)
        error_message: Human-readable reason of a failure
        status:        Failure kind; None on success
    """

    succeeded: bool
    data: Any = None
    error_message: Optional[str] = None
    status: Optional[ResultStatus] = None

    @classmethod
    def success(cls, data: Any = None) -> "ServiceResult":
        return cls(succeeded=True, data=data)

    @classmethod
    def error(cls, message: str, status: ResultStatus) -> "ServiceResult":
        return cls(succeeded=False, error_message=message, status=status)


class BaseService:
    """
    Shared plumbing for the domain services.

    Subclasses set `_repository` to the repository of their own entity; every
    repository a service holds shares one session, so rolling back through
    the primary one discards all staged changes.
    """

    _repository: AbstractRepository

    async def rollback(self) -> None:
        await self._repository.discard()


ServiceT = TypeVar("ServiceT", bound=BaseService)


def service_operation(
    func: Callable[..., Awaitable[Any]],
) -> Callable[..., Awaitable[ServiceResult]]:
    """Wrap a service coroutine so it always returns a ServiceResult."""

    @functools.wraps(func)
    async def wrapper(self: ServiceT, *args: Any, **kwargs: Any) -> ServiceResult:
        try:
            data = await func(self, *args, **kwargs)
        except RoomBookingError as exc:
            await self.rollback()
            logger.warning(
                "%s failed (%d): %s | Context: %s",
                func.__qualname__,
                exc.status,
                exc.message,
                exc.context,
            )
            return ServiceResult.error(exc.message, exc.status)
        except Exception:
            await self.rollback()
            logger.error("Unexpected error in %s", func.__qualname__, exc_info=True)
            return ServiceResult.error(
                INTERNAL_ERROR_MESSAGE, ResultStatus.INTERNAL_SERVER_ERROR
            )
        return ServiceResult.success(data)

    return wrapper
