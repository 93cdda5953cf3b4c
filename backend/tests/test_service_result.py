"""
Room Booking Backend — Service Result Tests
=============================================

What:  Tests for ServiceResult, the service_operation decorator and the
       result to exception mapping used by the route handlers.
How:   Mock repositories (no database).

What we test:
    ✅ RoomBookingError subclasses become failed results with their status
    ✅ Unexpected exceptions become a generic 500 result
    ✅ Every failure rolls the session back
    ✅ unwrap() raises the exception matching the result status
"""

import pytest
from unittest.mock import AsyncMock, MagicMock

from roombooking.exceptions import (
    DatabaseError,
    NotFoundError,
    ResultStatus,
    UnprocessableEntityError,
    ValidationError,
    error_for_status,
)
from roombooking.routes.base import unwrap, unwrap_id
from roombooking.schemas.room import RoomRequest
from roombooking.services.result import INTERNAL_ERROR_MESSAGE, ServiceResult
from roombooking.services.room_service import RoomService


@pytest.fixture
def mock_repository():
    """Repository double with the async methods RoomService awaits."""
    repository = MagicMock()
    repository.exists = AsyncMock(return_value=False)
    repository.get = AsyncMock(return_value=None)
    repository.save = AsyncMock()
    repository.discard = AsyncMock()
    return repository


@pytest.fixture
def service(mock_repository) -> RoomService:
    return RoomService(room_repository=mock_repository, booking_repository=MagicMock())


class TestServiceResult:

    def test_success(self):
        result = ServiceResult.success(7)

        assert result.succeeded
        assert result.data == 7
        assert result.status is None

    def test_error(self):
        result = ServiceResult.error("nope", ResultStatus.NOT_FOUND)

        assert not result.succeeded
        assert result.data is None
        assert result.error_message == "nope"
        assert result.status == ResultStatus.NOT_FOUND


class TestServiceOperation:

    @pytest.mark.asyncio
    async def test_domain_error_becomes_failed_result(self, service, mock_repository):
        result = await service.get(5)

        assert result.status == ResultStatus.NOT_FOUND
        assert "5" in result.error_message
        mock_repository.discard.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_unexpected_error_becomes_internal_error(self, service, mock_repository):
        """Internal details never reach the result message."""
        mock_repository.save.side_effect = RuntimeError("disk I/O error")

        result = await service.add(RoomRequest(name="Board Room"))

        assert result.status == ResultStatus.INTERNAL_SERVER_ERROR
        assert result.error_message == INTERNAL_ERROR_MESSAGE
        mock_repository.discard.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_success_does_not_roll_back(self, service, mock_repository):
        result = await service.add(RoomRequest(name="Board Room"))

        assert result.succeeded
        mock_repository.add.assert_called_once()
        mock_repository.save.assert_awaited_once()
        mock_repository.discard.assert_not_awaited()


class TestUnwrap:

    def test_success_returns_payload(self):
        assert unwrap(ServiceResult.success(["a"])) == ["a"]

    def test_unwrap_id(self):
        assert unwrap_id(ServiceResult.success(3)).id == 3

    @pytest.mark.parametrize(
        "status, error_class",
        [
            (ResultStatus.BAD_REQUEST, ValidationError),
            (ResultStatus.NOT_FOUND, NotFoundError),
            (ResultStatus.UNPROCESSABLE_ENTITY, UnprocessableEntityError),
            (ResultStatus.INTERNAL_SERVER_ERROR, DatabaseError),
        ],
    )
    def test_failure_raises_matching_error(self, status, error_class):
        with pytest.raises(error_class) as exc_info:
            unwrap(ServiceResult.error("failed", status))

        assert exc_info.value.message == "failed"
        assert exc_info.value.status == status

    def test_error_for_status_keeps_message(self):
        error = error_for_status(ResultStatus.NOT_FOUND, "room with ID '9' was not found")

        assert isinstance(error, NotFoundError)
        assert error.message == "room with ID '9' was not found"
