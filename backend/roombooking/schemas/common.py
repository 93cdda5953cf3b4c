"""
Room Booking Backend — Shared Pydantic Schemas
================================================

What:  Types and response models used by more than one resource.

Timestamps:
    `UtcDateTime` normalizes every datetime crossing the API boundary to a
    timezone-aware UTC value. Naive input is taken to be UTC already, which
    also covers values read back from SQLite (it stores no offset).
"""

from datetime import datetime, timezone
from typing import Annotated, List, Optional

from pydantic import AfterValidator, BaseModel, Field


def as_utc(value: datetime) -> datetime:
    """Attach UTC to naive datetimes and convert aware ones to UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


UtcDateTime = Annotated[datetime, AfterValidator(as_utc)]


class IdResponse(BaseModel):
    """Returned by create, update and delete endpoints."""
    id: int = Field(description="Identifier of the affected entity")


class IdListResponse(BaseModel):
    """Returned by the batch room removal endpoint."""
    ids: List[int] = Field(description="Identifiers that were submitted for removal")


class ErrorResponse(BaseModel):
    """
    Standardized error body for every 4xx/5xx response.

    Example:
        {
            "error": "unprocessable_entity",
            "message": "A room named 'Committee Room 1' already exists",
            "request_id": "1f0c2a9e"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Returned by GET /health for monitoring and load balancer probes."""
    status: str = Field(description="Overall service status: healthy or unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
