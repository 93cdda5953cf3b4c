"""
Room Booking Backend — Services Layer
=======================================

What:  Business rules between the controllers (HTTP) and the repositories.
How:   Every public operation returns a ServiceResult. Services never raise
       to their callers; failures come back as BadRequest, NotFound,
       UnprocessableEntity or InternalServerError results.

Service Inventory:
    - PersonService:  people CRUD and filtering
    - RoomService:    rooms CRUD, availability query, removal with transfer
    - BookingService: booking validation and CRUD
"""

from roombooking.services.booking_service import BookingService
from roombooking.services.person_service import PersonService
from roombooking.services.result import ServiceResult
from roombooking.services.room_service import RoomService

__all__ = ["BookingService", "PersonService", "RoomService", "ServiceResult"]
