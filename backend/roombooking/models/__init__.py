"""ORM models. Importing this package registers every mapper with Base.metadata."""

from roombooking.models.base import BaseEntity
from roombooking.models.booking import Booking
from roombooking.models.person import Person
from roombooking.models.room import Room

__all__ = ["BaseEntity", "Booking", "Person", "Room"]
