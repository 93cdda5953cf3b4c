"""
Room Booking Backend — Person Service
=======================================

What:  Business rules for people: validation, CRUD, DTO translation.
Who:   Called by the /api/people route handlers.

Validation:
    - first and last name must not be blank
    - date of birth must not be in the future
    Violations are reported as BadRequest.
"""

import logging
from datetime import date
from typing import List, Optional

from roombooking.exceptions import NotFoundError, ValidationError
from roombooking.models.person import Person
from roombooking.repositories.base import AbstractRepository
from roombooking.schemas.person import PersonRequest, PersonResponse
from roombooking.services.result import BaseService, service_operation

logger = logging.getLogger(__name__)

INVALID_MODEL = "The person details are missing or invalid"


class PersonService(BaseService):
    """CRUD operations on people."""

    def __init__(self, repository: AbstractRepository[Person]):
        self._repository = repository

    @service_operation
    async def add(self, model: Optional[PersonRequest]) -> int:
        self._validate(model)

        person = Person(
            first_name=model.first_name.strip(),
            last_name=model.last_name.strip(),
            phone_number=model.phone_number.strip(),
            email=model.email.strip(),
            date_of_birth=model.date_of_birth,
        )
        self._repository.add(person)
        await self._repository.save()

        logger.info("Person %s created", person.id)
        return person.id

    @service_operation
    async def get(self, person_id: int) -> PersonResponse:
        person = await self._get_or_raise(person_id)
        return PersonResponse.model_validate(person)

    @service_operation
    async def get_all(
        self,
        first_name: Optional[str] = None,
        last_name: Optional[str] = None,
        phone_number: Optional[str] = None,
        email: Optional[str] = None,
        date_of_birth: Optional[date] = None,
    ) -> List[PersonResponse]:
        """
        List people, optionally filtered.

        String filters match by prefix; date_of_birth matches exactly.
        Blank string filters are ignored.
        """
        statement = self._repository.query()

        prefixes = (
            (Person.first_name, first_name),
            (Person.last_name, last_name),
            (Person.phone_number, phone_number),
            (Person.email, email),
        )
        for column, value in prefixes:
            if value and value.strip():
                statement = statement.where(column.startswith(value.strip(), autoescape=True))

        if date_of_birth is not None:
            statement = statement.where(Person.date_of_birth == date_of_birth)

        people = await self._repository.list(statement.order_by(Person.id))
        return [PersonResponse.model_validate(person) for person in people]

    @service_operation
    async def update(self, person_id: int, model: Optional[PersonRequest]) -> int:
        person = await self._get_or_raise(person_id)
        self._validate(model)

        person.update_fields(
            first_name=model.first_name.strip(),
            last_name=model.last_name.strip(),
            phone_number=model.phone_number.strip(),
            email=model.email.strip(),
            date_of_birth=model.date_of_birth,
        )
        await self._repository.update(person)
        await self._repository.save()

        logger.info("Person %s updated", person_id)
        return person_id

    @service_operation
    async def remove(self, person_id: int) -> int:
        """Delete a person together with their bookings."""
        person = await self._get_or_raise(person_id)

        await self._repository.remove(person)
        await self._repository.save()

        logger.info("Person %s removed", person_id)
        return person_id

    # ── Helpers ───────────────────────────────────────────────────────────

    async def _get_or_raise(self, person_id: int) -> Person:
        person = await self._repository.get(person_id)
        if person is None:
            raise NotFoundError(resource="person", resource_id=person_id)
        return person

    @staticmethod
    def _validate(model: Optional[PersonRequest]) -> None:
        if model is None:
            raise ValidationError(INVALID_MODEL)
        if not model.first_name.strip():
            raise ValidationError("First name must not be blank", field="first_name")
        if not model.last_name.strip():
            raise ValidationError("Last name must not be blank", field="last_name")
        if model.date_of_birth > date.today():
            raise ValidationError(
                "Date of birth must not be in the future", field="date_of_birth"
            )
