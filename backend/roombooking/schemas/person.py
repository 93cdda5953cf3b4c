"""
Room Booking Backend — Person Schemas
=======================================

What:  Request and response contracts for /api/people.

Field presence and length are checked here by Pydantic; business rules
(blank names, birth dates in the future) are checked by PersonService so
they surface as a BadRequest ServiceResult.
"""

from datetime import date

from pydantic import BaseModel, Field


class PersonRequest(BaseModel):
    """Body of POST /api/people and PUT /api/people/{id}."""
    first_name: str = Field(max_length=100, description="Given name")
    last_name: str = Field(max_length=100, description="Family name")
    phone_number: str = Field(default="", max_length=50, description="Contact phone number")
    email: str = Field(default="", max_length=255, description="Contact email address")
    date_of_birth: date = Field(description="Date of birth (YYYY-MM-DD)")


class PersonResponse(BaseModel):
    id: int
    first_name: str
    last_name: str
    phone_number: str
    email: str
    date_of_birth: date

    model_config = {"from_attributes": True}
