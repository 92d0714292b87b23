"""
Pydantic models for person data.

``PersonCreate`` validates the payload of both ``POST`` and ``PUT``
requests (a person update replaces the whole record).  ``PersonRead``
adds the server-assigned ``id``.
"""

from datetime import date
from typing import Optional

from pydantic import Field, field_validator

from catalog_api.app.models.person import Person
from catalog_api.app.schemas.base import CamelModel


class PersonBase(CamelModel):
    name: str = Field(..., min_length=2, max_length=50, examples=["Ken"])
    last_name: str = Field(..., min_length=2, max_length=50, examples=["Iding"])
    age: int = Field(..., ge=0, le=120, examples=[20])
    height: float = Field(..., gt=0, le=3.0, description="Height in metres", examples=[1.7])
    weight: float = Field(..., gt=0, le=500.0, description="Weight in kilograms", examples=[60.0])
    birth_date: date = Field(..., examples=["2004-05-01"])


class PersonCreate(PersonBase):
    """Schema for creating or replacing a person.

    Any ``id`` in the payload is ignored; ids are assigned by the server.
    """

    @field_validator("name", "last_name")
    @classmethod
    def not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be blank")
        return v

    @field_validator("birth_date")
    @classmethod
    def in_the_past(cls, v: date) -> date:
        if v >= date.today():
            raise ValueError("birth date must be in the past")
        return v

    def to_person(self) -> Person:
        return Person(**self.model_dump())


class PersonRead(PersonBase):
    """Schema for reading a person from the API."""

    id: Optional[int] = None
