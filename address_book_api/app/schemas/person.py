"""
Pydantic models for person data.

``PersonBase`` holds the fields a client may send.  ``PersonCreate``
and ``PersonUpdate`` are the request bodies for ``POST /contacts`` and
``PUT /contacts/person/{id}``; any ``id`` or ``href`` a client includes
is ignored, since ids are assigned by the server and hrefs are derived.
``PersonRead`` is the response representation.
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from address_book_api.app.core.store import Person, PhoneNumber, PhoneType


class PhoneNumberSchema(BaseModel):
    number: str = Field(..., examples=["+34 976 000 000"])
    type: PhoneType = Field(PhoneType.HOME, examples=["mobile"])

    model_config = {
        "from_attributes": True,
    }

    def to_record(self) -> PhoneNumber:
        return PhoneNumber(number=self.number, type=self.type)


class PersonBase(BaseModel):
    name: str = Field(..., examples=["Juan"])
    email: Optional[str] = Field(None, examples=["juan@example.com"])
    phones: List[PhoneNumberSchema] = Field(default_factory=list)

    def phone_records(self) -> List[PhoneNumber]:
        return [phone.to_record() for phone in self.phones]


class PersonCreate(PersonBase):
    """Schema for creating a person."""
    pass


class PersonUpdate(PersonBase):
    """Schema for replacing a person.

    PUT replaces the whole representation, so omitted optional fields
    are cleared rather than kept.
    """
    pass


class PersonRead(PersonBase):
    """Schema for reading a person from the API."""

    id: int
    href: str

    model_config = {
        "from_attributes": True,
    }

    @classmethod
    def from_record(cls, person: Person, href: str) -> "PersonRead":
        return cls(
            id=person.id,
            name=person.name,
            email=person.email,
            phones=[PhoneNumberSchema.model_validate(p) for p in person.phones],
            href=href,
        )
