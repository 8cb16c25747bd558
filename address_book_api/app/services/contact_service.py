"""
Business logic for contacts.

``ContactService`` translates endpoint calls into ``AddressBook``
operations and builds the response representations, including the
derived ``href`` of each person.  Missing persons are reported with
``PersonNotFoundError`` (mapped to 404 by the endpoints) and updates
of missing persons with ``InvalidUpdateError`` (mapped to 400): PUT
never creates a person.

Each method performs exactly one store operation, so a failed call
leaves the book untouched.
"""

from __future__ import annotations

import logging
from typing import List

from address_book_api.app.core.store import AddressBook
from address_book_api.app.schemas.person import PersonCreate, PersonRead, PersonUpdate

logger = logging.getLogger(__name__)

PERSON_PATH = "contacts/person/{person_id}"


class PersonNotFoundError(LookupError):
    """Raised when no person has the requested id."""

    def __init__(self, person_id: int) -> None:
        super().__init__(f"Person {person_id} not found")
        self.person_id = person_id


class InvalidUpdateError(ValueError):
    """Raised when a PUT targets a person that does not exist."""

    def __init__(self, person_id: int) -> None:
        super().__init__(f"Person {person_id} does not exist; only existing persons can be updated")
        self.person_id = person_id


def build_href(base_url: str, person_id: int) -> str:
    """Return the canonical URI of a person, e.g. ``http://host/contacts/person/1``."""
    return f"{base_url.rstrip('/')}/{PERSON_PATH.format(person_id=person_id)}"


class ContactService:
    """Use cases for the ``/contacts`` resources."""

    @classmethod
    async def list_persons(cls, book: AddressBook, base_url: str) -> List[PersonRead]:
        return [PersonRead.from_record(p, build_href(base_url, p.id)) for p in book.list()]

    @classmethod
    async def create_person(cls, book: AddressBook, data: PersonCreate, base_url: str) -> PersonRead:
        """Create a new person.

        Every call allocates a fresh id, so two identical requests
        produce two distinct persons.
        """
        person = book.create(data.name, email=data.email, phones=data.phone_records())
        logger.info("Created person %s", person.id)
        return PersonRead.from_record(person, build_href(base_url, person.id))

    @classmethod
    async def get_person(cls, book: AddressBook, person_id: int, base_url: str) -> PersonRead:
        person = book.find(person_id)
        if person is None:
            logger.debug("Person %s not found", person_id)
            raise PersonNotFoundError(person_id)
        return PersonRead.from_record(person, build_href(base_url, person_id))

    @classmethod
    async def update_person(
        cls, book: AddressBook, person_id: int, data: PersonUpdate, base_url: str
    ) -> PersonRead:
        """Replace the name, email and phones of an existing person.

        The id comes from the path; the id and position of the person
        are preserved.  Repeating the same update yields the same
        state and the same response.
        """
        person = book.replace(person_id, data.name, email=data.email, phones=data.phone_records())
        if person is None:
            logger.warning("Rejected update of missing person %s", person_id)
            raise InvalidUpdateError(person_id)
        logger.info("Updated person %s", person_id)
        return PersonRead.from_record(person, build_href(base_url, person_id))

    @classmethod
    async def delete_person(cls, book: AddressBook, person_id: int) -> None:
        if not book.delete(person_id):
            logger.debug("Person %s already absent", person_id)
            raise PersonNotFoundError(person_id)
        logger.info("Deleted person %s", person_id)
