"""
Contact endpoints for API v1.

Two resources are exposed:

* ``/contacts``: the whole address book.  GET is safe and idempotent;
  POST creates a new person on every call and is neither.
* ``/contacts/person/{person_id}``: a single person.  GET is safe and
  idempotent; PUT and DELETE are idempotent but not safe.

PUT only updates existing persons and answers 400 otherwise.  DELETE
answers 204 the first time and 404 on any repeat, while the resulting
state (the person stays absent) is the same.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response, status

from address_book_api.app.api.deps import get_address_book, get_base_url
from address_book_api.app.core.store import AddressBook
from address_book_api.app.schemas.person import PersonCreate, PersonRead, PersonUpdate
from address_book_api.app.services.contact_service import (
    ContactService,
    InvalidUpdateError,
    PersonNotFoundError,
)

router = APIRouter()


@router.get("", response_model=List[PersonRead])
async def list_contacts(
    book: AddressBook = Depends(get_address_book),
    base_url: str = Depends(get_base_url),
) -> List[PersonRead]:
    """Return every person in the address book, in insertion order."""
    return await ContactService.list_persons(book, base_url)


@router.post("", response_model=PersonRead, status_code=status.HTTP_201_CREATED)
async def create_contact(
    person_in: PersonCreate,
    response: Response,
    book: AddressBook = Depends(get_address_book),
    base_url: str = Depends(get_base_url),
) -> PersonRead:
    """Create a person.

    The server assigns the id; any ``id`` or ``href`` in the body is
    ignored.  The ``Location`` header points at the new person.
    """
    person = await ContactService.create_person(book, person_in, base_url)
    response.headers["Location"] = person.href
    return person


@router.get("/person/{person_id}", response_model=PersonRead)
async def get_contact(
    person_id: int,
    book: AddressBook = Depends(get_address_book),
    base_url: str = Depends(get_base_url),
) -> PersonRead:
    """Retrieve a single person.  Raises 404 if the person is not found."""
    try:
        return await ContactService.get_person(book, person_id, base_url)
    except PersonNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Person not found") from e


@router.put("/person/{person_id}", response_model=PersonRead)
async def update_contact(
    person_id: int,
    person_in: PersonUpdate,
    book: AddressBook = Depends(get_address_book),
    base_url: str = Depends(get_base_url),
) -> PersonRead:
    """Replace an existing person.

    The id is taken from the path.  Updating a person that does not
    exist is a client error (400); PUT never creates.
    """
    try:
        return await ContactService.update_person(book, person_id, person_in, base_url)
    except InvalidUpdateError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e


@router.delete("/person/{person_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_contact(
    person_id: int,
    book: AddressBook = Depends(get_address_book),
) -> None:
    """Delete a person.  Raises 404 if the person is already absent."""
    try:
        await ContactService.delete_person(book, person_id)
    except PersonNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Person not found") from e
    return None
