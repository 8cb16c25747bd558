"""
In‑memory address book store.

The ``AddressBook`` keeps an ordered list of ``Person`` records and the
counter used to assign new identifiers.  It is the only owner of
mutable state in the service: endpoints and services receive copies of
the records and never the list itself.

Every operation runs under a single re‑entrant lock so that identifier
allocation is atomic, readers never observe a half‑applied write and
find‑then‑mutate sequences cannot lose updates.  Critical sections only
touch in‑memory lists, so no operation blocks for long.

Identifiers are never reused.  ``next_id`` only moves forward, even
when persons are deleted, and it is bumped past any id inserted
directly (e.g. when a book is seeded in tests).
"""

from __future__ import annotations

import copy
import threading
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, List, Optional


class PhoneType(str, Enum):
    MOBILE = "mobile"
    HOME = "home"
    WORK = "work"


@dataclass
class PhoneNumber:
    number: str
    type: PhoneType = PhoneType.HOME


@dataclass
class Person:
    """A stored contact.

    ``href`` is not stored; it is derived from ``id`` and the
    public base URI when a response is built.
    """

    id: int
    name: str
    email: Optional[str] = None
    phones: List[PhoneNumber] = field(default_factory=list)


class AddressBook:
    """Ordered collection of persons plus a monotonic id generator."""

    def __init__(self, persons: Optional[Iterable[Person]] = None) -> None:
        self._lock = threading.RLock()
        self._persons: List[Person] = []
        self._next_id = 1
        for person in persons or ():
            self.insert(person)

    def __len__(self) -> int:
        with self._lock:
            return len(self._persons)

    @property
    def next_id(self) -> int:
        with self._lock:
            return self._next_id

    def list(self) -> List[Person]:
        """Return a snapshot of all persons in insertion order."""
        with self._lock:
            return [copy.deepcopy(p) for p in self._persons]

    def find(self, person_id: int) -> Optional[Person]:
        with self._lock:
            person = self._find_unlocked(person_id)
            return copy.deepcopy(person) if person is not None else None

    def allocate_id(self) -> int:
        """Return the next identifier and advance the counter."""
        with self._lock:
            person_id = self._next_id
            self._next_id += 1
            return person_id

    def insert(self, person: Person) -> None:
        """Append a person whose id has already been assigned.

        Raises ``ValueError`` if the id is not positive or is already
        present.
        """
        if person.id < 1:
            raise ValueError(f"Person id must be positive, got {person.id}")
        with self._lock:
            if self._find_unlocked(person.id) is not None:
                raise ValueError(f"Person {person.id} already exists")
            self._persons.append(copy.deepcopy(person))
            if person.id >= self._next_id:
                self._next_id = person.id + 1

    def create(
        self,
        name: str,
        email: Optional[str] = None,
        phones: Optional[Iterable[PhoneNumber]] = None,
    ) -> Person:
        """Allocate an id and insert a new person in one atomic step."""
        with self._lock:
            person = Person(
                id=self.allocate_id(),
                name=name,
                email=email,
                phones=list(phones or []),
            )
            self.insert(person)
            return copy.deepcopy(person)

    def replace(
        self,
        person_id: int,
        name: str,
        email: Optional[str] = None,
        phones: Optional[Iterable[PhoneNumber]] = None,
    ) -> Optional[Person]:
        """Overwrite the mutable fields of an existing person in place.

        The id and the position in the list are preserved.  Returns the
        updated person, or ``None`` if no person has that id.
        """
        with self._lock:
            person = self._find_unlocked(person_id)
            if person is None:
                return None
            person.name = name
            person.email = email
            person.phones = [copy.deepcopy(p) for p in phones or []]
            return copy.deepcopy(person)

    def delete(self, person_id: int) -> bool:
        with self._lock:
            for index, person in enumerate(self._persons):
                if person.id == person_id:
                    del self._persons[index]
                    return True
            return False

    def _find_unlocked(self, person_id: int) -> Optional[Person]:
        for person in self._persons:
            if person.id == person_id:
                return person
        return None
