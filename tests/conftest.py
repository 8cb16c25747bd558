"""Shared fixtures for the address book tests."""

import pytest
from fastapi.testclient import TestClient

from address_book_api.app.core.store import AddressBook, Person
from address_book_api.app.main import create_app

BASE_URL = "http://localhost:8282"


@pytest.fixture
def book():
    return AddressBook()


@pytest.fixture
def seeded_book():
    """Salvador (1) and Juan (2), with ``next_id`` already at 3."""
    return AddressBook([Person(id=1, name="Salvador"), Person(id=2, name="Juan")])


def make_client(address_book: AddressBook) -> TestClient:
    return TestClient(create_app(address_book), base_url=BASE_URL)


@pytest.fixture
def client(book):
    with make_client(book) as c:
        yield c


@pytest.fixture
def seeded_client(seeded_book):
    with make_client(seeded_book) as c:
        yield c
