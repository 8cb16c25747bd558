"""Tests for settings that change how hrefs and routes are built."""

from fastapi.testclient import TestClient

from address_book_api.app.core.config import Settings
from address_book_api.app.core.store import AddressBook
from address_book_api.app.main import create_app


def test_configured_base_url_overrides_request_host():
    app = create_app(AddressBook(), Settings(base_url="https://contacts.example.org/"))
    with TestClient(app) as client:
        response = client.post("/contacts", json={"name": "Juan"})
    assert response.headers["location"] == "https://contacts.example.org/contacts/person/1"
    assert response.json()["href"] == "https://contacts.example.org/contacts/person/1"


def test_api_prefix_is_part_of_routes_and_hrefs():
    app = create_app(AddressBook(), Settings(api_prefix="/api"))
    with TestClient(app, base_url="http://localhost:8282") as client:
        assert client.get("/contacts").status_code == 404
        response = client.post("/api/contacts", json={"name": "Juan"})
        assert response.status_code == 201
        assert response.json()["href"] == "http://localhost:8282/api/contacts/person/1"
        assert client.get("/api/contacts/person/1").status_code == 200


def test_each_app_owns_its_book():
    first, second = AddressBook(), AddressBook()
    with TestClient(create_app(first)) as a, TestClient(create_app(second)) as b:
        a.post("/contacts", json={"name": "Juan"})
    assert len(first) == 1
    assert len(second) == 0


def test_api_prefix_without_slashes_is_normalised():
    assert Settings(api_prefix="api").api_prefix == "/api"
    assert Settings(api_prefix="/api/").api_prefix == "/api"
    assert Settings(api_prefix="/").api_prefix == ""

    app = create_app(AddressBook(), Settings(api_prefix="api/"))
    with TestClient(app, base_url="http://localhost:8282") as client:
        response = client.post("/api/contacts", json={"name": "Juan"})
    assert response.status_code == 201
    assert response.headers["location"] == "http://localhost:8282/api/contacts/person/1"
