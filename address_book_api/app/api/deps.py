"""
FastAPI dependencies shared by the endpoint modules.

The address book and settings are attached to ``app.state`` by
``create_app`` so that every application instance (one per server, or
one per test) owns its own book.
"""

from fastapi import Request

from address_book_api.app.core.config import Settings
from address_book_api.app.core.store import AddressBook


def get_address_book(request: Request) -> AddressBook:
    return request.app.state.address_book


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_base_url(request: Request) -> str:
    """Return the public base URI that hrefs are built from.

    ``settings.base_url`` wins when configured; otherwise the base URL
    of the incoming request is used.  The API prefix is appended in
    both cases.
    """
    app_settings = get_settings(request)
    base = app_settings.base_url or str(request.base_url)
    return base.rstrip("/") + app_settings.api_prefix
