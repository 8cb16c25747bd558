"""
Main entrypoint for the Address Book API.

This module assembles the FastAPI application, sets up logging and
includes the versioned routers.  ``create_app`` builds an application
around a given ``AddressBook`` (a fresh empty one by default); a
module‑level ``app`` is created at import time so the service can be
run with uvicorn::

    uvicorn address_book_api.app.main:app --port 8282
"""

import logging
from typing import Optional

from fastapi import FastAPI

from .api.v1.router import router as v1_router
from .core.config import Settings, settings
from .core.logging_config import setup_logging
from .core.store import AddressBook


def create_app(
    address_book: Optional[AddressBook] = None,
    app_settings: Optional[Settings] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    address_book : Optional[AddressBook]
        The book shared by every request handled by this application.
        Tests pass their own book so they can inspect server state
        directly.  Defaults to a new, empty book.
    app_settings : Optional[Settings]
        Overrides the module‑level ``settings``.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    app_settings = app_settings or settings
    setup_logging(app_settings)

    app = FastAPI(
        title=app_settings.project_name,
        version=app_settings.api_version,
        debug=app_settings.debug,
    )
    app.state.settings = app_settings
    app.state.address_book = address_book if address_book is not None else AddressBook()

    app.include_router(v1_router, prefix=app_settings.api_prefix)

    logging.getLogger(__name__).debug(
        "Application created with %d persons", len(app.state.address_book)
    )
    return app


app = create_app()
