"""
Top‑level router for version 1 of the API.

Aggregates the domain routers.  The contacts router serves both the
collection (``/contacts``) and the item (``/contacts/person/{id}``)
resources.
"""

from fastapi import APIRouter

from .endpoints import contacts

router = APIRouter()

router.include_router(contacts.router, prefix="/contacts", tags=["contacts"])
