"""
Application package initializer.

The API is split into a small number of layers: ``core`` holds
configuration, logging and the in‑memory address book store,
``schemas`` defines the wire representation of persons, ``services``
contains the use cases behind each endpoint and ``api`` groups the
versioned routers.
"""

from .main import app, create_app  # noqa: F401
