"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service can be started without any configuration at all; they match
the port and paths used by the original address book service.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Address Book API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    # Listener settings used by ``run.py``.
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8282"))

    # Public base URI used to build ``href`` values and ``Location``
    # headers.  When empty, the base URL of the incoming request is used
    # instead, which is what you want unless the service sits behind a
    # reverse proxy that rewrites the host.
    base_url: str = os.getenv("BASE_URL", "")

    # Optional prefix under which the routes are mounted, e.g. ``/api``.
    # Leave empty to serve ``/contacts`` from the root.
    api_prefix: str = os.getenv("API_PREFIX", "")

    def __post_init__(self) -> None:
        # "api", "/api/" and "/api" all mean "/api"; "" and "/" mean root.
        prefix = self.api_prefix.strip("/")
        self.api_prefix = f"/{prefix}" if prefix else ""


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
