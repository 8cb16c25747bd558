"""
Logging setup for the address book service.

Handlers are attached to the ``address_book_api`` package logger, not
to the root logger, so importing the package never reconfigures
logging for the host process.  Every module logs through
``logging.getLogger(__name__)`` and therefore ends up here.

Handlers are named after their target.  Calling ``setup_logging``
again with the same settings is a no‑op; a new ``log_file`` adds one
more file handler.
"""

import logging
from pathlib import Path

from .config import Settings

PACKAGE_LOGGER = "address_book_api"
CONSOLE_HANDLER = f"{PACKAGE_LOGGER}.console"

_formatter = logging.Formatter(
    fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)


def file_handler_name(log_file: str) -> str:
    return f"{PACKAGE_LOGGER}.file:{Path(log_file).resolve()}"


def setup_logging(app_settings: Settings) -> logging.Logger:
    """Configure the package logger from ``app_settings``.

    Sets the level from ``log_level`` (unknown names fall back to
    INFO), ensures a console handler exists and, when ``log_file`` is
    set, a UTF‑8 file handler for that path.  Returns the package
    logger.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(getattr(logging, app_settings.log_level.upper(), logging.INFO))
    present = {h.get_name() for h in logger.handlers}

    if CONSOLE_HANDLER not in present:
        console = logging.StreamHandler()
        console.set_name(CONSOLE_HANDLER)
        console.setFormatter(_formatter)
        logger.addHandler(console)

    if app_settings.log_file:
        name = file_handler_name(app_settings.log_file)
        if name not in present:
            file_handler = logging.FileHandler(Path(app_settings.log_file).resolve(), encoding="utf-8")
            file_handler.set_name(name)
            file_handler.setFormatter(_formatter)
            logger.addHandler(file_handler)

    return logger
