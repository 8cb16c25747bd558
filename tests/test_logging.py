"""Tests for the package logging setup."""

import logging

import pytest
from fastapi.testclient import TestClient

from address_book_api.app.core.config import Settings
from address_book_api.app.core.logging_config import PACKAGE_LOGGER, file_handler_name, setup_logging
from address_book_api.app.core.store import AddressBook
from address_book_api.app.main import create_app


@pytest.fixture
def log_path(tmp_path):
    path = tmp_path / "address_book.log"
    yield path
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        if handler.get_name() == file_handler_name(str(path)):
            logger.removeHandler(handler)
            handler.close()


def test_log_file_receives_service_records(log_path):
    app = create_app(AddressBook(), Settings(log_file=str(log_path), log_level="INFO"))
    with TestClient(app) as client:
        assert client.post("/contacts", json={"name": "Juan"}).status_code == 201
        assert client.delete("/contacts/person/1").status_code == 204

    content = log_path.read_text(encoding="utf-8")
    assert "[INFO] address_book_api.app.services.contact_service: Created person 1" in content
    assert "Deleted person 1" in content


def test_handlers_stay_off_the_root_logger(log_path):
    create_app(AddressBook(), Settings(log_file=str(log_path)))
    names = [h.get_name() or "" for h in logging.getLogger().handlers]
    assert not any(name.startswith(PACKAGE_LOGGER) for name in names)


def test_setup_is_repeatable(log_path):
    app_settings = Settings(log_file=str(log_path))
    setup_logging(app_settings)
    logger = setup_logging(app_settings)
    names = [h.get_name() for h in logger.handlers]
    assert names.count(file_handler_name(str(log_path))) == 1
    assert len(names) == len(set(names))
