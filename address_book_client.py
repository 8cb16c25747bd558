"""Address book API client.

This module defines a thin client around the address book REST API.
It uses the ``requests`` library internally and exposes one method per
operation:

* :meth:`list_persons` – return every person in the address book.
* :meth:`get_person` – fetch a single person by its identifier.
* :meth:`create_person` – create a person and return it with its
  ``Location``.
* :meth:`update_person` – replace the data of an existing person.
* :meth:`delete_person` – remove a person.

Every method returns a ``(result, error)`` tuple instead of raising.
On failure ``error`` is a dictionary with the keys ``status_code`` and
``message``; ``status_code`` is ``None`` when the server could not be
reached at all.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class AddressBookClient:
    """Client for the ``/contacts`` resources."""

    COLLECTION_PATH = "/contacts"
    ITEM_PATH = "/contacts/person/{id}"

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL for the API, e.g. ``http://localhost:8282``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.  Any object with
                a compatible ``request`` method may be used.
            timeout: Timeout in seconds for each request, or ``None``
                to wait indefinitely.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Dict[str, str]], Optional[Error]]:
        """Perform an HTTP request to the API.

        Returns:
            A tuple ``(data, headers, error)``.  ``data`` is the parsed
            JSON body (``None`` for empty bodies) and ``headers`` the
            response headers; both are ``None`` on failure.
        """
        url = f"{self.base_url}{path}"
        kwargs: Dict[str, Any] = {"headers": {"Accept": "application/json"}}
        if json_body is not None:
            kwargs["json"] = json_body
        if self.timeout is not None:
            kwargs["timeout"] = self.timeout
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(method, url, **kwargs)
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, None, {"status_code": None, "message": str(exc)}

        if response.status_code >= 400:
            message = ""
            try:
                err_json = response.json()
                if isinstance(err_json, dict):
                    detail = err_json.get("detail") or err_json.get("message")
                    message = detail if isinstance(detail, str) else str(err_json)
                else:
                    message = str(err_json)
            except ValueError:
                message = response.text
            if not message:
                message = f"HTTP {response.status_code}"
            logger.error("API request failed (%s): %s", response.status_code, message)
            return None, None, {"status_code": response.status_code, "message": message}

        data = response.json() if response.content else None
        return data, dict(response.headers), None

    # ------------------------------------------------------------------
    # Collection operations
    # ------------------------------------------------------------------
    def list_persons(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve all persons.

        Returns:
            A tuple ``(persons, error)``.  ``persons`` is empty on failure.
        """
        data, _, error = self._request("GET", self.COLLECTION_PATH)
        if error:
            return [], error
        return data or [], None

    def create_person(
        self, name: str, *, email: Optional[str] = None, phones: Optional[List[Dict[str, str]]] = None
    ) -> Tuple[Optional[Dict[str, Any]], Optional[str], Optional[Error]]:
        """Create a new person.

        Returns:
            A tuple ``(person, location, error)`` where ``location`` is
            the value of the ``Location`` response header.
        """
        payload: Dict[str, Any] = {"name": name, "email": email, "phones": phones or []}
        data, headers, error = self._request("POST", self.COLLECTION_PATH, json_body=payload)
        if error:
            return None, None, error
        location = {k.lower(): v for k, v in headers.items()}.get("location")
        return data, location, None

    # ------------------------------------------------------------------
    # Item operations
    # ------------------------------------------------------------------
    def get_person(self, person_id: int) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        data, _, error = self._request("GET", self.ITEM_PATH.format(id=person_id))
        if error:
            return None, error
        return data, None

    def update_person(
        self,
        person_id: int,
        name: str,
        *,
        email: Optional[str] = None,
        phones: Optional[List[Dict[str, str]]] = None,
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Replace an existing person.  The server answers 400 for unknown ids."""
        payload: Dict[str, Any] = {"name": name, "email": email, "phones": phones or []}
        data, _, error = self._request("PUT", self.ITEM_PATH.format(id=person_id), json_body=payload)
        if error:
            return None, error
        return data, None

    def delete_person(self, person_id: int) -> Tuple[bool, Optional[Error]]:
        """Delete a person.

        Returns:
            A tuple ``(success, error)``.
        """
        _, _, error = self._request("DELETE", self.ITEM_PATH.format(id=person_id))
        if error:
            return False, error
        return True, None
