"""Person API client.

A small wrapper around the ``/api/persons`` HTTP surface built on the
``requests`` library.  Every method returns a tuple ``(data, error)``:
on success ``data`` holds the decoded JSON (or ``None`` for empty
responses) and ``error`` is ``None``; on failure ``data`` is ``None``
and ``error`` is a dictionary with keys ``status_code`` and
``message``.

Payloads use the API's camelCase field names, e.g.::

    api = PersonAPI(base_url="http://localhost:8000")
    person, error = api.create_person({"firstName": "Ada", "lastName": "Lovelace"})
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

ApiError = Dict[str, Any]


class PersonAPI:
    """Client for the person CRUD endpoints."""

    def __init__(
        self,
        *,
        base_url: str,
        prefix: str = "/api/persons",
        timeout: float = 15,
        session: Optional[requests.Session] = None,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the service, e.g. ``http://localhost:8000``.
            prefix: Path of the persons collection.
            timeout: Per-request timeout in seconds.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
        """
        self.base_url = base_url.rstrip("/")
        self.prefix = prefix.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    # ------------------------------------------------------------------
    # Low level HTTP helper
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[ApiError]]:
        """Perform an HTTP request and decode the response.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PUT``, ``DELETE``).
            path: Path relative to :attr:`base_url`.
            json_body: JSON body to send with the request.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None and exc.response.content:
                try:
                    err_json = exc.response.json()
                    message = str(err_json.get("detail") or err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    # ------------------------------------------------------------------
    # Person operations
    # ------------------------------------------------------------------
    def list_persons(self) -> Tuple[List[Dict[str, Any]], Optional[ApiError]]:
        """Retrieve all persons.  On failure the list is empty."""
        data, error = self._request("GET", self.prefix)
        return data or [], error

    def get_person(self, person_id: int) -> Tuple[Optional[Dict[str, Any]], Optional[ApiError]]:
        return self._request("GET", f"{self.prefix}/{person_id}")

    def create_person(self, person: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[ApiError]]:
        """Create a person and return the stored record including ``id``."""
        return self._request("POST", self.prefix, json_body=person)

    def update_person(
        self, person_id: int, person: Dict[str, Any]
    ) -> Tuple[Optional[Dict[str, Any]], Optional[ApiError]]:
        """Replace the editable fields of a person.

        Fields missing from ``person`` are stored as null by the server.
        """
        return self._request("PUT", f"{self.prefix}/{person_id}", json_body=person)

    def delete_person(self, person_id: int) -> Tuple[bool, Optional[ApiError]]:
        """Delete a person.  Returns ``(True, None)`` on success."""
        _, error = self._request("DELETE", f"{self.prefix}/{person_id}")
        return error is None, error
