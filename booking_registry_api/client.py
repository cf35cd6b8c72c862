"""Booking Registry API client.

A thin wrapper around the registry's REST endpoints built on the
``requests`` library.  Every method returns a ``(data, error)`` tuple
instead of raising, which keeps callers such as scripts and bots free
of HTTP plumbing:

* :meth:`list_bookings` – return every booking.
* :meth:`get_booking` – fetch a single booking by id.
* :meth:`create_booking` – create a booking from a payload.
* :meth:`update_booking` – change some fields of a booking.
* :meth:`cancel_booking` – cancel (delete) a booking.

On failure ``error`` is a dictionary with ``status_code`` and
``message`` keys.  ``message`` is the server's ``error`` text, or its
``errors`` list joined with ``"; "`` for validation failures.
Transport problems (connection refused, timeouts) are reported with a
``status_code`` of ``None``.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class BookingRegistryClient:
    """Client for the booking registry HTTP API."""

    BOOKINGS_PATH = "/api/bookings"

    def __init__(
        self,
        base_url: str,
        *,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the service, e.g. ``http://localhost:3000``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per-request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    @staticmethod
    def _error_message(response: requests.Response) -> str:
        try:
            body = response.json()
        except ValueError:
            return response.text
        if isinstance(body, dict):
            if body.get("error"):
                return str(body["error"])
            if isinstance(body.get("errors"), list):
                return "; ".join(str(e) for e in body["errors"])
        return str(body)

    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Returns:
            A tuple ``(data, error)``. ``data`` contains the parsed JSON
            response on success and ``error`` is ``None``. On failure,
            ``data`` is ``None`` and ``error`` describes the issue.
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
            message = self._error_message(exc.response) if exc.response is not None else ""
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    def _booking_path(self, booking_id: Any) -> str:
        return f"{self.BOOKINGS_PATH}/{booking_id}"

    # ------------------------------------------------------------------
    # Booking operations
    # ------------------------------------------------------------------
    def list_bookings(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve all bookings.

        Returns:
            A tuple ``(bookings, error)``. ``bookings`` is empty on failure.
        """
        data, error = self._request("GET", self.BOOKINGS_PATH)
        if error:
            return [], error
        return (data if isinstance(data, list) else []), None

    def get_booking(self, booking_id: Any) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Retrieve a single booking by id."""
        return self._request("GET", self._booking_path(booking_id))

    def create_booking(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Create a booking.

        Returns:
            A tuple ``(booking, error)`` where ``booking`` is the created
            record (the ``booking`` member of the response envelope).
        """
        data, error = self._request("POST", self.BOOKINGS_PATH, json_body=payload)
        if error:
            return None, error
        return data.get("booking"), None

    def update_booking(
        self, booking_id: Any, payload: Dict[str, Any]
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Update the fields of a booking present in ``payload``."""
        data, error = self._request("PUT", self._booking_path(booking_id), json_body=payload)
        if error:
            return None, error
        return data.get("booking"), None

    def cancel_booking(self, booking_id: Any) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Cancel a booking and return the removed record."""
        data, error = self._request("DELETE", self._booking_path(booking_id))
        if error:
            return None, error
        return data.get("booking"), None
