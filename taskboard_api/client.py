"""Taskboard API client.

This module defines a small client wrapper around the Taskboard REST
API.  The client uses the ``requests`` library internally to make
HTTP calls and exposes one method per endpoint:

* :meth:`list_cards` / :meth:`get_card` / :meth:`create_card` /
  :meth:`delete_card`
* :meth:`list_lists` / :meth:`get_list` / :meth:`create_list` /
  :meth:`delete_list`

Every method returns a tuple ``(data, error)``.  On success ``error``
is ``None``; on failure ``data`` is empty and ``error`` is a
dictionary with keys ``status_code`` and ``message``.  Network and HTTP
errors are logged and reported this way rather than raised.

The client supports authentication via an API key which will be sent
in the ``Authorization`` header as ``Bearer <api_key>``.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Sequence, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class TaskboardAPI:
    """Client for interacting with the Taskboard API."""

    def __init__(
        self,
        *,
        base_url: str,
        api_key: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL for the API, e.g. ``http://localhost:8000``.
            api_key: Optional API key.  If set, an ``Authorization``
                header with the value ``Bearer <api_key>`` will be
                included in all requests.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per-request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``DELETE``).
            path: Path relative to :attr:`base_url` (e.g. ``/card``).
            json_body: JSON body to send with the request (for POST).
        Returns:
            A tuple ``(data, error)``. ``data`` contains the parsed JSON
            response on success (``None`` for empty bodies) and
            ``error`` is ``None``. On failure, ``data`` is ``None`` and
            ``error`` describes the issue.
        """
        url = f"{self.base_url}{path}"
        headers: Dict[str, str] = {}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                headers=headers,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    message = _error_message(err_json)
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
    # Card operations
    # ------------------------------------------------------------------
    def list_cards(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve all cards."""
        data, error = self._request("GET", "/card")
        if error:
            return [], error
        return data if isinstance(data, list) else [], None

    def get_card(self, card_id: Any) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Retrieve a single card by ID."""
        return self._request("GET", f"/card/{card_id}")

    def create_card(self, title: str, content: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Create a card and return the stored record."""
        return self._request("POST", "/card", json_body={"title": title, "content": content})

    def delete_card(self, card_id: Any) -> Tuple[bool, Optional[Error]]:
        """Delete a card.

        Returns:
            A tuple ``(success, error)``.
        """
        _, error = self._request("DELETE", f"/card/{card_id}")
        return error is None, error

    # ------------------------------------------------------------------
    # List operations
    # ------------------------------------------------------------------
    def list_lists(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve all lists."""
        data, error = self._request("GET", "/list")
        if error:
            return [], error
        return data if isinstance(data, list) else [], None

    def get_list(self, list_id: Any) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Retrieve a single list by ID."""
        return self._request("GET", f"/list/{list_id}")

    def create_list(
        self, header: str, card_ids: Sequence[Any] = ()
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Create a list referencing existing cards."""
        payload = {"header": header, "cardIds": list(card_ids)}
        return self._request("POST", "/list", json_body=payload)

    def delete_list(self, list_id: Any) -> Tuple[bool, Optional[Error]]:
        """Delete a list.

        Returns:
            A tuple ``(success, error)``.
        """
        _, error = self._request("DELETE", f"/list/{list_id}")
        return error is None, error


def _error_message(body: Any) -> str:
    """Extract a readable message from an error response body."""
    if not isinstance(body, dict):
        return str(body)
    error = body.get("error")
    if isinstance(error, dict):
        return str(error.get("message") or error)
    if error:
        return str(error)
    return str(body.get("message") or body)
