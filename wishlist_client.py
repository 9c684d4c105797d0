"""Wishlist API client.

This module defines a small client wrapper around the wishlist
endpoint.  It uses the ``requests`` library internally and sends the
caller's bearer token in the ``Authorization`` header.

The client exposes high‑level methods matching the endpoint's
operations:

* :meth:`list_items` – return every item on the caller's wishlist.
* :meth:`add_item` – add a product by its identifier.
* :meth:`remove_item` – remove a product by its identifier.

Every method returns a ``(data, error)`` tuple.  On failure ``data``
is empty and ``error`` is a dictionary with ``status_code`` and
``message`` keys; the client never raises for HTTP or network errors.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

DEFAULT_PATH = "/api/v1/wishlist"


class WishlistClient:
    """Client for the wishlist endpoint."""

    def __init__(
        self,
        *,
        base_url: str,
        token: Optional[str] = None,
        path: str = DEFAULT_PATH,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL for the API, e.g. ``https://example.com``.
            token: Bearer token identifying the user.
            path: Path of the wishlist endpoint relative to ``base_url``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per-request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.path = path
        self.token = token
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helper
    # ------------------------------------------------------------------
    def _request(
        self, method: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Dict[str, Any]]]:
        """Perform an HTTP request against the wishlist endpoint.

        Returns:
            A tuple ``(data, error)``. ``data`` contains the parsed JSON
            response on success and ``error`` is ``None``. On failure,
            ``data`` is ``None`` and ``error`` is a dictionary with keys
            ``status_code`` and ``message`` describing the issue.
        """
        url = f"{self.base_url}{self.path}"
        headers: Dict[str, str] = {}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
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
                    message = err_json.get("message") or err_json.get("detail") or str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("Wishlist request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("Wishlist request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    # ------------------------------------------------------------------
    # Wishlist operations
    # ------------------------------------------------------------------
    def list_items(self) -> Tuple[List[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Retrieve every item on the wishlist."""
        data, error = self._request("GET")
        if error:
            return [], error
        if isinstance(data, dict) and isinstance(data.get("items"), list):
            return data["items"], None
        return [], None

    def add_item(self, product_id: str) -> Tuple[Optional[str], Optional[Dict[str, Any]]]:
        """Add a product.  Returns the server's message, e.g. ``"Added to wishlist"``."""
        data, error = self._request("POST", json_body={"productId": product_id})
        if error:
            return None, error
        return (data or {}).get("message"), None

    def remove_item(self, product_id: str) -> Tuple[Optional[str], Optional[Dict[str, Any]]]:
        """Remove a product.  Removing an item not on the wishlist succeeds."""
        data, error = self._request("DELETE", json_body={"productId": product_id})
        if error:
            return None, error
        return (data or {}).get("message"), None
