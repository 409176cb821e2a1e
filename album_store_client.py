"""Album Store API client.

This module defines a small client wrapper around the album store's
REST API.  The client uses the ``requests`` library internally and
exposes one method per endpoint:

* :meth:`AlbumStoreAPI.list_albums` – return every album sorted by id.
* :meth:`AlbumStoreAPI.get_album` – fetch a single album.
* :meth:`AlbumStoreAPI.create_album` – add an album.
* :meth:`AlbumStoreAPI.replace_album` – replace the album stored under an id.
* :meth:`AlbumStoreAPI.delete_album` – delete an album and return the rest.

Every method returns a tuple ``(data, error)``.  On success ``error``
is ``None``; on failure ``data`` is empty and ``error`` is a dictionary
with the keys ``status_code`` and ``message``.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple
from urllib.parse import quote

import requests


logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 15


class AlbumStoreAPI:
    """Client for interacting with the album store API."""

    def __init__(
        self,
        *,
        base_url: str = "http://localhost:8080",
        session: Optional[requests.Session] = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL for the API, e.g. ``http://localhost:8080``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Seconds to wait for each request.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Dict[str, Any]]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PUT``, ``DELETE``).
            path: Path relative to :attr:`base_url` (e.g. ``/albums``).
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)``.  ``data`` is the parsed JSON
            response, or ``None`` for an empty body.
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
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    message = err_json.get("message") or err_json.get("detail") or str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    @staticmethod
    def _album_path(album_id: str) -> str:
        return "/albums/" + quote(str(album_id), safe="")

    # ------------------------------------------------------------------
    # Album operations
    # ------------------------------------------------------------------
    def list_albums(self) -> Tuple[List[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Retrieve all albums, sorted by id."""
        data, error = self._request("GET", "/albums")
        if error:
            return [], error
        return data or [], None

    def get_album(self, album_id: str) -> Tuple[Optional[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Retrieve a single album by ID.

        An unknown ID yields an error with ``status_code`` 404.
        """
        return self._request("GET", self._album_path(album_id))

    def create_album(self, album: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Create an album and return it as stored."""
        return self._request("POST", "/albums", json_body=album)

    def replace_album(self, album_id: str, album: Dict[str, Any]) -> Tuple[bool, Optional[Dict[str, Any]]]:
        """Replace the album stored under ``album_id``.

        The server answers without a body, so success is reported as
        ``(True, None)``.
        """
        _, error = self._request("PUT", self._album_path(album_id), json_body=album)
        if error:
            return False, error
        return True, None

    def delete_album(self, album_id: str) -> Tuple[List[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Delete an album and return the albums that remain."""
        data, error = self._request("DELETE", self._album_path(album_id))
        if error:
            return [], error
        return data or [], None
