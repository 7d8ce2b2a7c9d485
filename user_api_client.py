"""User API client.

A thin wrapper around the five user routes exposed by
``user_api.app``.  The client uses the ``requests`` library internally
and returns plain dictionaries decoded from the JSON responses:

* :meth:`list_users` – return all users.
* :meth:`get_user` – fetch a single user, ``None`` if it does not exist.
* :meth:`create_user` – create a user and return it with its ID.
* :meth:`update_user` – update a user, ``None`` if it does not exist.
* :meth:`delete_user` – delete a user, ``False`` if it does not exist.

HTTP errors other than 404 (for example 409 on a duplicate e‑mail) are
raised as :class:`requests.HTTPError`.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import requests


logger = logging.getLogger(__name__)


class UserAPIClient:
    """Client for the user API."""

    def __init__(
        self,
        *,
        base_url: str,
        api_prefix: str = "/api",
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the service, e.g. ``http://localhost:8000``.
            api_prefix: Prefix the routes are mounted under.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Timeout in seconds applied to every request.
        """
        self.base_url = base_url.rstrip("/") + api_prefix
        self.session = session or requests.Session()
        self.timeout = timeout

    def _request(self, method: str, path: str, *, json_body: Any | None = None) -> requests.Response:
        url = f"{self.base_url}{path}"
        logger.debug("Sending %s request to %s", method, url)
        return self.session.request(method=method, url=url, json=json_body, timeout=self.timeout)

    @staticmethod
    def _is_missing(response: requests.Response) -> bool:
        if response.status_code == 404:
            return True
        response.raise_for_status()
        return False

    def list_users(self) -> List[Dict[str, Any]]:
        response = self._request("GET", "/users")
        response.raise_for_status()
        return response.json()

    def get_user(self, user_id: int) -> Optional[Dict[str, Any]]:
        response = self._request("GET", f"/users/{user_id}")
        if self._is_missing(response):
            return None
        return response.json()

    def create_user(self, name: Optional[str], email: Optional[str]) -> Dict[str, Any]:
        response = self._request("POST", "/users", json_body={"name": name, "email": email})
        response.raise_for_status()
        return response.json()

    def update_user(
        self, user_id: int, name: Optional[str], email: Optional[str] = None
    ) -> Optional[Dict[str, Any]]:
        """Update a user.

        ``name`` always replaces the stored value; ``email`` is left
        untouched on the server when ``None``.
        """
        response = self._request("PUT", f"/users/{user_id}", json_body={"name": name, "email": email})
        if self._is_missing(response):
            return None
        return response.json()

    def delete_user(self, user_id: int) -> bool:
        response = self._request("DELETE", f"/users/{user_id}")
        return not self._is_missing(response)
