"""Blog API Gateway client.

A thin wrapper around the HTTP API built on ``requests``.  Each method
maps to one endpoint and returns a tuple ``(data, error)``:

* on success ``data`` holds the parsed JSON body (``None`` for empty
  bodies such as ``DELETE``) and ``error`` is ``None``;
* on failure ``data`` is ``None`` (or an empty list for listing calls)
  and ``error`` is a dictionary with the keys ``status_code``, ``code``
  and ``message``.  ``code`` and ``message`` come from the server's
  ``{"code", "description"}`` error body; transport failures have
  ``status_code`` set to ``None``.

Example::

    client = BlogApiClient(base_url="http://localhost:8080")
    post_id, error = client.create_post("Title", "Author", "Body")
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class BlogApiClient:
    """Client for the posts and items endpoints."""

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL for the API, e.g. ``http://localhost:8080``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
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
            method: HTTP method (``GET``, ``POST``, ``PUT``, ``DELETE``).
            path: Path relative to :attr:`base_url` (e.g. ``/posts``).
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)`` as described in the module docstring.
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
            return None, self._error_from_response(exc.response, exc)
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "code": None, "message": str(exc)}

    @staticmethod
    def _error_from_response(response: Optional[requests.Response], exc: Exception) -> Error:
        status = response.status_code if response is not None else None
        code = None
        message = ""
        if response is not None:
            try:
                body = response.json()
                code = body.get("code")
                message = body.get("description") or ""
            except ValueError:
                message = response.text
        if not message:
            message = str(exc)
        logger.error("API request failed (%s %s): %s", status, code, message)
        return {"status_code": status, "code": code, "message": message}

    # ------------------------------------------------------------------
    # Post operations
    # ------------------------------------------------------------------
    def list_posts(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        data, error = self._request("GET", "/posts")
        if error:
            return [], error
        return (data or {}).get("posts", []), None

    def get_post(self, post_id: int) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", f"/posts/{post_id}")

    def create_post(
        self, title: str, author: str, content: str = ""
    ) -> Tuple[Optional[int], Optional[Error]]:
        """Create a post.

        Returns:
            A tuple ``(post_id, error)``.
        """
        data, error = self._request(
            "POST", "/posts", json_body={"title": title, "author": author, "content": content}
        )
        if error:
            return None, error
        return data["id"], None

    def update_post(
        self, post_id: int, title: str, author: str, content: str = ""
    ) -> Tuple[Optional[int], Optional[Error]]:
        """Replace a post.  All fields are sent; the server does not merge."""
        data, error = self._request(
            "PUT",
            "/posts",
            json_body={"id": post_id, "title": title, "author": author, "content": content},
        )
        if error:
            return None, error
        return data["id"], None

    def delete_post(self, post_id: int) -> Tuple[bool, Optional[Error]]:
        _, error = self._request("DELETE", f"/posts/{post_id}")
        return error is None, error

    # ------------------------------------------------------------------
    # Item operations
    # ------------------------------------------------------------------
    def list_items(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        data, error = self._request("GET", "/items")
        if error:
            return [], error
        return (data or {}).get("items", []), None

    def get_item(self, item_id: int) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", f"/items/{item_id}")

    def create_item(
        self, name: str, quantity: int = 0, location: str = ""
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request(
            "POST", "/items", json_body={"name": name, "quantity": quantity, "location": location}
        )

    def increase_item(self, item_id: int, amount: int = 1) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("PUT", f"/items/{item_id}/increase", json_body={"amount": amount})

    def decrease_item(self, item_id: int, amount: int = 1) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("PUT", f"/items/{item_id}/decrease", json_body={"amount": amount})

    def delete_item(self, item_id: int) -> Tuple[bool, Optional[Error]]:
        _, error = self._request("DELETE", f"/items/{item_id}")
        return error is None, error
