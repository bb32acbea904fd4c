# =============================================================================
# lib/lifelog_client.py - LifeLog API Client
# =============================================================================
# A typed-ish Python wrapper around the LifeLog REST API, for scripts and
# integration tests. Responses are returned as the decoded JSON (camelCase
# keys, exactly as the API sends them).
#
# Usage:
#   from lib.lifelog_client import LifeLogClient
#
#   with LifeLogClient("http://localhost:8080") as client:
#       client.login("me@example.com", "secret1")
#       todo = client.create_todo(title="Buy milk", priority=1)
#       client.toggle_todo(todo["id"])
# =============================================================================

from __future__ import annotations

import logging
from typing import Any

import httpx

logger = logging.getLogger(__name__)


class LifeLogClientError(Exception):
    """
    Error response from the LifeLog API.

    Carries the HTTP status and the API's `detail` / `code` fields so
    callers can branch on them.
    """

    def __init__(
        self,
        status_code: int,
        detail: str,
        code: str | None = None,
        errors: list[dict[str, str]] | None = None,
    ):
        super().__init__(detail)
        self.status_code = status_code
        self.detail = detail
        self.code = code
        self.errors = errors or []

    def __str__(self) -> str:
        result = f"[{self.status_code}] {self.detail}"
        if self.code:
            result = f"[{self.status_code} {self.code}] {self.detail}"
        return result


class LifeLogClient:
    """
    Client for every LifeLog endpoint.

    Either pass a base URL, or an existing httpx.Client (e.g. a FastAPI
    TestClient) whose base URL already points at the API.

    The token returned by register/login is kept and sent as a bearer
    token on later calls.

    Example:
        client = LifeLogClient("http://localhost:8080")
        client.register("me@example.com", "secret1", "me")
        memos = client.list_memos()
    """

    def __init__(
        self,
        base_url: str | None = None,
        token: str | None = None,
        http_client: httpx.Client | None = None,
        timeout: float = 10.0,
    ):
        if http_client is None and base_url is None:
            raise ValueError("Either base_url or http_client is required")

        self._owns_client = http_client is None
        self._http = http_client or httpx.Client(base_url=base_url, timeout=timeout)
        self.token = token

    def close(self) -> None:
        if self._owns_client:
            self._http.close()

    def __enter__(self) -> LifeLogClient:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    # -------------------------------------------------------------------------
    # Transport
    # -------------------------------------------------------------------------

    def _headers(self) -> dict[str, str]:
        if self.token:
            return {"Authorization": f"Bearer {self.token}"}
        return {}

    def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        """
        Send a request and decode the JSON body.

        Raises:
            LifeLogClientError: If the API answers with a 4xx/5xx status
        """
        response = self._http.request(method, path, headers=self._headers(), **kwargs)
        logger.debug(f"{method} {path} -> {response.status_code}")

        if response.is_error:
            try:
                body = response.json()
            except ValueError:
                body = {"detail": response.text or response.reason_phrase}
            raise LifeLogClientError(
                status_code=response.status_code,
                detail=str(body.get("detail", "")),
                code=body.get("code"),
                errors=body.get("errors"),
            )

        return response.json()

    @staticmethod
    def _body(**fields: Any) -> dict[str, Any]:
        """Request body with None fields left out."""
        return {key: value for key, value in fields.items() if value is not None}

    # -------------------------------------------------------------------------
    # Auth
    # -------------------------------------------------------------------------

    def register(self, email: str, password: str, username: str) -> dict[str, Any]:
        """Create an account and keep its token."""
        result = self._request(
            "POST",
            "/api/auth/register",
            json={"email": email, "password": password, "username": username},
        )
        self.token = result["token"]
        return result

    def login(self, email: str, password: str) -> dict[str, Any]:
        """Log in and keep the token."""
        result = self._request(
            "POST",
            "/api/auth/login",
            json={"email": email, "password": password},
        )
        self.token = result["token"]
        return result

    def me(self) -> dict[str, Any]:
        return self._request("GET", "/api/auth/me")

    def verify(self) -> dict[str, Any]:
        return self._request("GET", "/api/auth/verify")

    def delete_account(self) -> dict[str, Any]:
        """Delete the account and everything it owns, then forget the token."""
        result = self._request("DELETE", "/api/auth/me")
        self.token = None
        return result

    # -------------------------------------------------------------------------
    # Todos
    # -------------------------------------------------------------------------

    def list_todos(self) -> list[dict[str, Any]]:
        return self._request("GET", "/api/todos")

    def get_todo(self, todo_id: int) -> dict[str, Any]:
        return self._request("GET", f"/api/todos/{todo_id}")

    def create_todo(
        self,
        title: str,
        description: str | None = None,
        deadline: str | None = None,
        notify_before_minutes: int | None = None,
        priority: int | None = None,
        image_url: str | None = None,
        link_url: str | None = None,
    ) -> dict[str, Any]:
        body = self._body(
            title=title,
            description=description,
            deadline=deadline,
            notifyBeforeMinutes=notify_before_minutes,
            priority=priority,
            imageUrl=image_url,
            linkUrl=link_url,
        )
        return self._request("POST", "/api/todos", json=body)

    def update_todo(self, todo_id: int, **fields: Any) -> dict[str, Any]:
        """
        Replace a todo. Pass every field to keep; omitted optional fields
        are cleared. Keys are the API's camelCase names.
        """
        return self._request("PUT", f"/api/todos/{todo_id}", json=fields)

    def delete_todo(self, todo_id: int) -> dict[str, Any]:
        return self._request("DELETE", f"/api/todos/{todo_id}")

    def toggle_todo(self, todo_id: int) -> dict[str, Any]:
        return self._request("PATCH", f"/api/todos/{todo_id}/toggle")

    # -------------------------------------------------------------------------
    # Items
    # -------------------------------------------------------------------------

    def list_items(self, category: str | None = None) -> list[dict[str, Any]]:
        params = {"category": category} if category else None
        return self._request("GET", "/api/items", params=params)

    def get_item(self, item_id: int) -> dict[str, Any]:
        return self._request("GET", f"/api/items/{item_id}")

    def create_item(
        self,
        title: str,
        category: str,
        description: str | None = None,
        image_url: str | None = None,
        link_url: str | None = None,
    ) -> dict[str, Any]:
        body = self._body(
            title=title,
            category=category,
            description=description,
            imageUrl=image_url,
            linkUrl=link_url,
        )
        return self._request("POST", "/api/items", json=body)

    def update_item(self, item_id: int, **fields: Any) -> dict[str, Any]:
        return self._request("PUT", f"/api/items/{item_id}", json=fields)

    def delete_item(self, item_id: int) -> dict[str, Any]:
        return self._request("DELETE", f"/api/items/{item_id}")

    def toggle_item(self, item_id: int) -> dict[str, Any]:
        return self._request("PATCH", f"/api/items/{item_id}/toggle")

    # -------------------------------------------------------------------------
    # Memos
    # -------------------------------------------------------------------------

    def list_memos(self) -> list[dict[str, Any]]:
        return self._request("GET", "/api/memos")

    def get_memo(self, memo_id: int) -> dict[str, Any]:
        return self._request("GET", f"/api/memos/{memo_id}")

    def create_memo(self, title: str, content: str | None = None) -> dict[str, Any]:
        return self._request("POST", "/api/memos", json=self._body(title=title, content=content))

    def update_memo(self, memo_id: int, title: str, content: str | None = None) -> dict[str, Any]:
        return self._request(
            "PUT",
            f"/api/memos/{memo_id}",
            json=self._body(title=title, content=content),
        )

    def delete_memo(self, memo_id: int) -> dict[str, Any]:
        return self._request("DELETE", f"/api/memos/{memo_id}")

    # -------------------------------------------------------------------------
    # Upload
    # -------------------------------------------------------------------------

    def upload_image(self, filename: str, content: bytes, content_type: str = "application/octet-stream") -> str:
        """Upload an image and return its URL."""
        result = self._request(
            "POST",
            "/api/upload",
            files={"file": (filename, content, content_type)},
        )
        return result["url"]

    def delete_image(self, file_name: str) -> dict[str, Any]:
        return self._request("DELETE", "/api/upload", params={"fileName": file_name})

    # -------------------------------------------------------------------------
    # Health
    # -------------------------------------------------------------------------

    def health(self) -> dict[str, Any]:
        return self._request("GET", "/health")
