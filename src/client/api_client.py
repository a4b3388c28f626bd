"""
HTTP client for the morTodo API.

This module provides the async client the state controller uses to reach
the four todo endpoints.

Design decisions:
- One httpx.AsyncClient per TodoApiClient (connection pooling)
- Every transport failure, non-2xx answer or malformed body becomes a TodoClientError
- Optional transport injection so tests can route calls to an ASGI app
"""

from typing import Any

import httpx
from pydantic import ValidationError

from src.config import settings
from src.core.exceptions import ErrorCode, TodoClientError
from src.models.domain.todo import TodoResponse


class TodoApiClient:
    """
    Async HTTP client for the todo API.

    Usage:
        client = TodoApiClient()
        try:
            todos = await client.fetch_todos()
        finally:
            await client.close()
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url or settings.api_base_url

        self.client = httpx.AsyncClient(
            base_url=self.base_url,
            headers={"Content-Type": "application/json"},
            timeout=timeout or settings.client_timeout,
            transport=transport,
        )

    async def _request(self, method: str, path: str, json: dict[str, Any] | None = None) -> Any:
        try:
            response = await self.client.request(method, path, json=json)
        except httpx.HTTPError as e:
            raise TodoClientError(
                f"{method} {path} failed: {str(e)}",
                error_code=ErrorCode.CONNECTION_ERROR,
            ) from e

        if response.is_error:
            raise TodoClientError(
                f"{method} {path} returned {response.status_code}: {self._error_message(response)}",
                status_code=response.status_code,
                error_code=ErrorCode.UNEXPECTED_STATUS,
            )

        try:
            return response.json()
        except ValueError as e:
            raise TodoClientError(
                f"{method} {path} returned invalid JSON",
                status_code=response.status_code,
                error_code=ErrorCode.INVALID_RESPONSE,
            ) from e

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        try:
            body = response.json()
        except ValueError:
            return response.text
        if isinstance(body, dict) and "error" in body:
            return str(body["error"])
        return response.text

    @staticmethod
    def _parse_todo(data: Any, source: str) -> TodoResponse:
        try:
            return TodoResponse.model_validate(data)
        except ValidationError as e:
            raise TodoClientError(
                f"{source} returned a malformed todo: {str(e)}",
                error_code=ErrorCode.INVALID_RESPONSE,
            ) from e

    async def fetch_todos(self) -> list[TodoResponse]:
        """GET /todos - the full list in the store's order."""
        data = await self._request("GET", "/todos")
        if not isinstance(data, list):
            raise TodoClientError(
                "GET /todos did not return a list",
                error_code=ErrorCode.INVALID_RESPONSE,
            )
        return [self._parse_todo(item, "GET /todos") for item in data]

    async def create_todo(self, todo_id: str, text: str, is_completed: bool = False) -> TodoResponse:
        """POST /todos - returns the record as the server stored it."""
        data = await self._request(
            "POST",
            "/todos",
            json={"id": todo_id, "todo": text, "isCompleted": is_completed},
        )
        return self._parse_todo(data, "POST /todos")

    async def update_todo(self, todo_id: str, changes: dict[str, Any]) -> TodoResponse | None:
        """
        PUT /todos/{id} with only the changed fields.

        Returns None when the server found no record with that id.
        """
        data = await self._request("PUT", f"/todos/{todo_id}", json=changes)
        if data is None:
            return None
        return self._parse_todo(data, f"PUT /todos/{todo_id}")

    async def delete_todo(self, todo_id: str) -> str:
        """DELETE /todos/{id} - returns the confirmation message."""
        data = await self._request("DELETE", f"/todos/{todo_id}")
        if not isinstance(data, dict):
            raise TodoClientError(
                f"DELETE /todos/{todo_id} returned an unexpected body",
                error_code=ErrorCode.INVALID_RESPONSE,
            )
        return str(data.get("message", ""))

    async def close(self) -> None:
        """Close the HTTP client and release resources."""
        await self.client.aclose()

    async def __aenter__(self) -> "TodoApiClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()
