"""
HTTP client for the my-todo REST API.

This is the only way the browser UI talks to the backend. It provides:
- One method per REST operation (todos: get-all, add, update, delete;
  labels: get-all, add, delete)
- Response parsing into the shared Entity Model (pydantic)
- Structured error handling with ApiClientError
- Request/response logging

Design decisions:
- httpx.AsyncClient for async operations and connection pooling
- Exactly one HTTP request per call: no retry, no backoff
- Timeout disabled unless API_TIMEOUT is configured
- Centralized _request method for DRY principle
"""

from typing import Any, List, Type, TypeVar

import httpx
import structlog
from pydantic import BaseModel, TypeAdapter, ValidationError

from my_todo.config import settings
from my_todo.core.exceptions import ApiClientError, ErrorCode
from my_todo.models.domain.label import Label, NewLabelPayload
from my_todo.models.domain.todo import NewTodoPayload, Todo, UpdateTodoPayload

logger = structlog.get_logger(__name__)

M = TypeVar("M", bound=BaseModel)

_todo_list = TypeAdapter(List[Todo])
_label_list = TypeAdapter(List[Label])


class TodoApiClient:
    """
    Async HTTP client for the todo and label resources.

    Usage:
        client = TodoApiClient()
        try:
            todos = await client.get_todos()
        finally:
            await client.close()

    Note: In FastAPI, use the get_todo_api_client dependency instead
    of creating clients directly to share one connection pool.

    Args:
        base_url: REST API root (defaults to settings.api_base_url)
        timeout: seconds, or None for no timeout (defaults to settings.api_timeout)
        transport: optional httpx transport, used to mount the ASGI app
            in-process or a mock transport in tests
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url or settings.api_base_url
        self.timeout = timeout if timeout is not None else settings.api_timeout
        self.client = httpx.AsyncClient(
            base_url=self.base_url,
            headers={"Content-Type": "application/json"},
            timeout=self.timeout,
            transport=transport,
        )

    async def _request(
        self,
        method: str,
        endpoint: str,
        json_data: dict[str, Any] | None = None
    ) -> Any:
        """
        Issue one request and return the decoded JSON body.

        Returns None for 204 No Content.

        Raises:
            ApiClientError: CONNECTION_ERROR on transport failure,
                EXTERNAL_API_ERROR on a non-2xx status,
                INVALID_RESPONSE when the body is not JSON
        """
        logger.debug("api_request", method=method, endpoint=endpoint, body=json_data)
        try:
            response = await self.client.request(method=method, url=endpoint, json=json_data)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.warning(
                "api_request_failed",
                method=method,
                endpoint=endpoint,
                status_code=e.response.status_code,
            )
            raise ApiClientError(
                f"{method} {endpoint} failed with status {e.response.status_code}",
                error_code=ErrorCode.EXTERNAL_API_ERROR,
                status_code=e.response.status_code,
                details={"endpoint": endpoint, "response": e.response.text[:500]}
            ) from e
        except httpx.RequestError as e:
            # Connection errors, DNS failures, timeouts
            logger.warning("api_request_error", method=method, endpoint=endpoint, error=str(e))
            raise ApiClientError(
                f"Request to {endpoint} failed: {str(e)}",
                error_code=ErrorCode.CONNECTION_ERROR,
                details={"endpoint": endpoint, "error_type": type(e).__name__}
            ) from e

        logger.debug("api_response", method=method, endpoint=endpoint, status_code=response.status_code)
        if response.status_code == httpx.codes.NO_CONTENT:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise ApiClientError(
                f"{method} {endpoint} returned malformed JSON",
                error_code=ErrorCode.INVALID_RESPONSE,
                status_code=response.status_code,
                details={"endpoint": endpoint, "response": response.text[:500]}
            ) from e

    @staticmethod
    def _parse(schema: Type[M] | TypeAdapter, data: Any, endpoint: str) -> Any:
        try:
            if isinstance(schema, TypeAdapter):
                return schema.validate_python(data)
            return schema.model_validate(data)
        except ValidationError as e:
            raise ApiClientError(
                f"Unexpected response shape from {endpoint}",
                error_code=ErrorCode.INVALID_RESPONSE,
                details={"endpoint": endpoint, "errors": e.errors(include_url=False)}
            ) from e

    # ===== Todo Endpoints =====

    async def get_todos(self) -> List[Todo]:
        """GET /todos"""
        data = await self._request("GET", "/todos")
        return self._parse(_todo_list, data, "/todos")

    async def add_todo(self, payload: NewTodoPayload) -> Todo:
        """POST /todos"""
        data = await self._request("POST", "/todos", json_data=payload.model_dump())
        return self._parse(Todo, data, "/todos")

    async def update_todo(self, payload: UpdateTodoPayload) -> Todo:
        """
        PATCH /todos/{id}

        Only the fields set on the payload are sent.
        """
        endpoint = f"/todos/{payload.id}"
        data = await self._request("PATCH", endpoint, json_data=payload.changes())
        return self._parse(Todo, data, endpoint)

    async def delete_todo(self, todo_id: int) -> None:
        """DELETE /todos/{id}"""
        await self._request("DELETE", f"/todos/{todo_id}")

    # ===== Label Endpoints =====

    async def get_labels(self) -> List[Label]:
        """GET /labels"""
        data = await self._request("GET", "/labels")
        return self._parse(_label_list, data, "/labels")

    async def add_label(self, payload: NewLabelPayload) -> Label:
        """POST /labels"""
        data = await self._request("POST", "/labels", json_data=payload.model_dump())
        return self._parse(Label, data, "/labels")

    async def delete_label(self, label_id: int) -> None:
        """DELETE /labels/{id}"""
        await self._request("DELETE", f"/labels/{label_id}")

    async def close(self) -> None:
        """Close the underlying connection pool."""
        await self.client.aclose()
