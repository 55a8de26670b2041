"""
FastAPI dependencies shared by the browser UI.

Design decisions:
- Singleton TodoApiClient (one httpx connection pool per process)
- AsyncGenerator dependency so endpoints never own the client lifecycle
"""

from typing import Annotated, AsyncGenerator

from fastapi import Depends

from my_todo.services.todo_client import TodoApiClient

# ===== HTTP Client Management =====

_todo_api_client: TodoApiClient | None = None


async def get_todo_api_client() -> AsyncGenerator[TodoApiClient, None]:
    """
    Dependency that provides the REST API client.

    The client is created lazily on first use and reused across requests.
    Call close_todo_api_client() in the app shutdown hook.
    """
    global _todo_api_client

    if _todo_api_client is None:
        _todo_api_client = TodoApiClient()

    yield _todo_api_client


async def close_todo_api_client() -> None:
    """Close the shared client on application shutdown."""
    global _todo_api_client
    if _todo_api_client is not None:
        await _todo_api_client.close()
        _todo_api_client = None


TodoApiClientDep = Annotated[TodoApiClient, Depends(get_todo_api_client)]
