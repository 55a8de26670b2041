"""Launch the my-todo server with uvicorn."""

import uvicorn

from my_todo.config import settings


def main() -> None:
    uvicorn.run(
        "my_todo.main:app",
        host=settings.server_host,
        port=settings.server_port,
        reload=settings.is_development,
        log_level=settings.log_level,
    )


if __name__ == "__main__":
    main()
