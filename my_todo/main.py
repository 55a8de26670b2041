"""
FastAPI application entry point for my-todo.

This module:
- Configures structured logging with structlog
- Creates the database tables on startup
- Registers the REST API routers (todos, labels) and the browser UI router
- Implements global exception handlers for consistent error responses
- Closes the shared API client on shutdown
"""

import logging
import time
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from my_todo import __version__
from my_todo.api.routes import label, todo
from my_todo.config import settings
from my_todo.core.deps import close_todo_api_client
from my_todo.core.exceptions import ApiClientError, TodoAppError
from my_todo.models.database import create_tables
from my_todo.web import routes as ui

# ===== Structured Logging Configuration =====

logging.basicConfig(format="%(message)s", level=settings.log_level.upper())

structlog.configure(
    processors=[
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.stdlib.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.JSONRenderer() if settings.log_format == "json"
        else structlog.dev.ConsoleRenderer(),
    ],
    wrapper_class=structlog.make_filtering_bound_logger(
        logging.getLevelName(settings.log_level.upper())
    ),
)

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Startup: log configuration and make sure the tables exist.
    Shutdown: close the API client pool and drop the UI shell.
    """
    logger.info(
        "application_starting",
        service="my-todo",
        version=__version__,
        environment=settings.app_env,
        log_level=settings.log_level,
        api_base_url=settings.api_base_url,
        cors_origins=settings.cors_origins
    )
    create_tables()

    yield

    logger.info("application_shutting_down")
    await close_todo_api_client()
    ui.reset_todo_app()
    logger.info("shutdown_complete")


app = FastAPI(
    title="my-todo",
    description="Todo list REST API with a server-rendered browser UI",
    version=__version__,
    lifespan=lifespan,
)

# ===== Middleware Configuration =====

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["Content-Type"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log every request with its status and processing time."""
    start_time = time.time()

    logger.info(
        "request_started",
        method=request.method,
        path=request.url.path,
        client_ip=request.client.host if request.client else "unknown"
    )

    response = await call_next(request)

    process_time = time.time() - start_time
    logger.info(
        "request_completed",
        method=request.method,
        path=request.url.path,
        status_code=response.status_code,
        process_time_ms=round(process_time * 1000, 2)
    )

    response.headers["X-Process-Time"] = str(round(process_time, 3))
    return response


# ===== Global Exception Handlers =====


@app.exception_handler(TodoAppError)
async def todo_app_error_handler(request: Request, exc: TodoAppError):
    """
    Render domain errors (not found, duplicate label, database failure)
    with the status code the exception carries.
    """
    log = logger.warning if exc.status_code < 500 else logger.error
    log(
        "todo_app_error",
        error_code=exc.error_code.value,
        message=exc.message,
        status_code=exc.status_code,
        details=exc.details,
        path=request.url.path
    )

    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


@app.exception_handler(ApiClientError)
async def api_client_error_handler(request: Request, exc: ApiClientError):
    """
    A UI action whose REST API call failed.

    The UI has no in-page error surface; the failure is reported as a
    502 Bad Gateway with the client error payload.
    """
    logger.error(
        "api_client_error",
        error_code=exc.error_code.value,
        message=exc.message,
        upstream_status=exc.status_code,
        path=request.url.path
    )

    return JSONResponse(
        status_code=status.HTTP_502_BAD_GATEWAY,
        content=exc.to_dict()
    )


def jsonable_errors(exc: RequestValidationError) -> list[dict]:
    # ctx may hold the raw exception object, which JSONResponse cannot encode
    return [
        {key: value for key, value in error.items() if key in ("type", "loc", "msg")}
        for error in exc.errors()
    ]


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    """Missing or empty fields in a request body."""
    logger.warning(
        "validation_error",
        errors=exc.errors(),
        path=request.url.path
    )

    return JSONResponse(
        status_code=422,
        content={
            "error": "VALIDATION_ERROR",
            "message": "Invalid request data",
            "details": jsonable_errors(exc)
        }
    )


@app.exception_handler(Exception)
async def generic_error_handler(request: Request, exc: Exception):
    """Catch-all: log the exception, return a generic body."""
    logger.exception(
        "unexpected_error",
        error_type=type(exc).__name__,
        error_message=str(exc),
        path=request.url.path
    )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": "INTERNAL_ERROR",
            "message": "An unexpected error occurred. Please try again later.",
            "reference_id": f"err_{int(time.time())}"
        }
    )


# ===== Router Registration =====

app.include_router(todo.router)
app.include_router(label.router)
app.include_router(ui.router)

# ===== Core Endpoints =====


@app.get("/", response_class=PlainTextResponse)
async def root():
    return "Hello, World!"


@app.get("/health")
async def health():
    """Health check endpoint for load balancers and monitoring."""
    return {
        "status": "healthy",
        "environment": settings.app_env,
        "version": __version__,
        "timestamp": int(time.time())
    }
