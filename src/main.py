"""
FastAPI application entry point for the morTodo API.

This module:
- Configures the FastAPI application with middleware and routers
- Sets up structured logging with structlog
- Implements global exception handlers for the uniform error format
- Manages application lifecycle (startup/shutdown hooks)
- Configures CORS for the browser frontend

Every error path answers ``500 {"error": <message>}``: storage failures,
malformed requests and unexpected exceptions are not distinguished.
"""

import time
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from src.api.routes import todo
from src.config import settings
from src.core.deps import close_mongo_client
from src.core.exceptions import ErrorCode, StorageError
from src.core.logging_config import configure_logging
from src.models.database import create_tables

configure_logging()

logger = structlog.get_logger()

APP_VERSION = "0.1.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifecycle manager for FastAPI application.

    Startup phase:
    - Log application start with configuration
    - Create the todos table when backed by SQL

    Shutdown phase:
    - Close the Mongo client (connection pool cleanup)
    """
    # ===== Startup =====
    logger.info(
        "application_starting",
        service="morTodo API",
        version=APP_VERSION,
        environment=settings.app_env,
        log_level=settings.log_level,
        store_backend=settings.store_backend,
        cors_origins=settings.cors_origins
    )

    if not settings.uses_mongo:
        create_tables()

    yield  # Application is running

    # ===== Shutdown =====
    logger.info("application_shutting_down")
    await close_mongo_client()
    logger.info("shutdown_complete")


app = FastAPI(
    title="morTodo API",
    description="REST backend for a personal to-do list",
    version=APP_VERSION,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

# ===== Middleware Configuration =====

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=False,
    allow_methods=["GET", "POST", "PUT", "DELETE"],
    allow_headers=["*"],
    max_age=600,  # Cache preflight requests for 10 minutes
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """
    Log all incoming requests with timing information.

    Adds X-Process-Time header to response for debugging.
    """
    start_time = time.time()

    logger.info(
        "request_started",
        method=request.method,
        path=request.url.path,
        client_ip=request.client.host if request.client else "unknown",
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


def _validation_message(exc: RequestValidationError) -> str:
    problems = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        problems.append(f"{location}: {error.get('msg')}" if location else str(error.get("msg")))
    return "Todo validation failed: " + ", ".join(problems)


@app.exception_handler(StorageError)
async def storage_error_handler(request: Request, exc: StorageError):
    """
    Handle failed storage operations.

    The raw message of the underlying failure is passed through to the client.
    """
    logger.error(
        "storage_error",
        error_code=exc.error_code.value,
        message=exc.message,
        operation=exc.operation,
        path=request.url.path
    )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=exc.to_dict()
    )


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    """
    Handle Pydantic validation errors.

    Malformed requests share the storage failure status and format.
    """
    message = _validation_message(exc)
    logger.warning(
        "validation_error",
        error_code=ErrorCode.INVALID_REQUEST.value,
        errors=exc.errors(),
        body=str(exc.body)[:500],  # Truncate to avoid logging large payloads
        path=request.url.path
    )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": message}
    )


@app.exception_handler(Exception)
async def generic_error_handler(request: Request, exc: Exception):
    """Catch-all handler for unexpected exceptions."""
    logger.exception(
        "unexpected_error",
        error_code=ErrorCode.INTERNAL_ERROR.value,
        error_type=type(exc).__name__,
        error_message=str(exc),
        path=request.url.path
    )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": str(exc)}
    )


# ===== Router Registration =====

app.include_router(todo.router)


# ===== Core Endpoints =====


@app.get("/health")
async def health():
    """
    Health check endpoint for load balancers and monitoring.

    Returns:
        200 OK if service is healthy
        Includes environment, storage backend and version for debugging
    """
    return {
        "status": "healthy",
        "environment": settings.app_env,
        "store_backend": settings.store_backend,
        "version": APP_VERSION,
        "timestamp": int(time.time())
    }
