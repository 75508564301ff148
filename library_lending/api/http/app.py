"""FastAPI application factory and setup."""

import time
import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import HTTPException, RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger
from starlette.responses import JSONResponse

from library_lending.api.http.app_data import ApplicationDependencies
from library_lending.api.http.routers import authors, books, borrowings, customers, health
from library_lending.api.utils.app_startup import configure_logging
from library_lending.core.errors import (
    ConflictError,
    InvalidArgumentError,
    LibraryError,
    NotFoundError,
    OperationFailedError,
)
from library_lending.core.services import DbSessionService, build_cascade_bus
from library_lending.runtime.context import get_config
from library_lending.runtime.seed import seed

configure_logging()

API_PREFIX = "/api/v1"

ERROR_STATUS: list[tuple[type[LibraryError], int]] = [
    (NotFoundError, 404),
    (ConflictError, 409),
    (InvalidArgumentError, 400),
    (OperationFailedError, 503),
]


def status_for(exc: LibraryError) -> int:
    for error_type, status_code in ERROR_STATUS:
        if isinstance(exc, error_type):
            return status_code
    return 500


# --- FastAPI app setup ---
@asynccontextmanager
async def lifespan(app: FastAPI):
    startup()
    try:
        yield
    finally:
        shutdown()


app = FastAPI(
    title="Library Lending",
    lifespan=lifespan,
    docs_url=None if get_config().app.environment == "production" else "/docs",
    redoc_url=None if get_config().app.environment == "production" else "/redoc",
)

__all__ = ["app", "startup", "shutdown"]

# --- CORS configuration ---
if get_config().app.environment == "production" and (
    "*" in get_config().app.cors.origins
):
    raise RuntimeError(
        "CORS misconfigured: cannot use '*' with allow_credentials=True in production"
    )

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_config().app.cors.origins,
    allow_credentials=get_config().app.cors.allow_credentials,
    allow_methods=get_config().app.cors.allow_methods,
    allow_headers=get_config().app.cors.allow_headers,
)


# --- Domain error mapping ---
@app.exception_handler(LibraryError)
async def library_error_handler(request: Request, exc: LibraryError) -> JSONResponse:
    status_code = status_for(exc)
    logger.bind(status_code=status_code, error_code=exc.code).warning(
        "request.rejected: {}", exc.message
    )
    return JSONResponse(
        status_code=status_code,
        content={"detail": exc.message, "code": exc.code},
    )


# --- Request logging middleware ---
@app.middleware("http")
async def log_requests(request: Request, call_next):
    request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
    client_ip = request.client.host if request.client else "unknown"

    base_ctx = {
        "request_id": request_id,
        "method": request.method,
        "path": request.url.path,
        "client_ip": client_ip,
    }

    start = time.perf_counter()

    with logger.contextualize(**base_ctx):
        try:
            logger.info("request.start")
            response = await call_next(request)

            duration_ms = (time.perf_counter() - start) * 1000
            logger.bind(
                status_code=response.status_code,
                duration_ms=round(duration_ms, 1),
            ).info("request.end")

            response.headers.setdefault("X-Request-ID", request_id)
            return response

        except HTTPException as exc:
            duration_ms = (time.perf_counter() - start) * 1000
            logger.bind(
                status_code=exc.status_code,
                duration_ms=round(duration_ms, 1),
                error_type=type(exc).__name__,
            ).exception("request.error")
            return JSONResponse(
                status_code=exc.status_code,
                content={"detail": exc.detail, "request_id": request_id},
                headers={"X-Request-ID": request_id},
            )

        except RequestValidationError as exc:
            duration_ms = (time.perf_counter() - start) * 1000
            logger.bind(
                status_code=422,
                duration_ms=round(duration_ms, 1),
                error_type=type(exc).__name__,
            ).exception("request.validation_error")
            return JSONResponse(
                status_code=422,
                content={"detail": exc.errors(), "request_id": request_id},
                headers={"X-Request-ID": request_id},
            )

        except Exception as exc:
            duration_ms = (time.perf_counter() - start) * 1000
            logger.bind(
                status_code=500,
                duration_ms=round(duration_ms, 1),
                error_type=type(exc).__name__,
            ).exception("request.error")
            return JSONResponse(
                status_code=500,
                content={"detail": "Internal Server Error", "request_id": request_id},
                headers={"X-Request-ID": request_id},
            )


# --- Router registration ---
app.include_router(health.router)
app.include_router(authors.router, prefix=API_PREFIX)
app.include_router(books.router, prefix=API_PREFIX)
app.include_router(customers.router, prefix=API_PREFIX)
app.include_router(borrowings.router, prefix=API_PREFIX)


# --- Lifecycle hooks ---
def startup() -> None:
    """Build the application-wide dependencies once per process.

    Tests pre-populate ``app.state.app_dependencies`` with an in-memory
    database; that instance is kept.
    """
    config = get_config()
    logger.info("Starting up application in {} environment", config.app.environment)

    deps: ApplicationDependencies | None = getattr(app.state, "app_dependencies", None)
    if deps is None:
        deps = ApplicationDependencies(
            database_service=DbSessionService(),
            cascade_bus=build_cascade_bus(),
        )
        app.state.app_dependencies = deps

    if config.lending.create_tables_on_startup:
        deps.database_service.create_all()
    if config.lending.seed_on_startup:
        with deps.database_service.session_scope() as session:
            seed(session)


def shutdown() -> None:
    logger.info("Shutting down application")


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        app,
        host=get_config().app.host,
        port=get_config().app.port,
        access_log=False,
    )
