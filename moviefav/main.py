"""Main FastAPI application entry point."""

import logging
import time
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator, Dict

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from moviefav.api.responses import ApiResponse, error_response
from moviefav.api.v1.endpoints.auth.routes import router as auth_router
from moviefav.api.v1.endpoints.favorites.routes import router as favorites_router
from moviefav.api.v1.endpoints.health.routes import router as health_router
from moviefav.core.exceptions import (
    DomainException,
    FieldError,
    ServerErrorException,
    ValidationException,
)
from moviefav.infrastructure.database.session import (
    close_db_connections,
    create_tables,
    get_engine,
)
from moviefav.settings import get_settings
from moviefav.utils.logging import setup_logging

PATH_PARAM_MESSAGES = {
    "movie_id": "Invalid movie ID",
}


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Handle application startup and shutdown events."""
    logger = logging.getLogger("moviefav")

    try:
        setup_logging()
        logger.info("Starting MovieFav API...")

        await create_tables(get_engine())
        logger.info("Database tables created")

        logger.info("MovieFav API started successfully")

    except Exception:
        logger.exception("Startup failed")
        raise

    yield

    logger.info("Shutting down MovieFav API...")
    await close_db_connections()
    logger.info("Database connections closed")


def create_app() -> FastAPI:
    """Create and configure FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.api_title,
        description=settings.api_description,
        version=settings.api_version,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    include_routers(app, settings.api_v1_prefix)

    register_exception_handlers(app)

    register_middleware(app)

    return app


def include_routers(app: FastAPI, prefix: str) -> None:
    """Mount every API router under ``prefix``."""
    app.include_router(health_router, prefix=prefix)
    app.include_router(auth_router, prefix=prefix)
    app.include_router(favorites_router, prefix=prefix)


def _request_field_error(error: Dict[str, Any]) -> FieldError:
    """Convert one request validation error to a field error."""
    location = tuple(error.get("loc", ()))
    parts = [str(part) for part in location[1:]]
    field = ".".join(parts) or "request"

    if location[:1] == ("path",) and field in PATH_PARAM_MESSAGES:
        return FieldError(field, PATH_PARAM_MESSAGES[field])
    return FieldError(field, error.get("msg", "Invalid value"))


def register_exception_handlers(app: FastAPI) -> None:
    """Register handlers converting every failure into the response envelope."""

    @app.exception_handler(DomainException)
    async def domain_exception_handler(request: Request, exc: DomainException):
        """Handle custom domain exceptions."""
        errors = exc.errors if isinstance(exc, ValidationException) else None
        headers = {"WWW-Authenticate": "Bearer"} if exc.status_code == 401 else None

        if exc.status_code >= 500:
            logger = logging.getLogger("moviefav")
            logger.error(f"Server error: {exc.message}")

        return error_response(exc.status_code, exc.message, errors, headers)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        """Handle malformed request bodies and parameters."""
        errors = [_request_field_error(error) for error in exc.errors()]
        return error_response(400, ", ".join(error.message for error in errors), errors)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        """Handle framework HTTP exceptions such as unknown routes."""
        return error_response(exc.status_code, str(exc.detail), headers=exc.headers)

    @app.exception_handler(SQLAlchemyError)
    async def store_exception_handler(request: Request, exc: SQLAlchemyError):
        """Handle unexpected database failures."""
        logger = logging.getLogger("moviefav")
        logger.error(f"Database error: {exc}", exc_info=True)

        error = ServerErrorException()
        return error_response(error.status_code, error.message)

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        """Handle general exceptions."""
        logger = logging.getLogger("moviefav")
        logger.error(f"Unhandled exception: {exc}", exc_info=True)

        error = ServerErrorException()
        return error_response(error.status_code, error.message)


def register_middleware(app: FastAPI) -> None:
    """Register custom middleware."""

    @app.middleware("http")
    async def logging_middleware(request: Request, call_next):
        """Log all HTTP requests."""
        logger = logging.getLogger("moviefav")

        start_time = request.state.start_time = time.time()
        client_ip = request.client.host if request.client else "unknown"

        logger.info(f"Request started: {request.method} {request.url.path} from {client_ip}")

        response = await call_next(request)

        process_time = time.time() - start_time
        logger.info(
            f"Request completed: {request.method} {request.url.path} "
            f"status={response.status_code} time={process_time:.3f}s"
        )

        return response

    @app.middleware("http")
    async def security_headers_middleware(request: Request, call_next):
        """Add security headers to responses."""
        response = await call_next(request)

        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"

        return response


app = create_app()


@app.get("/", include_in_schema=False)
async def root() -> ApiResponse[Dict[str, str]]:
    """Root endpoint."""
    settings = get_settings()
    return ApiResponse(
        success=True,
        message=settings.api_title,
        data={"version": settings.api_version, "docs": "/docs"},
    )


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "moviefav.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
    )
