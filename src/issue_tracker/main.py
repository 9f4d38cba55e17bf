"""FastAPI application entrypoint for the issue tracker."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from issue_tracker.config import Settings, configure_logging, get_settings
from issue_tracker.database import create_tables, dispose_engine, initialize_database
from issue_tracker.domain.common.exceptions import (
    ConcurrencyError,
    DomainError,
    EntityNotFoundError,
    ValidationError,
)
from issue_tracker.infrastructure.issues.routers import issues_router

logger = structlog.get_logger(__name__)

# Checked in order; the first matching type wins
_DOMAIN_ERROR_STATUS: tuple[tuple[type[DomainError], int], ...] = (
    (EntityNotFoundError, status.HTTP_404_NOT_FOUND),
    (ValidationError, status.HTTP_422_UNPROCESSABLE_CONTENT),
    (ConcurrencyError, status.HTTP_409_CONFLICT),
)


async def domain_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Translate domain errors into JSON error responses."""
    status_code = status.HTTP_400_BAD_REQUEST
    for error_type, code in _DOMAIN_ERROR_STATUS:
        if isinstance(exc, error_type):
            status_code = code
            break

    message = exc.message if isinstance(exc, DomainError) else str(exc)
    logger.info(
        "domain_error",
        path=request.url.path,
        error_type=exc.__class__.__name__,
        status_code=status_code,
    )
    return JSONResponse(status_code=status_code, content={"detail": message})


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the FastAPI application."""
    settings = settings or get_settings()
    configure_logging(settings.ENVIRONMENT)

    @asynccontextmanager
    async def lifespan(_: FastAPI) -> AsyncIterator[None]:
        initialize_database(settings)
        if settings.CREATE_TABLES_ON_STARTUP:
            create_tables()
        logger.info("application_started", environment=settings.ENVIRONMENT)
        yield
        dispose_engine()
        logger.info("application_stopped")

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        docs_url=f"{settings.API_V1_PREFIX}/docs",
        lifespan=lifespan,
    )
    app.add_exception_handler(DomainError, domain_error_handler)
    app.include_router(issues_router, prefix=settings.API_V1_PREFIX)

    @app.get("/")
    def root() -> dict[str, str]:
        """Root endpoint with a welcome message."""
        return {"message": f"Welcome to {settings.PROJECT_NAME}"}

    @app.get("/health")
    def health() -> dict[str, str]:
        """Health check endpoint."""
        return {"status": "healthy"}

    @app.get(f"{settings.API_V1_PREFIX}/")
    def api_root() -> dict[str, str]:
        """API v1 root endpoint."""
        return {
            "message": f"{settings.PROJECT_NAME} v1",
            "version": settings.VERSION,
            "docs": f"{settings.API_V1_PREFIX}/docs",
        }

    return app


app = create_app()
