"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from nutriplan.api.plans import router as plans_router
from nutriplan.api.templates import router as templates_router
from nutriplan.api.tracking import router as tracking_router
from nutriplan.app_logging import configure_logging
from nutriplan.containers import AppContainer
from nutriplan.domain.errors import (
    ConflictError,
    NotFoundError,
    NutriplanError,
    StoreError,
    ValidationError,
)

_STATUS_BY_ERROR: dict[type[NutriplanError], int] = {
    ValidationError: status.HTTP_422_UNPROCESSABLE_ENTITY,
    NotFoundError: status.HTTP_404_NOT_FOUND,
    ConflictError: status.HTTP_409_CONFLICT,
    StoreError: status.HTTP_503_SERVICE_UNAVAILABLE,
}


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    app.include_router(plans_router)
    app.include_router(templates_router)
    app.include_router(tracking_router)

    @app.exception_handler(NutriplanError)
    async def handle_domain_error(
        request: Request, exc: NutriplanError
    ) -> JSONResponse:
        status_code = _status_for(exc)
        if isinstance(exc, StoreError):
            logger.error(
                "Store failure on %s %s: %s",
                request.method,
                request.url.path,
                exc.reason,
                exc_info=exc,
            )
        return JSONResponse(status_code=status_code, content={"detail": exc.reason})

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app


def _status_for(exc: NutriplanError) -> int:
    for error_type, status_code in _STATUS_BY_ERROR.items():
        if isinstance(exc, error_type):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR
