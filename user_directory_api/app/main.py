"""
Main entrypoint for the User Directory API.

This module assembles the FastAPI application, sets up logging,
registers the exception handlers that render the error envelope and
includes versioned routers.  The ``create_app`` function builds and
configures the app, which is then instantiated at module import time as
``app``::

    uvicorn user_directory_api.app.main:app --reload

The application title and version are provided via ``Settings`` from
``core.config``.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .api.v1.router import router as v1_router
from .clients.user_api_client import UserApiClient
from .core.config import settings
from .core.errors import ServiceError
from .core.logging_config import setup_logging
from .schemas.response import ErrorResponse

logger = logging.getLogger(__name__)


def _error(status_code: int, error: str, details=None) -> JSONResponse:
    body = ErrorResponse(error=error, details=details)
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


async def service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
    return _error(exc.status_code, exc.message)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return _error(status.HTTP_400_BAD_REQUEST, "Validation error", jsonable_encoder(exc.errors()))


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    # Starlette's ServerErrorMiddleware re-raises after this response is
    # sent and the server logs the traceback, so nothing is logged here.
    return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    This function performs one‑time setup tasks such as configuring
    logging, registering exception handlers and including versioned API
    routers.  The upstream client is opened on startup and closed on
    shutdown.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Initialise logging before anything else so that imports below can
    # safely log messages.
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)

    app.add_exception_handler(ServiceError, service_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

    @app.get("/", tags=["health"])
    async def root() -> dict:
        return {"success": True, "message": "API is running"}

    app.include_router(v1_router, prefix=settings.api_prefix)

    @app.on_event("startup")
    async def startup_event() -> None:
        app.state.user_client = UserApiClient(
            base_url=settings.upstream_base_url,
            timeout=settings.upstream_timeout,
        )
        logger.info("Using upstream user directory at %s", settings.upstream_base_url)

    @app.on_event("shutdown")
    async def shutdown_event() -> None:
        await app.state.user_client.aclose()

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
