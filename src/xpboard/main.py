# src/xpboard/main.py

"""Main FastAPI application for XPBoard."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from . import config
from .api import leaderboard
from .exceptions import ConfigurationError, XPBoardError
from .logging_config import configure_logging
from .middleware.logging import RequestLoggingMiddleware

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """FastAPI lifespan context manager for startup and shutdown events."""
    configure_logging(config.LOG_LEVEL)
    if not config.FRIENDS_API_URL:
        logger.warning("FRIENDS_API_URL is not set; /leaderboard will fail")
    yield


app = FastAPI(title="XPBoard API", lifespan=lifespan)

app.add_middleware(RequestLoggingMiddleware)


# =============================================================================
# Global Exception Handlers
# =============================================================================


@app.exception_handler(ConfigurationError)
async def configuration_error_handler(
    request: Request, exc: ConfigurationError
) -> JSONResponse:
    """Handle missing or invalid settings -> 500."""
    logger.error("Configuration error: %s", exc.message, extra=exc.details)
    return JSONResponse(
        status_code=500,
        content={"detail": exc.message, "error_type": type(exc).__name__},
    )


@app.exception_handler(XPBoardError)
async def xpboard_error_handler(request: Request, exc: XPBoardError) -> JSONResponse:
    """Catch-all for any other XPBoard errors -> 500."""
    logger.error("XPBoard error: %s", exc.message, extra=exc.details, exc_info=True)
    return JSONResponse(
        status_code=500,
        content={"detail": exc.message, "error_type": type(exc).__name__},
    )


@app.exception_handler(Exception)
async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Catch-all for unhandled exceptions."""
    logger.error("Unhandled exception: %s", exc, exc_info=True)
    return JSONResponse(
        status_code=500,
        content={"detail": "An internal server error occurred"},
    )


app.include_router(leaderboard.router)


@app.get("/", tags=["Root"])
async def read_root() -> dict[str, str]:
    """Provides a welcome message."""
    return {"message": "Welcome to the XPBoard API"}


@app.get("/health", tags=["Health"])
async def health_check() -> dict[str, str]:
    """Health check endpoint for monitoring."""
    return {"status": "healthy"}
