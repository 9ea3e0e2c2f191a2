"""GoFormX — form definition and submission validation service.

Main FastAPI application with lifespan management and global error handling.
"""

import logging
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI

from goformx.config import get_settings
from goformx.api.errors import domain_error_handler, unhandled_exception_handler
from goformx.api.router import api_router
from goformx.errors import DomainError


def configure_logging(debug: bool, log_level: str) -> None:
    """Configure structured logging once for the process."""
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer() if debug else structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
    )


settings = get_settings()
configure_logging(settings.DEBUG, settings.LOG_LEVEL)

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application startup and shutdown lifecycle."""
    logger.info("app_starting", debug=settings.DEBUG, schema_dialect=settings.SCHEMA_DIALECT)

    yield

    logger.info("app_stopped")


# ── Create Application ──

app = FastAPI(
    title=settings.APP_NAME,
    description=(
        "Form builder backend core. Validates form definitions and "
        "submissions and classifies domain errors into HTTP responses."
    ),
    version=settings.VERSION,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)


# ── Global Exception Handlers ──

app.add_exception_handler(DomainError, domain_error_handler)
app.add_exception_handler(Exception, unhandled_exception_handler)


# ── Routes ──

app.include_router(api_router, prefix="/api/v1")


# ── Root endpoint ──

@app.get("/")
async def root():
    """Root endpoint — API info."""
    return {
        "name": settings.APP_NAME,
        "version": settings.VERSION,
        "docs": "/docs",
        "health": "/api/v1/health",
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("goformx.main:app", host=settings.HOST, port=settings.PORT, reload=settings.DEBUG)
