"""
Main FastAPI application for the Our Impact API.

This module contains the main FastAPI application instance, its
lifespan hooks and the error handlers shared by every route.
"""

import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException as StarletteHTTPException

from ourimpact import __version__
from ourimpact.config import settings
from ourimpact.core.exceptions import (
    AppError,
    app_error_handler,
    http_exception_handler,
    rate_limit_exceeded_handler,
    unhandled_exception_handler,
    validation_exception_handler,
)
from ourimpact.database import async_session
from ourimpact.routers import (
    auth_router,
    cities_router,
    comments_router,
    likes_router,
    resources_router,
    temps_router,
    users_router,
)
from ourimpact.services.weather_job import WeatherScheduler, scheduler_enabled
from ourimpact.utils.limiter import limiter
from ourimpact.utils.logging_config import get_logger, setup_logging

# Import all models so the metadata is complete
import ourimpact.models  # noqa: F401

setup_logging()
logger = get_logger(__name__)


def warn_if_secret_key_generated(app_settings=settings) -> bool:
    """Log a warning when tokens are signed with a per-process random key."""
    if not app_settings.secret_key_generated:
        return False
    logger.warning("SECRET_KEY is not set; using a random key. Issued tokens stop working on restart.")
    return True


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for FastAPI application.

    Starts the daily weather scheduler (when configured) and stops it on
    shutdown. Tables are managed through Alembic migrations.
    """
    logger.info("=" * 60)
    logger.info(f"{settings.PROJECT_NAME} - Application starting up")
    logger.info(f"Environment: {'Development' if settings.DEBUG else 'Production'}")
    logger.info(f"Database: {settings.SQLALCHEMY_DATABASE_URI.split('://')[0]}")
    logger.info("=" * 60)
    warn_if_secret_key_generated()

    scheduler = None
    if scheduler_enabled():
        scheduler = WeatherScheduler(async_session)
        scheduler.start()
    app.state.weather_scheduler = scheduler

    yield

    if scheduler is not None:
        await scheduler.stop()
    logger.info("=" * 60)
    logger.info(f"{settings.PROJECT_NAME} - Application shutting down")
    logger.info("=" * 60)


app = FastAPI(
    title=settings.PROJECT_NAME,
    description="REST API for city comments, likes, learning resources and daily weather readings",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

# Add rate limiter to app state
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)

app.add_exception_handler(AppError, app_error_handler)
app.add_exception_handler(StarletteHTTPException, http_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(Exception, unhandled_exception_handler)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log one line per request: method, path, status and duration."""
    start = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - start) * 1000
    logger.info(f"{request.method} {request.url.path} {response.status_code} {elapsed_ms:.1f}ms")
    return response


# Set up CORS
if settings.BACKEND_CORS_ORIGINS:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[str(origin) for origin in settings.BACKEND_CORS_ORIGINS],
        allow_credentials="*" not in settings.BACKEND_CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )


@app.get("/")
async def root():
    """
    Root endpoint returning API information.
    """
    return {
        "message": f"Welcome to {settings.PROJECT_NAME}",
        "version": __version__,
        "docs": "/docs",
        "redoc": "/redoc",
    }


@app.get("/health")
async def health_check(request: Request):
    """
    Health check endpoint.
    """
    scheduler = getattr(request.app.state, "weather_scheduler", None)
    return {
        "status": "healthy",
        "weatherJob": "running" if scheduler is not None and scheduler.running else "disabled",
    }


# Include routers
for router in (
    auth_router,
    users_router,
    cities_router,
    comments_router,
    resources_router,
    likes_router,
    temps_router,
):
    app.include_router(router, prefix=settings.API_PREFIX)
