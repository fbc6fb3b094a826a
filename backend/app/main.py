"""
FastAPI application entry point.

Uses structured logging from core.logging module.

Run with:
    uvicorn backend.app.main:app --port 5050
"""

import time

from fastapi import FastAPI, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from core.db import db
from core.logging import RequestLoggingMiddleware, configure_logging, get_logger

from .config import get_settings
from .dependencies import get_cache
from .error_handlers import register_exception_handlers
from .middleware.request_id import RequestIDMiddleware
from .routers import results as results_router
from .routers import students as students_router

# Configure structured logging
settings = get_settings()
log_level = "DEBUG" if settings.debug else "INFO"
configure_logging(level=log_level)
logger = get_logger("api")


def check_database_health(max_retries: int = 3, retry_delay: float = 2.0) -> bool:
    """
    Check database connectivity with retry logic.

    Args:
        max_retries: Maximum number of connection attempts
        retry_delay: Seconds to wait between retries, multiplied by the attempt number

    Returns:
        True if database is reachable

    Raises:
        RuntimeError: If database is unreachable after all retries
    """
    for attempt in range(max_retries):
        result = db.health_check()
        if result["healthy"]:
            logger.info("database_health_check_passed", attempt=attempt + 1)
            return True
        logger.warning(
            "database_health_check_failed",
            attempt=attempt + 1,
            max_retries=max_retries,
            error=result["error"],
        )
        if attempt < max_retries - 1:
            time.sleep(retry_delay * (attempt + 1))

    raise RuntimeError(
        f"Database unreachable after {max_retries} attempts. "
        "Check DATABASE_URL configuration and database server status."
    )


def create_app() -> FastAPI:
    app = FastAPI(title=settings.app_name, debug=settings.debug)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type", "Accept", "Origin", "X-Requested-With", "X-Request-ID"],
        expose_headers=["X-Request-ID"],
    )

    # Added last so it runs first and the id is bound before request logging
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    register_exception_handlers(app)

    @app.on_event("startup")
    async def startup_event():
        """Initialize the record store and the lookup cache."""
        logger.info("app_startup", app_name=settings.app_name)

        db.initialize(settings.database_url)
        logger.info("database_initialized")

        check_database_health(max_retries=3, retry_delay=2.0)

        if settings.auto_create_tables:
            db.create_all_tables()

        # The API still serves from the database when Redis is down
        lookup_cache = get_cache()
        if lookup_cache.is_available:
            logger.info("cache_initialized", ttl=settings.cache_ttl)
        else:
            logger.warning("cache_unavailable")

    @app.on_event("shutdown")
    async def shutdown_event():
        logger.info("app_shutdown")
        get_cache().close()

    @app.get("/", response_class=PlainTextResponse, tags=["health"])
    def root():
        return "Result Checker API is running"

    @app.get("/health", tags=["health"])
    def health_check():
        """Liveness probe."""
        return {"status": "ok"}

    @app.get("/health/ready", tags=["health"])
    def readiness_check():
        """
        Readiness check endpoint.

        The database is required; the cache is reported but optional.
        Returns 200 if ready, 503 if not ready.
        """
        checks = {
            "database": db.health_check()["healthy"],
            "cache": get_cache().health_check()["healthy"],
        }

        if not checks["database"]:
            return JSONResponse(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                content={"status": "not_ready", "checks": checks},
            )

        return {"status": "ready", "checks": checks}

    app.include_router(results_router.router)
    app.include_router(students_router.router)

    return app


app = create_app()
