"""
Main FastAPI application.

WHY: This is the entry point for the application. It configures logging,
middleware, routes, exception handlers and startup tasks.
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from blog_api.core.config import settings
from blog_api.core.exceptions import AppException
from blog_api.core.exception_handlers import (
    app_exception_handler,
    validation_exception_handler,
    http_exception_handler,
    generic_exception_handler,
)
from blog_api.core.logging_config import setup_logging
from blog_api.db.seed import seed_sample_data
from blog_api.db.session import AsyncSessionLocal, init_db
from blog_api.middleware import RequestContextMiddleware
from blog_api.models.factory import utc_now
from blog_api.api import users, posts, comments


logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application.

    WHY: Factory pattern allows easier testing with different configurations.

    Returns:
        Configured FastAPI application instance
    """
    setup_logging(settings.LOG_LEVEL, settings.LOG_FILE)

    app = FastAPI(
        title=settings.PROJECT_NAME,
        description="CRUD API for users, posts and comments",
        version=settings.VERSION,
        docs_url="/api/docs",
        redoc_url="/api/redoc",
        openapi_url="/api/openapi.json",
    )

    # Register exception handlers
    app.add_exception_handler(AppException, app_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)

    # Request IDs and per-request log lines
    app.add_middleware(RequestContextMiddleware)

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Health check endpoint
    # WHY: Liveness only; it does not touch the database.
    @app.get("/health", tags=["health"])
    async def health_check() -> dict:
        """Report that the service is up."""
        return {
            "status": "UP",
            "timestamp": utc_now().isoformat(),
            "service": settings.SERVICE_NAME,
        }

    @app.on_event("startup")
    async def startup_event():
        """
        Application startup event handler.

        WHAT: Creates missing tables and, if enabled, seeds sample data
        into an empty database.
        """
        await init_db()
        if settings.SEED_SAMPLE_DATA:
            async with AsyncSessionLocal() as session:
                await seed_sample_data(session)
                await session.commit()
        logger.info(f"{settings.PROJECT_NAME} started")

    # Register API routers
    # WHY: Routes are served both under API_PREFIX (/api/users, documented)
    # and at the root (/users) so either form of URL works.
    for module in (users, posts, comments):
        if settings.API_PREFIX:
            app.include_router(module.router, prefix=settings.API_PREFIX)
            app.include_router(module.router, include_in_schema=False)
        else:
            app.include_router(module.router)

    return app


# Create app instance
# WHY: Creating the app instance here allows it to be imported by uvicorn.
app = create_app()


if __name__ == "__main__":
    import uvicorn

    # WHY: This allows running the app directly with `python -m blog_api.main`
    # for development. In production, use `uvicorn blog_api.main:app` directly.
    uvicorn.run(
        "blog_api.main:app",
        host="0.0.0.0",
        port=8080,
        reload=settings.DEBUG,
        log_level="debug" if settings.DEBUG else "info",
    )
