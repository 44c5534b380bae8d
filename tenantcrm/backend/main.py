"""
FastAPI Application Entry Point.

This is the main entry point for the CRM backend application.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from tenantcrm.backend.api import health
from tenantcrm.backend.api.endpoints import router as api_router
from tenantcrm.backend.core.config import get_app_config
from tenantcrm.backend.core.database import create_tables, dispose_engine, get_session_factory
from tenantcrm.backend.core.exception_handlers import register_exception_handlers
from tenantcrm.backend.core.logging import get_logger, setup_logging
from tenantcrm.backend.core.middleware import RequestContextMiddleware
from tenantcrm.backend.services.tenant import TenantService

logger = get_logger(__name__)

_app: FastAPI | None = None


async def bootstrap_database() -> None:
    """Create missing tables and make sure the default tenant exists."""
    await create_tables()
    async with get_session_factory()() as session:
        await TenantService(session).ensure_default_tenant()
        await session.commit()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    app_config = get_app_config()
    setup_logging()

    logger.info(
        "Application starting",
        extra={
            "app_name": app_config.application.name,
            "env": app_config.application.environment,
            "db_driver": app_config.database.driver,
        },
    )
    if app_config.database.create_tables:
        await bootstrap_database()

    yield

    await dispose_engine()
    logger.info("Application shutting down")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app_settings = get_app_config().application

    app = FastAPI(
        title=app_settings.name,
        description=app_settings.description,
        version=app_settings.version,
        docs_url="/docs" if app_settings.docs_enabled else None,
        redoc_url="/redoc" if app_settings.docs_enabled else None,
        lifespan=lifespan,
    )

    app.add_middleware(RequestContextMiddleware)

    cors_origins = app_settings.cors.origins
    if cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=cors_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    register_exception_handlers(app)

    app.include_router(health.router, tags=["health"])
    app.include_router(api_router, prefix=app_settings.api_prefix)

    return app


def get_app() -> FastAPI:
    """
    Get the application instance (lazy initialization).

    This function creates the app on first call and caches it.
    Use this instead of importing `app` directly to avoid
    import-time configuration errors.
    """
    global _app
    if _app is None:
        _app = create_app()
    return _app


# For uvicorn: `uvicorn tenantcrm.backend.main:app`
def __getattr__(name: str) -> FastAPI:
    """Support lazy access to `app` for uvicorn compatibility."""
    if name == "app":
        return get_app()
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
