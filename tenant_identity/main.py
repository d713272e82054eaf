"""
Main FastAPI application entry point.

Startup creates the database schema and starts the event processor (one
subscriber loop per handler); shutdown stops the processor, which closes
the bus and drains the loops, then disposes of the database engine.

Run with:
    uvicorn tenant_identity.main:app --reload
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from tenant_identity.core.config import settings
from tenant_identity.core.container import (
    get_database,
    get_event_processor,
    get_logger,
)
from tenant_identity.presentation.routers import api_router, system_router
from tenant_identity.presentation.routers.api.middleware.trace_middleware import (
    TraceMiddleware,
)
from tenant_identity.presentation.routers.api.v1.errors import (
    register_exception_handlers,
)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan context manager.

    Args:
        app: FastAPI application instance.

    Yields:
        None during application lifetime.
    """
    logger = get_logger()
    database = get_database()
    processor = get_event_processor()

    await database.create_all()
    processor.start()
    logger.info(
        "application_started",
        environment=settings.environment.value,
        version=settings.app_version,
    )

    yield

    await processor.stop()
    await database.close()
    logger.info("application_stopped")


# Initialize FastAPI application with settings and lifespan
app = FastAPI(
    title=settings.app_name,
    description="Multi-tenant identity and permission service",
    version=settings.app_version,
    docs_url="/docs",
    redoc_url="/redoc",
    debug=settings.debug,
    lifespan=lifespan,
)

# Wire trace middleware (request correlation)
app.add_middleware(TraceMiddleware)

# Register global exception handlers (RFC 7807 error responses)
register_exception_handlers(app)

app.include_router(system_router)
app.include_router(api_router)
