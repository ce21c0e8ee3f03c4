"""Product Catalog API main application module.

This module builds the FastAPI application and configures core
middleware, routers, exception handlers and startup/shutdown events.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import structlog
from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from product_catalog.api import CATALOG_ROUTERS, health_router
from product_catalog.api.middleware import setup_middleware
from product_catalog.application.container import build_catalog_services
from product_catalog.infrastructure.config import Settings, settings as default_settings
from product_catalog.infrastructure.database import (
    build_engine,
    build_session_factory,
    create_schema,
)
from product_catalog.infrastructure.logging import configure_logging

logger = structlog.get_logger()


def create_app(
    settings: Settings | None = None,
    session_factory: async_sessionmaker[AsyncSession] | None = None,
) -> FastAPI:
    """Build the catalog application.

    Args:
        settings: Application settings. Defaults to the environment settings.
        session_factory: Session factory to use instead of one built from
            ``settings.database_url``. The caller keeps ownership of its engine.

    Returns:
        Configured FastAPI application.
    """
    settings = settings or default_settings
    configure_logging(settings)

    engine: AsyncEngine | None = None
    if session_factory is None:
        engine = build_engine(settings)
        session_factory = build_session_factory(engine)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """Handle application startup and shutdown events.

        Args:
            app: The FastAPI application instance.

        Yields:
            None after startup, cleanup happens after yield.
        """
        logger.info(
            "Starting Product Catalog API",
            version=settings.api_version,
            debug=settings.debug,
        )

        if engine is not None and settings.create_schema_on_startup:
            await create_schema(engine)
            logger.info("Catalog schema ensured")

        yield

        logger.info("Shutting down Product Catalog API")
        if engine is not None:
            await engine.dispose()

    app = FastAPI(
        title="Product Catalog API",
        description="Multi-tenant product catalog management",
        version=settings.api_version,
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    app.state.settings = settings
    app.state.session_factory = session_factory
    app.state.services = build_catalog_services(session_factory)

    # CORS middleware (must be added before custom middleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Request ID and error handling
    setup_middleware(app)

    app.include_router(health_router, tags=["Health"])
    for router in CATALOG_ROUTERS:
        app.include_router(router, prefix=settings.api_prefix)

    register_exception_handlers(app)

    return app


# ============================================================================
# Custom Exception Handlers
# ============================================================================


def register_exception_handlers(app: FastAPI) -> None:
    """Install handlers that render HTTP and validation errors in the standard body.

    Uncaught exceptions are rendered by ErrorHandlerMiddleware.
    """

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        """Handle HTTP exceptions with consistent format."""
        request_id = getattr(request.state, "request_id", None)

        detail = exc.detail
        if isinstance(detail, dict):
            error_code = detail.get("error_code", "ERROR")
            message = detail.get("message", str(detail))
            details = detail.get("details", [])
        else:
            error_code = "ERROR"
            message = str(detail)
            details = []

        return JSONResponse(
            status_code=exc.status_code,
            content={
                "error_code": error_code,
                "message": message,
                "details": details,
                "request_id": request_id,
            },
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request, exc: RequestValidationError
    ):
        """Handle malformed requests with consistent format."""
        request_id = getattr(request.state, "request_id", None)

        details = [
            {
                "field": ".".join(str(part) for part in error.get("loc", ())),
                "message": error.get("msg", "Invalid value"),
            }
            for error in exc.errors()
        ]

        return JSONResponse(
            status_code=422,
            content={
                "error_code": "VALIDATION_ERROR",
                "message": "Request validation failed",
                "details": details,
                "request_id": request_id,
            },
        )


app = create_app()
