"""
Main FastAPI application for Menagerie backend
"""

import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..config import settings
from ..database.connection import create_schema, dispose_database, get_async_session, init_database
from ..database.seed_data import ensure_seed_records
from ..logging import configure_logging, get_logger
from ..middleware import LoggingContextMiddleware
from ..store.base import RecordStore
from ..store.sql import SqlRecordStore

# Configure logging before creating logger
configure_logging(debug=settings.debug, log_level=settings.log_level)
logger = get_logger(__name__)


def create_app(store: RecordStore | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    record_store = store or SqlRecordStore()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan manager."""
        logger.info("Starting Menagerie API...")
        init_database()
        await create_schema()

        if settings.seed_on_startup:
            async with get_async_session() as session:
                await ensure_seed_records(session)

        from ..startup import ConfigurationError, validate_startup_configuration

        try:
            results = await validate_startup_configuration(record_store)
            if not results["overall_valid"]:
                logger.error(
                    "Startup validation failed - some features may not work properly",
                    database_errors=results["database"]["errors"],
                    admin_errors=results["admin"]["errors"],
                )
        except ConfigurationError:
            raise
        except Exception as e:
            logger.error("Unexpected error during startup validation", error=str(e))

        yield

        logger.info("Shutting down Menagerie API...")
        await dispose_database()

    app = FastAPI(
        title="Menagerie API",
        description="Record management service",
        version=__version__,
        lifespan=lifespan,
        debug=settings.debug,
    )

    app.add_middleware(LoggingContextMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health")
    async def health_check():  # pyright: ignore [reportUnusedFunction]
        """Health check endpoint."""
        return {"status": "healthy", "version": __version__}

    # GraphQL endpoint (allow disabling for tests)
    if not os.getenv("MENAGERIE_DISABLE_GRAPHQL"):
        try:
            from ..graphql.schema import create_graphql_router, validate_schema

            logger.info("Validating GraphQL schema...")
            validate_schema()

            app.include_router(create_graphql_router(record_store), prefix="")
            logger.info("GraphQL endpoint initialized successfully", endpoint="/graphql")
        except Exception as e:  # pragma: no cover
            logger.error("Failed to initialize GraphQL endpoint", error=str(e))
            raise

    return app


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "menagerie.api.app:create_app",
        factory=True,
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
        log_level=settings.log_level.lower(),
    )
