"""
Main FastAPI application for the launchgate backend
"""

from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..auth.factory import get_auth_adapter
from ..config import settings
from ..database.connection import check_database_connection, dispose_database, init_database
from ..logging import configure_logging, get_logger
from ..middleware import LoggingContextMiddleware
from ..upstream.fetcher import CachedFetcher
from ..users.store import SqlUserStore

configure_logging(debug=settings.debug, level=settings.log_level)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    logger.info("Starting launchgate API...")

    init_database()
    ok, error = await check_database_connection()
    if ok:
        logger.info("Database connection verified")
    else:
        logger.warning("Database not reachable at startup", error=error)

    client = httpx.AsyncClient(
        base_url=settings.upstream_base_url,
        timeout=settings.upstream_timeout,
    )
    app.state.fetcher = CachedFetcher(
        client,
        ttl=settings.upstream_cache_ttl,
        maxsize=settings.upstream_cache_size,
    )
    app.state.user_store = SqlUserStore()
    app.state.auth_adapter = get_auth_adapter()
    logger.info(
        "Data sources ready",
        upstream=settings.upstream_base_url,
        auth_provider=settings.auth_provider,
    )

    try:
        yield
    finally:
        logger.info("Shutting down launchgate API...")
        await client.aclose()
        await dispose_database()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="launchgate",
        description="GraphQL gateway over the SpaceX launches API",
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

    from ..graphql.schema import create_graphql_router, validate_schema

    logger.info("Validating GraphQL schema...")
    validate_schema()
    app.include_router(create_graphql_router(), prefix="")
    logger.info("GraphQL endpoint initialized successfully", endpoint="/graphql")

    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "launchgate.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
        log_level=settings.log_level.lower(),
    )
