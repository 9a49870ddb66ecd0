"""
Credential login application.

Builds the FastAPI app: the lifespan opens the account database pool,
applies migrations and hands the pool to the request dependencies.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from psycopg_pool import ConnectionPool

from src.adapters.repository.postgres import run_migrations
from src.api.v1 import router as v1_router
from src.config.settings import get_settings

logger = logging.getLogger(__name__)

tags_metadata = [
    {
        "name": "v1",
        "description": "Login by email address or account id, email verification "
        "and password reset",
    },
]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Open the account database pool for the lifetime of the app."""
    settings = get_settings()
    logging.basicConfig(level=settings.log_level.upper())

    logger.info("Registration base URL: %s", settings.registration_base_url)
    pool = ConnectionPool(
        conninfo=settings.database_url,
        min_size=settings.pool_min_size,
        max_size=settings.pool_max_size,
    )
    run_migrations(pool)
    app.state.pool = pool
    logger.info("Account database ready (pool %d-%d)", settings.pool_min_size, settings.pool_max_size)

    yield

    pool.close()
    logger.info("Account database pool closed")


app = FastAPI(
    title="credential-resolver",
    description="Resolves email or account id logins to a canonical account",
    version="0.1.0",
    openapi_tags=tags_metadata,
    lifespan=lifespan,
)

app.include_router(v1_router, prefix="/v1")


@app.get("/health")
async def health_check(request: Request) -> dict[str, str]:
    """Report healthy once the account database answers a round trip."""
    with request.app.state.pool.connection() as conn:
        conn.execute("SELECT 1")
    return {"status": "healthy"}
