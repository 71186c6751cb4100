"""
FastAPI application factory and configuration.

This module creates the FastAPI application instance,
configures routes and lifespan events.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from psycopg_pool import ConnectionPool

from src.adapters.repository.postgres import run_migrations
from src.api.v1 import router as v1_router
from src.config.settings import Settings, get_settings
from src.domain.signature import StarkSigner

logger = logging.getLogger(__name__)

# OpenAPI tags for documentation grouping
tags_metadata = [
    {
        "name": "v1",
        "description": "Free Domain Voucher API v1 - Redeem coupon codes for domain registration signatures",
    },
]


def build_signer(settings: Settings) -> StarkSigner:
    """
    Create the process-wide signer from configured key material.

    Raises:
        RuntimeError: If no key is configured or the key is malformed
    """
    if settings.free_domains_priv_key is None:
        raise RuntimeError("FREE_DOMAINS_PRIV_KEY is not configured")
    try:
        return StarkSigner.from_str(settings.free_domains_priv_key.get_secret_value())
    except ValueError as e:
        raise RuntimeError(f"Invalid FREE_DOMAINS_PRIV_KEY: {e}") from None


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    FastAPI lifespan context manager.

    Manages application startup and shutdown:
    - Loads the signing key on startup
    - Creates database connection pool on startup
    - Runs migrations on startup
    - Closes connection pool on shutdown
    """
    settings = get_settings()

    logger.info("Starting application...")

    signer = build_signer(settings)
    logger.info(f"Signing with public key {signer.public_key.to_hex()}")

    logger.info("Connecting to database...")

    # Create connection pool with explicit sizing
    pool = ConnectionPool(
        conninfo=settings.database_url,
        min_size=settings.pool_min_size,
        max_size=settings.pool_max_size,
    )

    # Run migrations
    logger.info("Running database migrations...")
    run_migrations(pool)

    # Store shared resources in app state for dependency injection
    app.state.pool = pool
    app.state.signer = signer

    logger.info("Application startup complete")

    yield

    # Shutdown
    logger.info("Shutting down application...")
    pool.close()
    logger.info("Database connection pool closed")


app = FastAPI(
    title="free-domain-vouchers",
    description="Free Domain Voucher API - Issues Starknet signatures for coupon-gated domain registration",
    version="0.1.0",
    openapi_tags=tags_metadata,
    lifespan=lifespan,
)

# Include v1 API routes
app.include_router(v1_router, prefix="/v1")


@app.get("/health")
async def health_check(request: Request) -> dict[str, str]:
    """
    Health check endpoint with database validation.

    Returns 200 OK if application and database are healthy.
    Raises exception if database connection fails.
    """
    # Validate database connectivity
    pool = request.app.state.pool
    with pool.connection() as conn:
        conn.execute("SELECT 1")

    return {"status": "healthy"}
