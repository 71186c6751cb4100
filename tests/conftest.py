"""
Shared test fixtures and configuration.

This module provides pytest fixtures for:
- A deterministic Stark signer
- The starknet.id label encoder
- PostgreSQL connection pools (skipped when no database is reachable)
"""

from collections.abc import Callable, Generator

import psycopg
import pytest
from psycopg_pool import ConnectionPool

from src.adapters.encoding.starknet_id import StarknetIdEncoder
from src.config.settings import get_settings
from src.domain.signature import StarkSigner

TEST_PRIVATE_KEY = 0x3C1E9550E66958296D11B60F8E8E7A7AD990D07FA65D5F7652C4A6C87D4E3CC


@pytest.fixture(scope="session")
def private_key() -> int:
    return TEST_PRIVATE_KEY


@pytest.fixture(scope="session")
def signer(private_key: int) -> StarkSigner:
    """Signer with a fixed test key."""
    return StarkSigner(private_key)


@pytest.fixture(scope="session")
def encoder() -> StarknetIdEncoder:
    return StarknetIdEncoder()


def open_pool_or_skip(max_size: int = 10) -> ConnectionPool:
    """Open a pool against the configured database, skipping if unreachable."""
    settings = get_settings()
    try:
        with psycopg.connect(settings.database_url, connect_timeout=2):
            pass
    except psycopg.OperationalError as e:
        pytest.skip(f"PostgreSQL not available: {e}")

    return ConnectionPool(
        conninfo=settings.database_url,
        min_size=1,
        max_size=max_size,
        open=True,
    )


@pytest.fixture(scope="module")
def pg_pool() -> Generator[ConnectionPool, None, None]:
    """Connection pool with migrations applied."""
    from src.adapters.repository.postgres import run_migrations

    pool = open_pool_or_skip()
    run_migrations(pool)
    yield pool
    pool.close()


@pytest.fixture
def clean_free_domains(pg_pool: ConnectionPool) -> Generator[None, None, None]:
    """Empty the free_domains table before a test."""
    with pg_pool.connection() as conn:
        conn.execute("DELETE FROM free_domains")
        conn.commit()
    yield


@pytest.fixture
def seed_coupon(pg_pool: ConnectionPool) -> Callable[..., None]:
    """Helper to provision a coupon row."""

    def seed(code: str, used: bool = False) -> None:
        with pg_pool.connection() as conn:
            conn.execute(
                "INSERT INTO free_domains (code, used) VALUES (%s, %s)",
                (code, used),
            )
            conn.commit()

    return seed
