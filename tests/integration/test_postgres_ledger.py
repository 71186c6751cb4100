"""
Integration tests for PostgresCouponLedger.

Tests ledger operations against a real PostgreSQL database.
Skipped when PostgreSQL is not reachable at DATABASE_URL.
"""

from collections.abc import Callable
from unittest.mock import MagicMock

import psycopg
import pytest
from psycopg_pool import ConnectionPool

from src.adapters.repository.postgres import PostgresCouponLedger
from src.domain.exceptions import LedgerWriteFailed
from src.domain.ports import ClaimResult

pytestmark = pytest.mark.integration


@pytest.fixture
def ledger(pg_pool: ConnectionPool, clean_free_domains: None) -> PostgresCouponLedger:
    """Create ledger instance for each test."""
    return PostgresCouponLedger(pg_pool)


def fetch_row(pool: ConnectionPool, code: str) -> tuple | None:
    with pool.connection() as conn, conn.cursor() as cursor:
        cursor.execute("SELECT used, used_at FROM free_domains WHERE code = %s", (code,))
        return cursor.fetchone()


class TestClaim:
    """Tests for claim method."""

    def test_claim_unused_returns_claimed(
        self, ledger: PostgresCouponLedger, pg_pool: ConnectionPool, seed_coupon: Callable[..., None]
    ) -> None:
        seed_coupon("12345")
        assert ledger.claim("12345") == ClaimResult.CLAIMED

    def test_claim_sets_used_and_timestamp(
        self, ledger: PostgresCouponLedger, pg_pool: ConnectionPool, seed_coupon: Callable[..., None]
    ) -> None:
        seed_coupon("12345")

        ledger.claim("12345")

        used, used_at = fetch_row(pg_pool, "12345")
        assert used is True
        assert used_at is not None

    def test_second_claim_returns_already_used(
        self, ledger: PostgresCouponLedger, pg_pool: ConnectionPool, seed_coupon: Callable[..., None]
    ) -> None:
        seed_coupon("12345")
        ledger.claim("12345")
        assert ledger.claim("12345") == ClaimResult.ALREADY_USED

    def test_preused_coupon_returns_already_used(
        self, ledger: PostgresCouponLedger, pg_pool: ConnectionPool, seed_coupon: Callable[..., None]
    ) -> None:
        seed_coupon("12345", used=True)
        assert ledger.claim("12345") == ClaimResult.ALREADY_USED

    def test_unknown_code_returns_not_found(self, ledger: PostgresCouponLedger) -> None:
        assert ledger.claim("99999") == ClaimResult.NOT_FOUND

    def test_failed_claim_does_not_mutate(
        self, ledger: PostgresCouponLedger, pg_pool: ConnectionPool, seed_coupon: Callable[..., None]
    ) -> None:
        seed_coupon("12345", used=True)

        ledger.claim("12345")
        ledger.claim("99999")

        used, used_at = fetch_row(pg_pool, "12345")
        assert used is True
        assert used_at is None
        assert fetch_row(pg_pool, "99999") is None


class TestSchema:
    """Tests for migration-enforced constraints."""

    def test_non_decimal_codes_rejected_by_schema(
        self, clean_free_domains: None, seed_coupon: Callable[..., None]
    ) -> None:
        with pytest.raises(psycopg.errors.CheckViolation):
            seed_coupon("abc")


class TestStorageFailure:
    """Tests for database error handling."""

    def test_database_error_raises_ledger_write_failed(self) -> None:
        pool = MagicMock()
        pool.connection.side_effect = psycopg.OperationalError("connection refused")

        ledger = PostgresCouponLedger(pool)

        with pytest.raises(LedgerWriteFailed, match="connection refused"):
            ledger.claim("12345")
