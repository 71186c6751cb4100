"""
PostgreSQL repository adapter - Implements CouponLedger protocol.

This module provides the PostgreSQL implementation of the domain's
coupon ledger port using psycopg3 with raw SQL.

Concurrency Design - Single-Use Coupons:
----------------------------------------
The claim is a single conditional UPDATE:

    UPDATE free_domains SET used = TRUE ... WHERE code = %s AND used = FALSE

Under READ COMMITTED, concurrent UPDATEs on the same row serialize on the
row lock and the loser re-evaluates the WHERE clause against the committed
row, so exactly one claimant observes rowcount == 1. There is no separate
read-then-write step that two requests could interleave.

Only when nothing was updated do we look the code up, to distinguish an
unknown code from a spent one. Rows are never deleted, so that lookup
cannot misreport a code that was claimed concurrently.
"""

import logging
from pathlib import Path

import psycopg
from psycopg_pool import ConnectionPool

from src.domain.exceptions import LedgerWriteFailed
from src.domain.ports import ClaimResult

logger = logging.getLogger(__name__)


class PostgresCouponLedger:
    """
    Implements CouponLedger protocol via psycopg3.

    Uses structural subtyping - no explicit inheritance from Protocol.
    All SQL uses parameterized queries for security.
    """

    def __init__(self, pool: ConnectionPool) -> None:
        """
        Initialize ledger with connection pool.

        Args:
            pool: psycopg3 ConnectionPool for database connections
        """
        self._pool = pool

    def claim(self, code: str) -> ClaimResult:
        """
        Atomically mark a coupon code as used.

        Args:
            code: Coupon code as supplied by the claimant

        Returns:
            CLAIMED if this call flipped used from FALSE to TRUE,
            ALREADY_USED if the code exists but was used before,
            NOT_FOUND if the code does not exist

        Raises:
            LedgerWriteFailed: On any database error; the transaction is
                not committed so the coupon stays unused
        """
        claim_sql = """
            UPDATE free_domains
            SET used = TRUE, used_at = NOW()
            WHERE code = %s AND used = FALSE
        """

        exists_sql = """
            SELECT 1 FROM free_domains WHERE code = %s
        """

        try:
            with self._pool.connection() as conn, conn.cursor() as cursor:
                cursor.execute(claim_sql, (code,))
                if cursor.rowcount == 1:
                    conn.commit()
                    return ClaimResult.CLAIMED

                cursor.execute(exists_sql, (code,))
                found = cursor.fetchone() is not None
                conn.commit()
        except psycopg.Error as e:
            logger.error(f"Coupon claim failed: {e}")
            raise LedgerWriteFailed(f"Error while updating coupon code: {e}") from e

        return ClaimResult.ALREADY_USED if found else ClaimResult.NOT_FOUND


def run_migrations(pool: ConnectionPool) -> None:
    """
    Execute all SQL migration files from the migrations directory.

    Migrations are executed in sorted order (alphabetically by filename).
    Each migration should be idempotent (use IF NOT EXISTS, etc.).

    Args:
        pool: psycopg3 ConnectionPool instance
    """
    # Structure: src/adapters/repository/postgres.py -> migrations/
    migrations_dir = Path(__file__).parent.parent.parent.parent / "migrations"

    if not migrations_dir.exists():
        logger.warning(f"Migrations directory not found: {migrations_dir}")
        return

    sql_files = sorted(migrations_dir.glob("*.sql"))

    if not sql_files:
        logger.info("No migration files found")
        return

    logger.info(f"Running {len(sql_files)} migration(s)")

    for sql_file in sql_files:
        logger.info(f"Executing migration: {sql_file.name}")
        try:
            sql_content = sql_file.read_text()

            with pool.connection() as conn:
                conn.execute(sql_content)

            logger.info(f"Migration complete: {sql_file.name}")
        except Exception as e:
            logger.error(f"Migration failed: {sql_file.name} - {e}")
            raise RuntimeError(f"Database migration failed: {sql_file.name}") from e
