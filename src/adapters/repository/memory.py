"""
In-memory repository adapter - Implements CouponLedger protocol.

Process-local ledger for development and tests. The check-and-set runs
under a single lock, giving the same at-most-one-claim guarantee as the
PostgreSQL adapter within one process.
"""

import threading
from collections.abc import Iterable

from src.domain.ports import ClaimResult


class InMemoryCouponLedger:
    """
    Implements CouponLedger protocol with a locked dict.

    Uses structural subtyping - no explicit inheritance from Protocol.
    """

    def __init__(self, codes: Iterable[str] = ()) -> None:
        self._lock = threading.Lock()
        self._used: dict[str, bool] = dict.fromkeys(codes, False)

    def add(self, code: str) -> None:
        """
        Provision an unused coupon; existing entries are left as they are.

        Test and development helper. Production coupons are provisioned
        directly in the free_domains table.
        """
        with self._lock:
            self._used.setdefault(code, False)

    def is_used(self, code: str) -> bool | None:
        """Return the used flag, or None for unknown codes. Used by tests to inspect state."""
        with self._lock:
            return self._used.get(code)

    def claim(self, code: str) -> ClaimResult:
        with self._lock:
            used = self._used.get(code)
            if used is None:
                return ClaimResult.NOT_FOUND
            if used:
                return ClaimResult.ALREADY_USED
            self._used[code] = True
            return ClaimResult.CLAIMED
