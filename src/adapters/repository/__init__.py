"""Repository adapters - Coupon ledger implementations."""

from .memory import InMemoryCouponLedger
from .postgres import PostgresCouponLedger, run_migrations

__all__ = ["InMemoryCouponLedger", "PostgresCouponLedger", "run_migrations"]
