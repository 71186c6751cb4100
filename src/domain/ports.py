"""
Port interfaces - Protocol definitions for infrastructure abstraction.

This module defines the interfaces (ports) that the domain requires
from infrastructure. Adapters implement these protocols.
"""

from enum import Enum
from typing import Protocol

from .field import FieldElement
from .signature import Signature


class ClaimResult(Enum):
    """
    Result of a coupon claim attempt.

    Coupon lifecycle (forward-only):
    - unused -> used (exactly one successful claim)

    A used coupon never becomes unused again.
    """

    CLAIMED = "claimed"
    NOT_FOUND = "not_found"
    ALREADY_USED = "already_used"


class CouponLedger(Protocol):
    """Port interface for single-use coupon persistence."""

    def claim(self, code: str) -> ClaimResult:
        """
        Atomically mark a coupon as used.

        Reading the used flag and setting it must be one indivisible
        operation: under any number of concurrent callers at most one
        receives CLAIMED for a given code. Failed claims do not mutate
        state.

        Args:
            code: Coupon code as supplied by the claimant

        Returns:
            CLAIMED if the coupon was unused and is now used,
            ALREADY_USED if it was used before, NOT_FOUND if unknown

        Raises:
            LedgerWriteFailed: If the store could not be read or updated
        """
        ...


class LabelEncoder(Protocol):
    """Port interface for domain label encoding."""

    def encode(self, label: str) -> FieldElement:
        """
        Encode a domain label into a field element.

        Must be pure and deterministic.

        Raises:
            LabelEncodingError: If the label cannot be encoded
        """
        ...


class MessageSigner(Protocol):
    """Port interface for signing message hashes."""

    def sign(self, message: FieldElement) -> Signature:
        """
        Sign a message hash.

        Raises:
            SignatureFailed: If no signature can be produced
        """
        ...
