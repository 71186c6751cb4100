"""
Voucher domain service - Coupon-gated free domain signatures.

This module contains the core business logic for the free domain
campaign: a claimant presents an address, a root domain and a one-time
coupon code, and receives a Stark signature authorizing free
registration of that domain.

Issuance Flow
=============

    WindowCheck -> DomainShapeCheck -> CouponFormat
        -> Encode -> Hash -> Sign -> ClaimCoupon -> Voucher

Claiming the coupon is the last fallible step. Encoding, hashing and
signing are pure, so any failure in them leaves the coupon untouched,
and a failed ledger write does not commit. A coupon is only ever spent
together with a voucher being returned.
"""

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass

from .exceptions import (
    CampaignInactive,
    CouponAlreadyUsed,
    CouponNotFound,
    InvalidCouponCode,
    InvalidFieldElement,
    LabelEncodingError,
    LabelEncodingFailed,
    LabelTooShort,
    NotRootDomain,
)
from .field import FieldElement
from .hash_chain import compute_message_hash
from .ports import ClaimResult, CouponLedger, LabelEncoder, MessageSigner

logger = logging.getLogger(__name__)

# Identifies the free domain voucher class in the signed message.
FREE_DOMAIN_CAMPAIGN = FieldElement.from_dec_str(
    "2511989689804727759073888271181282305524144280507626647406"
)
DEFAULT_MIN_LABEL_LENGTH = 5


def unix_now() -> int:
    return int(time.time())


@dataclass(frozen=True)
class CampaignWindow:
    """Campaign activity window in Unix seconds, both bounds inclusive."""

    start_time: int
    end_time: int

    def contains(self, now: int) -> bool:
        return self.start_time <= now <= self.end_time


@dataclass(frozen=True)
class Voucher:
    """Signature pair plus the identifiers it was issued for."""

    r: FieldElement
    s: FieldElement
    code: str
    encoded_label: FieldElement


@dataclass
class VoucherService:
    """
    Domain service for free domain voucher issuance.

    Orchestrates request validation, label encoding, message hashing,
    signing and the atomic coupon claim.
    """

    ledger: CouponLedger
    signer: MessageSigner
    encoder: LabelEncoder
    window: CampaignWindow
    campaign_constant: FieldElement = FREE_DOMAIN_CAMPAIGN
    min_label_length: int = DEFAULT_MIN_LABEL_LENGTH
    clock: Callable[[], int] = unix_now

    def issue(self, address: FieldElement, domain: str, code: str) -> Voucher:
        """
        Issue a free domain voucher.

        Args:
            address: Claimant's Starknet address
            domain: Requested root domain (label.tld)
            code: One-time coupon code (decimal numeral)

        Returns:
            Voucher with the signature over the request's message hash

        Raises:
            CampaignInactive: Outside the campaign window
            NotRootDomain: Domain is not exactly label.tld
            LabelTooShort: Label shorter than min_label_length
            InvalidCouponCode: Code is not a decimal field element
            LabelEncodingFailed: Encoder rejected the label
            SignatureFailed: Message could not be signed
            CouponNotFound: Code is unknown to the ledger
            CouponAlreadyUsed: Code was redeemed before
            LedgerWriteFailed: Ledger could not be updated
        """
        if not self.window.contains(self.clock()):
            raise CampaignInactive()

        label = self._root_label(domain)
        code_element = self._coupon_field(code)
        encoded_label = self._encode(label)

        message_hash = compute_message_hash(
            address, encoded_label, code_element, self.campaign_constant
        )
        signature = self.signer.sign(message_hash)

        result = self.ledger.claim(code)
        if result == ClaimResult.NOT_FOUND:
            logger.info(f"Refused free domain {domain}: coupon not found")
            raise CouponNotFound()
        if result == ClaimResult.ALREADY_USED:
            logger.info(f"Refused free domain {domain}: coupon already used")
            raise CouponAlreadyUsed()

        logger.info(f"Issued free domain voucher for {domain}")
        return Voucher(r=signature.r, s=signature.s, code=code, encoded_label=encoded_label)

    def _root_label(self, domain: str) -> str:
        """Return the label of a label.tld domain after shape checks."""
        parts = domain.split(".")
        if len(parts) != 2 or not all(parts):
            raise NotRootDomain()
        if len(parts[0]) < self.min_label_length:
            raise LabelTooShort()
        return parts[0]

    def _coupon_field(self, code: str) -> FieldElement:
        try:
            return FieldElement.from_dec_str(code)
        except InvalidFieldElement:
            raise InvalidCouponCode() from None

    def _encode(self, label: str) -> FieldElement:
        try:
            return self.encoder.encode(label)
        except LabelEncodingError as e:
            raise LabelEncodingFailed(f"Error while encoding domain: {e}") from e
