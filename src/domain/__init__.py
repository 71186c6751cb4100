"""
Domain layer - Pure business logic with zero framework imports.

This package contains the core logic of the free domain voucher
campaign: Stark field arithmetic, the Pedersen hash chain, the ECDSA
signing engine and the voucher issuance service. It defines its own
port interfaces for infrastructure abstraction.
"""

from .exceptions import (
    CampaignInactive,
    CouponAlreadyUsed,
    CouponNotFound,
    InvalidCouponCode,
    InvalidFieldElement,
    LabelEncodingError,
    LabelEncodingFailed,
    LabelTooShort,
    LedgerWriteFailed,
    NotRootDomain,
    SignatureFailed,
    VoucherError,
)
from .field import FieldElement
from .hash_chain import compute_message_hash
from .ports import ClaimResult, CouponLedger, LabelEncoder, MessageSigner
from .signature import Signature, StarkSigner
from .vouchers import CampaignWindow, Voucher, VoucherService

__all__ = [
    "CampaignInactive",
    "CampaignWindow",
    "ClaimResult",
    "CouponAlreadyUsed",
    "CouponLedger",
    "CouponNotFound",
    "FieldElement",
    "InvalidCouponCode",
    "InvalidFieldElement",
    "LabelEncoder",
    "LabelEncodingError",
    "LabelEncodingFailed",
    "LabelTooShort",
    "LedgerWriteFailed",
    "MessageSigner",
    "NotRootDomain",
    "Signature",
    "SignatureFailed",
    "StarkSigner",
    "Voucher",
    "VoucherError",
    "VoucherService",
    "compute_message_hash",
]
