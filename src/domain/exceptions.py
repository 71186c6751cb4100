"""
Domain exceptions - Semantic error types for voucher issuance.

This module defines domain-specific exceptions that communicate
business rule violations without leaking infrastructure details.
Each refusal carries a descriptive default message that is safe to
return to the caller.
"""


class InvalidFieldElement(ValueError):
    """Value is not a numeral or lies outside the Stark prime field."""

    pass


class LabelEncodingError(ValueError):
    """Raised by label encoders for labels they cannot encode."""

    pass


class VoucherError(Exception):
    """Base class for voucher issuance refusals."""

    message = "Voucher issuance failed"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)


class CampaignInactive(VoucherError):
    """Current time is outside the campaign window."""

    message = "Campaign not active"


class NotRootDomain(VoucherError):
    """Domain is not of the form label.tld."""

    message = "Domain must be a root domain"


class LabelTooShort(VoucherError):
    """Root label is shorter than the campaign minimum."""

    message = "Domain too short"


class InvalidCouponCode(VoucherError):
    """Coupon code is not a decimal field element."""

    message = "Coupon code is not a valid decimal number"


class CouponNotFound(VoucherError):
    message = "Coupon code not found"


class CouponAlreadyUsed(VoucherError):
    message = "Coupon code already used"


class LabelEncodingFailed(VoucherError):
    message = "Error while encoding domain"


class SignatureFailed(VoucherError):
    message = "Error while generating Starknet signature"


class LedgerWriteFailed(VoucherError):
    """Coupon store could not be read or updated."""

    message = "Error while updating coupon code"
