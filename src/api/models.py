"""
API request and response models.

Pydantic models for FastAPI endpoint validation and OpenAPI schema generation.
"""

from pydantic import BaseModel, Field

from src.domain.vouchers import Voucher


class FreeDomainVoucherResponse(BaseModel):
    """Response model for a successfully issued voucher."""

    r: str = Field(..., description="Signature r component (0x hex)")
    s: str = Field(..., description="Signature s component (0x hex)")
    code: str = Field(..., description="Redeemed coupon code")
    domain_encoded: str = Field(..., description="starknet.id encoding of the label (0x hex)")

    @classmethod
    def from_voucher(cls, voucher: Voucher) -> "FreeDomainVoucherResponse":
        return cls(
            r=voucher.r.to_hex(),
            s=voucher.s.to_hex(),
            code=voucher.code,
            domain_encoded=voucher.encoded_label.to_hex(),
        )


class ErrorResponse(BaseModel):
    """Standard error response model."""

    error: str
