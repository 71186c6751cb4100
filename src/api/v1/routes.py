"""
API v1 routes.

Defines REST endpoints for the free domain voucher campaign.
"""

import logging

from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import JSONResponse

from src.api.dependencies import get_voucher_service
from src.api.models import ErrorResponse, FreeDomainVoucherResponse
from src.domain.exceptions import (
    CampaignInactive,
    CouponAlreadyUsed,
    CouponNotFound,
    InvalidCouponCode,
    InvalidFieldElement,
    LabelTooShort,
    LedgerWriteFailed,
    NotRootDomain,
    VoucherError,
)
from src.domain.field import FieldElement
from src.domain.vouchers import VoucherService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["v1"])

# Client errors first; anything not listed is a server-side failure.
_ERROR_STATUS: list[tuple[type[VoucherError], int]] = [
    (NotRootDomain, status.HTTP_400_BAD_REQUEST),
    (LabelTooShort, status.HTTP_400_BAD_REQUEST),
    (InvalidCouponCode, status.HTTP_400_BAD_REQUEST),
    (CampaignInactive, status.HTTP_403_FORBIDDEN),
    (CouponNotFound, status.HTTP_404_NOT_FOUND),
    (CouponAlreadyUsed, status.HTTP_409_CONFLICT),
    (LedgerWriteFailed, status.HTTP_503_SERVICE_UNAVAILABLE),
]


def error_status(error: VoucherError) -> int:
    """Map a domain refusal to its HTTP status code."""
    for error_type, status_code in _ERROR_STATUS:
        if isinstance(error, error_type):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


@router.get(
    "/campaigns/get_free_domain",
    response_model=FreeDomainVoucherResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Malformed address, domain or coupon code"},
        403: {"model": ErrorResponse, "description": "Campaign not active"},
        404: {"model": ErrorResponse, "description": "Coupon code not found"},
        409: {"model": ErrorResponse, "description": "Coupon code already used"},
        500: {"model": ErrorResponse, "description": "Encoding or signing failure"},
        503: {"model": ErrorResponse, "description": "Coupon store unavailable"},
        422: {"description": "Validation error"},
    },
    summary="Get a free domain voucher",
    description="Redeem a one-time coupon code for a signature authorizing "
    "free registration of a root domain for the given address.",
)
def get_free_domain(
    addr: str = Query(..., description="Claimant Starknet address (decimal or 0x hex)"),
    domain: str = Query(..., description="Root domain to register, e.g. abcde.stark"),
    code: str = Query(..., description="One-time coupon code"),
    service: VoucherService = Depends(get_voucher_service),
) -> FreeDomainVoucherResponse | JSONResponse:
    """
    Redeem a coupon code for a free domain voucher.

    - **addr**: Address that will register the domain
    - **domain**: Root domain (label.tld)
    - **code**: Coupon code

    Returns the signature and the encoded domain on success.
    """
    try:
        address = FieldElement.parse(addr)
    except InvalidFieldElement:
        return error_response(status.HTTP_400_BAD_REQUEST, "Invalid address")

    try:
        voucher = service.issue(address, domain, code)
    except VoucherError as e:
        return error_response(error_status(e), str(e))

    return FreeDomainVoucherResponse.from_voucher(voucher)
