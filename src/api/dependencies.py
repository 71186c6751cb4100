"""
FastAPI dependencies - Dependency injection factories.

This module provides Depends() factories for injecting
domain services and infrastructure adapters into routes.
"""

from fastapi import Request
from psycopg_pool import ConnectionPool

from src.adapters.encoding.starknet_id import StarknetIdEncoder
from src.adapters.repository.postgres import PostgresCouponLedger
from src.config.settings import get_settings
from src.domain.field import FieldElement
from src.domain.signature import StarkSigner
from src.domain.vouchers import CampaignWindow, VoucherService

# Module-level singleton - StarknetIdEncoder is stateless
_label_encoder = StarknetIdEncoder()


def get_pool(request: Request) -> ConnectionPool:
    """
    Get connection pool from app state.

    The pool is created during app lifespan startup and stored in app.state.
    """
    return request.app.state.pool


def get_ledger(request: Request) -> PostgresCouponLedger:
    """Create coupon ledger with connection pool from app state."""
    pool = get_pool(request)
    return PostgresCouponLedger(pool)


def get_signer(request: Request) -> StarkSigner:
    """Get the signer provisioned at startup."""
    return request.app.state.signer


def get_label_encoder() -> StarknetIdEncoder:
    """Get starknet.id label encoder (singleton)."""
    return _label_encoder


def get_voucher_service(request: Request) -> VoucherService:
    """
    Create voucher service with injected dependencies.

    Wires together the ledger, signer, encoder and campaign settings.
    """
    settings = get_settings()
    return VoucherService(
        ledger=get_ledger(request),
        signer=get_signer(request),
        encoder=get_label_encoder(),
        window=CampaignWindow(
            start_time=settings.free_domains_start_time,
            end_time=settings.free_domains_end_time,
        ),
        campaign_constant=FieldElement.from_dec_str(settings.free_domains_campaign_constant),
        min_label_length=settings.free_domains_min_label_length,
    )
