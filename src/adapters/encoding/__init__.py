"""Label encoding adapters."""

from .starknet_id import StarknetIdEncoder, encode_label

__all__ = ["StarknetIdEncoder", "encode_label"]
