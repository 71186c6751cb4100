"""
Pedersen hash chain binding a voucher request into one signable value.

The chain is strictly left-to-right:

    h1 = H(address, encoded_label)
    h2 = H(h1, coupon_code)
    h3 = H(h2, campaign_constant)

Operand order is part of the wire contract with the on-chain verifier;
reordering yields a different hash and an unverifiable voucher.
"""

from starknet_py.hash.utils import pedersen_hash

from .field import FieldElement


def pedersen(left: FieldElement, right: FieldElement) -> FieldElement:
    """Two-input Starknet Pedersen hash."""
    return FieldElement(pedersen_hash(left.value, right.value))


def compute_message_hash(
    address: FieldElement,
    encoded_label: FieldElement,
    code: FieldElement,
    campaign_constant: FieldElement,
) -> FieldElement:
    h1 = pedersen(address, encoded_label)
    h2 = pedersen(h1, code)
    return pedersen(h2, campaign_constant)
