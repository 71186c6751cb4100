"""
Stark curve ECDSA signing engine.

Wraps starknet-py's signing primitives around a key that is provisioned
once at startup. Nonces are derived deterministically (RFC 6979), so the
signer holds no mutable state and is safe to share across threads.
"""

import logging
from dataclasses import dataclass

from starknet_py.hash.utils import (
    message_signature,
    private_to_stark_key,
    verify_message_signature,
)

from .exceptions import InvalidFieldElement, SignatureFailed
from .field import EC_ORDER, FieldElement

logger = logging.getLogger(__name__)

# Stark ECDSA only signs messages below 2**251.
MAX_SIGNABLE_MESSAGE = 2**251


@dataclass(frozen=True)
class Signature:
    """ECDSA signature pair."""

    r: FieldElement
    s: FieldElement


class StarkSigner:
    """
    Signs field-element messages with a process-wide Stark private key.

    The key never appears in repr() or logs; only the derived public
    key is exposed.
    """

    def __init__(self, private_key: int) -> None:
        if not 0 < private_key < EC_ORDER:
            raise ValueError("Private key outside the Stark curve order")
        self._private_key = private_key
        self.public_key = FieldElement(private_to_stark_key(private_key))

    @classmethod
    def from_str(cls, text: str) -> "StarkSigner":
        """Build a signer from decimal or 0x-prefixed hex key material."""
        try:
            key = FieldElement.parse(text.strip())
        except InvalidFieldElement:
            raise ValueError("Private key is not a valid decimal or hex number") from None
        return cls(key.value)

    def __repr__(self) -> str:
        return f"StarkSigner(public_key={self.public_key.to_hex()})"

    def sign(self, message: FieldElement) -> Signature:
        """
        Sign a message hash.

        Raises:
            SignatureFailed: message is zero or outside the signable range,
                or the curve library rejected the signing request
        """
        if not 0 < message.value < MAX_SIGNABLE_MESSAGE:
            raise SignatureFailed("Error while generating Starknet signature: message hash out of range")

        try:
            r, s = message_signature(msg_hash=message.value, priv_key=self._private_key)
        except (ValueError, AssertionError) as e:
            logger.error(f"Stark signing failed: {e}")
            raise SignatureFailed(f"Error while generating Starknet signature: {e}") from e

        return Signature(r=FieldElement(r), s=FieldElement(s))

    def verify(self, message: FieldElement, signature: Signature) -> bool:
        """Check a signature against this signer's public key."""
        return verify_message_signature(
            msg_hash=message.value,
            signature=[signature.r.value, signature.s.value],
            public_key=self.public_key.value,
        )
