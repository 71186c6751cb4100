"""
Stark field arithmetic.

Elements of the prime field used by the Pedersen hash and the Stark
curve ECDSA scheme. All arithmetic reduces modulo FIELD_PRIME; parsing
rejects anything outside [0, FIELD_PRIME) instead of wrapping it.
"""

import re
from dataclasses import dataclass

from .exceptions import InvalidFieldElement

FIELD_PRIME = 2**251 + 17 * 2**192 + 1
EC_ORDER = 0x0800000000000010FFFFFFFFFFFFFFFFB781126DCAE7B2321E66A241ADC64D2F
FELT_BYTES = 32

_DECIMAL = re.compile(r"[0-9]+")
_HEX = re.compile(r"0[xX][0-9a-fA-F]+")

# Longest numerals that can still be below FIELD_PRIME, leading zeros aside
_MAX_DEC_DIGITS = len(str(FIELD_PRIME))
_MAX_HEX_DIGITS = len(f"{FIELD_PRIME:x}")


@dataclass(frozen=True)
class FieldElement:
    """Immutable element of the Stark prime field."""

    value: int

    def __post_init__(self) -> None:
        if not isinstance(self.value, int) or isinstance(self.value, bool):
            raise InvalidFieldElement(f"Field element must be an integer, got {self.value!r}")
        if not 0 <= self.value < FIELD_PRIME:
            raise InvalidFieldElement("Value outside the Stark field")

    @classmethod
    def from_dec_str(cls, text: str) -> "FieldElement":
        """
        Parse a decimal numeral.

        Only ASCII digits are accepted: no sign, whitespace, underscores
        or non-ASCII digits, which Python's int() would otherwise allow.
        """
        if not isinstance(text, str) or not _DECIMAL.fullmatch(text):
            raise InvalidFieldElement(f"Not a decimal numeral: {text!r}")
        digits = text.lstrip("0") or "0"
        if len(digits) > _MAX_DEC_DIGITS:
            raise InvalidFieldElement("Value outside the Stark field")
        return cls(int(digits))

    @classmethod
    def from_hex_str(cls, text: str) -> "FieldElement":
        """Parse a 0x-prefixed hex string."""
        if not isinstance(text, str) or not _HEX.fullmatch(text):
            raise InvalidFieldElement(f"Not a hex numeral: {text!r}")
        digits = text[2:].lstrip("0") or "0"
        if len(digits) > _MAX_HEX_DIGITS:
            raise InvalidFieldElement("Value outside the Stark field")
        return cls(int(digits, 16))

    @classmethod
    def parse(cls, text: str) -> "FieldElement":
        """Parse hex when 0x-prefixed, decimal otherwise."""
        if isinstance(text, str) and text[:2].lower() == "0x":
            return cls.from_hex_str(text)
        return cls.from_dec_str(text)

    @classmethod
    def from_bytes(cls, data: bytes) -> "FieldElement":
        """Parse up to 32 big-endian bytes."""
        if len(data) > FELT_BYTES:
            raise InvalidFieldElement(f"Need at most {FELT_BYTES} bytes, got {len(data)}")
        return cls(int.from_bytes(data, "big"))

    @classmethod
    def from_int(cls, value: int) -> "FieldElement":
        """Reduce an arbitrary integer into the field."""
        return cls(value % FIELD_PRIME)

    def to_bytes(self) -> bytes:
        return self.value.to_bytes(FELT_BYTES, "big")

    def to_hex(self) -> str:
        return hex(self.value)

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)

    def __add__(self, other: "FieldElement") -> "FieldElement":
        return FieldElement((self.value + other.value) % FIELD_PRIME)

    def __sub__(self, other: "FieldElement") -> "FieldElement":
        return FieldElement((self.value - other.value) % FIELD_PRIME)

    def __mul__(self, other: "FieldElement") -> "FieldElement":
        return FieldElement((self.value * other.value) % FIELD_PRIME)

    def __neg__(self) -> "FieldElement":
        return FieldElement(-self.value % FIELD_PRIME)
