"""
starknet.id label encoder adapter - Implements LabelEncoder protocol.

Encodes a domain label into the integer the starknet.id naming contract
uses to identify it. Characters of the basic alphabet are little-endian
digits in base 38; digit 37 is an escape that introduces either a final
'a' or a character of the big alphabet (one extra base-2 digit).
"""

from src.domain.exceptions import InvalidFieldElement, LabelEncodingError
from src.domain.field import FieldElement

BASIC_ALPHABET = "abcdefghijklmnopqrstuvwxyz0123456789-"
BIG_ALPHABET = "这来"

_ESCAPE = len(BASIC_ALPHABET)
_BASIC_BASE = len(BASIC_ALPHABET) + 1
_BIG_BASE = len(BIG_ALPHABET)


def _extract_stars(text: str) -> tuple[str, int]:
    """Strip the trailing run of the last big-alphabet character."""
    count = 0
    while text.endswith(BIG_ALPHABET[-1]):
        text = text[:-1]
        count += 1
    return text, count


def encode_label(label: str) -> int:
    """
    Encode a label to its starknet.id integer.

    Raises:
        LabelEncodingError: Empty label or unsupported character
    """
    if not label:
        raise LabelEncodingError("Cannot encode an empty label")

    if label.endswith(BIG_ALPHABET[0] + BASIC_ALPHABET[1]):
        text, stars = _extract_stars(label[:-2])
        label = text + BIG_ALPHABET[-1] * (2 * (stars + 1))
    else:
        text, stars = _extract_stars(label)
        if stars:
            label = text + BIG_ALPHABET[-1] * (1 + 2 * (stars - 1))

    encoded = 0
    multiplier = 1
    last = len(label) - 1

    for i, char in enumerate(label):
        if i == last and char == BASIC_ALPHABET[0]:
            encoded += multiplier * _ESCAPE
            multiplier *= _BASIC_BASE * _BASIC_BASE
        elif char in BASIC_ALPHABET:
            encoded += multiplier * BASIC_ALPHABET.index(char)
            multiplier *= _BASIC_BASE
        elif char in BIG_ALPHABET:
            encoded += multiplier * _ESCAPE
            multiplier *= _BASIC_BASE
            encoded += multiplier * ((1 if i == last else 0) + BIG_ALPHABET.index(char))
            multiplier *= _BIG_BASE
        else:
            raise LabelEncodingError(f"Unsupported character {char!r} in label")

    return encoded


class StarknetIdEncoder:
    """
    Implements LabelEncoder protocol with the starknet.id encoding.

    Uses structural subtyping - no explicit inheritance from Protocol.
    Stateless; a single instance can be shared across requests.
    """

    def encode(self, label: str) -> FieldElement:
        try:
            return FieldElement(encode_label(label))
        except InvalidFieldElement:
            raise LabelEncodingError("Label too long to fit in a field element") from None
