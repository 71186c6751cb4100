"""
Unit tests for the Pedersen hash chain.

Tests verify:
- The chain composes pedersen left-to-right
- Determinism
- Sensitivity to every argument and to argument order
"""

import pytest
from starknet_py.hash.utils import pedersen_hash

from src.domain.field import FIELD_PRIME, FieldElement
from src.domain.hash_chain import compute_message_hash, pedersen
from src.domain.vouchers import FREE_DOMAIN_CAMPAIGN

ADDRESS = FieldElement.from_hex_str("0x0123456789abcdef0123456789abcdef0123456789abcdef0123456789abcde")
ENCODED_LABEL = FieldElement(8508086)
CODE = FieldElement.from_dec_str("12345")


class TestPedersen:
    """Tests for the two-input hash."""

    def test_zero_zero_vector(self) -> None:
        """pedersen(0, 0) matches the published Starknet value."""
        result = pedersen(FieldElement(0), FieldElement(0))
        assert result.to_hex() == "0x49ee3eba8c1600700ee1b87eb599f16716b0b1022947733551fde4050ca6804"

    def test_output_in_field(self) -> None:
        result = pedersen(ADDRESS, CODE)
        assert 0 <= result.value < FIELD_PRIME

    def test_not_commutative(self) -> None:
        assert pedersen(ADDRESS, CODE) != pedersen(CODE, ADDRESS)


class TestComputeMessageHash:
    """Tests for the three-stage chain."""

    def test_matches_nested_pedersen(self) -> None:
        """Chain is ((addr, label), code), campaign) in that order."""
        expected = pedersen_hash(
            pedersen_hash(
                pedersen_hash(ADDRESS.value, ENCODED_LABEL.value),
                CODE.value,
            ),
            FREE_DOMAIN_CAMPAIGN.value,
        )

        result = compute_message_hash(ADDRESS, ENCODED_LABEL, CODE, FREE_DOMAIN_CAMPAIGN)

        assert result.value == expected

    def test_deterministic(self) -> None:
        first = compute_message_hash(ADDRESS, ENCODED_LABEL, CODE, FREE_DOMAIN_CAMPAIGN)
        second = compute_message_hash(ADDRESS, ENCODED_LABEL, CODE, FREE_DOMAIN_CAMPAIGN)
        assert first == second

    @pytest.mark.parametrize("position", [0, 1, 2, 3])
    def test_changing_any_argument_changes_hash(self, position: int) -> None:
        args = [ADDRESS, ENCODED_LABEL, CODE, FREE_DOMAIN_CAMPAIGN]
        baseline = compute_message_hash(*args)

        args[position] = args[position] + FieldElement(1)

        assert compute_message_hash(*args) != baseline

    def test_swapping_operands_changes_hash(self) -> None:
        baseline = compute_message_hash(ADDRESS, ENCODED_LABEL, CODE, FREE_DOMAIN_CAMPAIGN)
        swapped = compute_message_hash(ENCODED_LABEL, ADDRESS, CODE, FREE_DOMAIN_CAMPAIGN)
        assert swapped != baseline
