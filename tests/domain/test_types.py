"""Tests for the Tier enum."""

import pytest

from bookstore.domain.types import Tier


def test_tier_values() -> None:
    assert {t.value for t in Tier} == {"standard", "premium"}
    for member in Tier:
        assert member == member.value
        assert isinstance(member, str)


@pytest.mark.parametrize(
    "user_type,expected",
    [
        ("standard", Tier.STANDARD),
        ("premium", Tier.PREMIUM),
        ("gold", Tier.PREMIUM),
        ("Standard", Tier.PREMIUM),
        ("", Tier.PREMIUM),
    ],
)
def test_from_user_type(user_type: str, expected: Tier) -> None:
    """Only the exact token 'standard' maps to the standard tier."""
    assert Tier.from_user_type(user_type) is expected
