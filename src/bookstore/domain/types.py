"""User tiers."""

from __future__ import annotations

from enum import StrEnum


class Tier(StrEnum):
    """Fixed user category that selects read/listen capabilities."""

    STANDARD = "standard"
    PREMIUM = "premium"

    @classmethod
    def from_user_type(cls, user_type: str) -> Tier:
        """Map a ``createUser`` type token to a tier.

        Only the exact token ``standard`` selects the standard tier; any
        other value is treated as premium.

        Examples:
            >>> Tier.from_user_type("standard")
            <Tier.STANDARD: 'standard'>
            >>> Tier.from_user_type("gold")
            <Tier.PREMIUM: 'premium'>
        """
        if user_type == cls.STANDARD.value:
            return cls.STANDARD
        return cls.PREMIUM
