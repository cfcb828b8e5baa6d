"""Medal tiers and their display order."""

from __future__ import annotations

from enum import Enum


class MedalTier(Enum):
    """Medal tier, identified by its manifest hash."""

    TIER1 = 802673300
    TIER2 = 802673303
    TIER3 = 802673302
    TIER4 = 802673297
    TIER5 = 802673296
    TIER6 = 802673299
    TIER7 = 802673298
    UNKNOWN = 0

    def order(self) -> int:
        """Sort weight: higher tiers have larger values."""
        return _ORDER[self]


_ORDER: dict[MedalTier, int] = {
    MedalTier.TIER1: 700,
    MedalTier.TIER2: 600,
    MedalTier.TIER3: 500,
    MedalTier.TIER4: 400,
    MedalTier.TIER5: 300,
    MedalTier.TIER6: 200,
    MedalTier.TIER7: 100,
    MedalTier.UNKNOWN: 0,
}