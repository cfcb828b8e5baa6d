import pytest

from crucibletools.enums.medaltier import MedalTier


def test_tier_from_hash():
    assert MedalTier(802673300) is MedalTier.TIER1
    assert MedalTier(802673298) is MedalTier.TIER7


def test_unknown_hash_rejected():
    with pytest.raises(ValueError):
        MedalTier(1)


def test_order_values_pinned():
    assert MedalTier.TIER1.order() == 700
    assert MedalTier.TIER7.order() == 100
    assert MedalTier.UNKNOWN.order() == 0


def test_order_strictly_decreasing_from_tier1():
    orders = [
        MedalTier(802673300).order(),
        MedalTier(802673303).order(),
        MedalTier(802673302).order(),
        MedalTier(802673297).order(),
        MedalTier(802673296).order(),
        MedalTier(802673299).order(),
        MedalTier(802673298).order(),
        MedalTier(0).order(),
    ]
    assert orders == sorted(orders, reverse=True)
    assert len(set(orders)) == len(orders)


def test_sorting_by_order_puts_unknown_last():
    all_orders = [MedalTier(tier.value).order() for tier in MedalTier]
    assert MedalTier.TIER1.order() == max(all_orders)
    assert MedalTier.UNKNOWN.order() == min(all_orders)