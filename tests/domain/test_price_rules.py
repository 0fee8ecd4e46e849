from decimal import Decimal

import pytest

from kindle_search.domain.pricing.rules import (
    PriceResolution,
    PriceSignals,
    PriceSource,
    reconcile_subscription_price,
    resolve_offscreen,
    resolve_price,
    resolve_whole_fraction,
    resolve_zero_price,
)


# ───────────────────────────────────────────────────────────────────────────
# ПОЛНАЯ ТАБЛИЦА ПРАВИЛ
# ───────────────────────────────────────────────────────────────────────────

def test_regular_offscreen_price():
    res = resolve_price(PriceSignals(offscreen_text="$9.99"))
    assert res.price == Decimal("9.99")
    assert res.is_subscription_included is False
    assert res.subscription_buy_price is None
    assert res.source is PriceSource.OFFSCREEN


def test_offscreen_price_with_group_separator():
    res = resolve_price(PriceSignals(offscreen_text="$1,299.00"))
    assert res.price == Decimal("1299.00")


def test_zero_sentinel_with_badge_and_buy_offer():
    res = resolve_price(
        PriceSignals(
            offscreen_text="$0.00",
            has_subscription_badge=True,
            secondary_offer_text="Or $12.99 to buy",
        )
    )
    assert res.price == Decimal("0.00")
    assert res.is_subscription_included is True
    assert res.subscription_buy_price == Decimal("12.99")
    assert res.source is PriceSource.SUBSCRIPTION_ZERO


def test_zero_sentinel_with_phrase_and_no_buy_offer():
    res = resolve_price(PriceSignals(offscreen_text="$0.00", has_subscription_phrase=True))
    assert res.price == Decimal("0.00")
    assert res.is_subscription_included is True
    assert res.subscription_buy_price is None


def test_buy_offer_with_thousands_separator():
    res = resolve_price(
        PriceSignals(
            offscreen_text="$0.00",
            has_subscription_badge=True,
            secondary_offer_text="Or $1,012.50 to buy",
        )
    )
    assert res.subscription_buy_price == Decimal("1012.50")


def test_plain_zero_without_subscription_marker():
    # Бесплатная книга без подписки: цена 0, флаг не ставим
    res = resolve_price(PriceSignals(offscreen_text="$0.00", secondary_offer_text="Or $3.99 to buy"))
    assert res.price == Decimal("0.00")
    assert res.is_subscription_included is False
    assert res.subscription_buy_price is None
    assert res.source is PriceSource.PLAIN_ZERO


def test_whole_fraction_fallback():
    res = resolve_price(PriceSignals(offscreen_text="", whole_text="24", fraction_text="50"))
    assert res.price == Decimal("24.50")
    assert res.source is PriceSource.WHOLE_FRACTION


def test_whole_part_with_trailing_dot_and_comma():
    res = resolve_price(PriceSignals(whole_text="1,024.", fraction_text="99"))
    assert res.price == Decimal("1024.99")


@pytest.mark.parametrize(
    "signals",
    [
        PriceSignals(),
        PriceSignals(offscreen_text="Currently unavailable"),
        PriceSignals(whole_text="24"),
        PriceSignals(fraction_text="50"),
        PriceSignals(whole_text="abc", fraction_text="50"),
    ],
)
def test_unparsed_price_is_none(signals):
    res = resolve_price(signals)
    assert res.price is None
    assert res.is_subscription_included is False
    assert res.source is PriceSource.UNPARSED


def test_malformed_offscreen_falls_through_to_whole_fraction():
    res = resolve_price(PriceSignals(offscreen_text="$1.2.3", whole_text="4", fraction_text="99"))
    assert res.price == Decimal("4.99")


def test_resolution_is_idempotent():
    signals = PriceSignals(
        offscreen_text="$0.00",
        has_subscription_badge=True,
        secondary_offer_text="Or $7.49 to buy",
    )
    assert resolve_price(signals) == resolve_price(signals)


# ───────────────────────────────────────────────────────────────────────────
# ОТДЕЛЬНЫЕ ПРАВИЛА
# ───────────────────────────────────────────────────────────────────────────

def test_offscreen_rule_leaves_zero_sentinel_for_next_rule():
    state = resolve_offscreen(PriceSignals(offscreen_text="$0.00"), PriceResolution())
    assert state == PriceResolution()


def test_zero_rule_ignores_non_sentinel_text():
    state = resolve_zero_price(PriceSignals(offscreen_text="$5.00"), PriceResolution())
    assert state == PriceResolution()


def test_reconciliation_moves_buy_price_into_price():
    state = PriceResolution(is_subscription_included=True, subscription_buy_price=Decimal("12.99"))
    res = reconcile_subscription_price(PriceSignals(), state)
    assert res.price == Decimal("12.99")
    assert res.is_subscription_included is False
    assert res.subscription_buy_price is None
    assert res.source is PriceSource.RECONCILED


def test_reconciliation_keeps_resolved_price():
    state = PriceResolution(
        price=Decimal("0.00"),
        is_subscription_included=True,
        subscription_buy_price=Decimal("12.99"),
        source=PriceSource.SUBSCRIPTION_ZERO,
    )
    assert reconcile_subscription_price(PriceSignals(), state) is state


def test_whole_fraction_rule_does_not_override_resolved_price():
    state = PriceResolution(price=Decimal("1.00"), source=PriceSource.OFFSCREEN)
    signals = PriceSignals(whole_text="24", fraction_text="50")
    assert resolve_whole_fraction(signals, state) is state


def test_custom_rule_order():
    # Без правила offscreen цена берётся из whole/fraction
    signals = PriceSignals(offscreen_text="$9.99", whole_text="8", fraction_text="49")
    res = resolve_price(signals, rules=(resolve_whole_fraction,))
    assert res.price == Decimal("8.49")


@pytest.mark.parametrize(
    "whole, fraction",
    [
        ("²", "50"),      # надстрочная цифра
        ("24", "⁵⁰"),
        ("٢٤", "50"),     # арабско-индийские цифры
    ],
)
def test_whole_fraction_requires_ascii_digits(whole, fraction):
    res = resolve_price(PriceSignals(whole_text=whole, fraction_text=fraction))
    assert res.price is None
    assert res.source is PriceSource.UNPARSED


def test_buy_offer_with_non_ascii_digits_is_ignored():
    res = resolve_price(
        PriceSignals(offscreen_text="$0.00", has_subscription_badge=True, secondary_offer_text="Or $١٢.٩٩ to buy")
    )
    assert res.is_subscription_included is True
    assert res.subscription_buy_price is None
