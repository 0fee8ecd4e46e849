# 💸 kindle_search/domain/pricing/rules.py
"""
💸 Таблиця рішень для нормалізації ціни результату пошуку.

🔹 Вхід — `PriceSignals`: сирі тексти/прапорці, вже прочитані з DOM.
🔹 Вихід — `PriceResolution`: (ціна, підписка, ціна «купити»).
🔹 Правила виконуються зверху вниз; кожне тотальне на своїх передумовах і не торкається DOM.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging                                                # 🪵 Логування кроків розрахунку
import re                                                     # 🧵 Патерн «Or $X to buy»
from dataclasses import dataclass, replace                    # 🧱 Immutable-DTO
from decimal import Decimal                                   # 💵 Точні гроші (без float)
from enum import Enum                                         # 🏷️ Джерело ціни
from typing import Callable, Optional, Tuple                  # 🧰 Типізація

# 🧩 Внутрішні модулі проєкту
from kindle_search.shared.utils.logger import LOG_NAME        # 🏷️ Базове імʼя логера
from kindle_search.shared.utils.number import decimal_from_price_str  # 💰 Парсинг валютних рядків

logger = logging.getLogger(f"{LOG_NAME}.domain.pricing")      # 🧾 Іменований логер

# ================================
# 📦 КОНСТАНТИ
# ================================
ZERO_PRICE_SENTINEL = "$0.00"                                 # 🪙 Ціна-заглушка для пропозицій за підпискою
ZERO = Decimal("0.00")
BUY_PRICE_RE = re.compile(r"Or \$([0-9,]+\.[0-9]{2}) to buy")     # 💵 Вторинна пропозиція «купити»
_WHOLE_SEPARATORS_RE = re.compile(r"[,.\s]")                  # ✂️ Розділювачі груп у цілій частині
_ASCII_DIGITS_RE = re.compile(r"[0-9]+")                      # 🔢 Лише ASCII-цифри (не «²», не «٣»)


# ================================
# 🧱 DTO
# ================================
class PriceSource(str, Enum):
    """Яке правило визначило ціну."""

    OFFSCREEN = "offscreen"
    SUBSCRIPTION_ZERO = "subscription_zero"
    PLAIN_ZERO = "plain_zero"
    RECONCILED = "reconciled"
    WHOLE_FRACTION = "whole_fraction"
    UNPARSED = "unparsed"


@dataclass(frozen=True, slots=True)
class PriceSignals:
    """Сирі цінові сигнали одного блоку результату."""

    offscreen_text: str = ""                                  # 🙈 Прихований текст ціни
    has_subscription_badge: bool = False                      # 🏷️ Бейдж підписки (за alt)
    has_subscription_phrase: bool = False                     # 🧾 Фраза «Free with … membership»
    secondary_offer_text: str = ""                            # 💬 Рядок вторинної пропозиції
    whole_text: str = ""                                      # 🔢 Ціла частина ціни
    fraction_text: str = ""                                   # 🔢 Дробова частина ціни

    @property
    def is_zero_sentinel(self) -> bool:
        return self.offscreen_text.strip() == ZERO_PRICE_SENTINEL

    @property
    def has_subscription_marker(self) -> bool:
        return self.has_subscription_badge or self.has_subscription_phrase


@dataclass(frozen=True, slots=True)
class PriceResolution:
    """Результат нормалізації ціни."""

    price: Optional[Decimal] = None
    is_subscription_included: bool = False
    subscription_buy_price: Optional[Decimal] = None
    source: PriceSource = PriceSource.UNPARSED

    @property
    def is_resolved(self) -> bool:
        return self.price is not None


PriceRule = Callable[[PriceSignals, PriceResolution], PriceResolution]


# ================================
# 🧮 ПРАВИЛА
# ================================
def resolve_offscreen(signals: PriceSignals, state: PriceResolution) -> PriceResolution:
    """1️⃣ Прихована ціна; `$0.00` лишається для правила підписки."""
    if state.is_resolved or signals.is_zero_sentinel:
        return state
    price = decimal_from_price_str(signals.offscreen_text)
    if price is None:
        return state                                          # 🪣 Unparsed → далі по таблиці
    return replace(state, price=price, source=PriceSource.OFFSCREEN)


def resolve_zero_price(signals: PriceSignals, state: PriceResolution) -> PriceResolution:
    """2️⃣ Розрізняє «безкоштовно з підпискою» та звичайні $0.00."""
    if state.is_resolved or not signals.is_zero_sentinel:
        return state
    if not signals.has_subscription_marker:
        return replace(state, price=ZERO, source=PriceSource.PLAIN_ZERO)

    buy_price: Optional[Decimal] = None
    match = BUY_PRICE_RE.search(signals.secondary_offer_text or "")
    if match:
        buy_price = decimal_from_price_str(match.group(1).replace(",", ""))
    return replace(
        state,
        price=ZERO,
        is_subscription_included=True,
        subscription_buy_price=buy_price,
        source=PriceSource.SUBSCRIPTION_ZERO,
    )


def reconcile_subscription_price(signals: PriceSignals, state: PriceResolution) -> PriceResolution:
    """3️⃣ Ціна «купити» без основної ціни — це і є справжня ціна."""
    if state.is_resolved or not state.is_subscription_included or state.subscription_buy_price is None:
        return state
    return replace(
        state,
        price=state.subscription_buy_price,
        is_subscription_included=False,
        subscription_buy_price=None,
        source=PriceSource.RECONCILED,
    )


def resolve_whole_fraction(signals: PriceSignals, state: PriceResolution) -> PriceResolution:
    """4️⃣ Ціна, розбита на цілу та дробову частини."""
    if state.is_resolved:
        return state
    whole = _WHOLE_SEPARATORS_RE.sub("", signals.whole_text or "")
    fraction = (signals.fraction_text or "").strip()
    if not (_ASCII_DIGITS_RE.fullmatch(whole) and _ASCII_DIGITS_RE.fullmatch(fraction)):
        return state                                          # 🪣 Немає частин → Unparsed (термінально)
    price = decimal_from_price_str(f"{whole}.{fraction}")
    if price is None:
        return state
    return replace(state, price=price, source=PriceSource.WHOLE_FRACTION)


PRICE_RULES: Tuple[PriceRule, ...] = (
    resolve_offscreen,
    resolve_zero_price,
    reconcile_subscription_price,
    resolve_whole_fraction,
)                                                             # 📋 Порядок має значення


def resolve_price(signals: PriceSignals, rules: Tuple[PriceRule, ...] = PRICE_RULES) -> PriceResolution:
    """
    Проганяє сигнали через таблицю правил і повертає фінальну резолюцію.

    Args:
        signals: Сирі цінові сигнали блоку.
        rules: Впорядкований список правил (для тестів можна підмінити).

    Returns:
        PriceResolution: ціна (або None), прапорець підписки та ціна «купити».
    """
    state = PriceResolution()
    for rule in rules:
        state = rule(signals, state)
    if state.price is None:
        logger.debug("💤 Ціну не розпізнано", extra={"offscreen_text": signals.offscreen_text})
    return state


__all__ = [
    "BUY_PRICE_RE",
    "PRICE_RULES",
    "PriceResolution",
    "PriceRule",
    "PriceSignals",
    "PriceSource",
    "ZERO_PRICE_SENTINEL",
    "reconcile_subscription_price",
    "resolve_offscreen",
    "resolve_price",
    "resolve_whole_fraction",
    "resolve_zero_price",
]
