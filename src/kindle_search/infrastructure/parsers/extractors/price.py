# 💰 kindle_search/infrastructure/parsers/extractors/price.py
"""
💰 PriceMixin — збирає цінові сигнали блоку та віддає їх таблиці правил.

🔹 Читає прихований текст ціни, бейдж/фразу підписки, вторинну пропозицію та whole/fraction.
🔹 Саме рішення приймає `resolve_price` з доменного шару (без DOM).
"""

from __future__ import annotations

# 🌐 Зовнішні бібліотеки
from bs4.element import Tag													# 🧱 Ноди BeautifulSoup

# 🔠 Системні імпорти
from typing import TYPE_CHECKING											# 🧰 Типізація

# 🧩 Внутрішні модулі проєкту
from kindle_search.domain.pricing.rules import (							# 💸 Таблиця рішень
    PriceResolution,
    PriceSignals,
    resolve_price,
)
from .base import Selectors, _attr_to_str, _node_text, logger				# 🔗 Спільні утиліти

if TYPE_CHECKING:  # pragma: no cover
    from kindle_search.infrastructure.parsers._infra_options import ScraperOptions


# ================================
# 💰 МІКСИН ЦІНИ
# ================================
class PriceMixin:
    """💰 Нормалізація ціни та ознак підписки."""

    block: Tag
    _S: Selectors
    _options: "ScraperOptions"

    def read_price_signals(self) -> PriceSignals:
        """📥 Знімає сирі цінові сигнали з блоку."""
        badge_alt = self._options.subscription_badge_alt
        has_badge = any(
            _attr_to_str(img.get("alt")).strip() == badge_alt
            for img in self.block.select(self._S.SUBSCRIPTION_BADGE_IMG)
        )
        phrase = self._options.subscription_phrase
        has_phrase = any(
            phrase in _node_text(row)
            for row in self.block.select(self._S.SUBSCRIPTION_TEXT_ROW)
        )
        secondary = " ".join(
            text
            for text in (_node_text(row) for row in self.block.select(self._S.SECONDARY_OFFER_ROW))
            if text
        )
        signals = PriceSignals(
            offscreen_text=_node_text(self.block.select_one(self._S.OFFSCREEN_PRICE)),
            has_subscription_badge=has_badge,
            has_subscription_phrase=has_phrase,
            secondary_offer_text=secondary,
            whole_text=_node_text(self.block.select_one(self._S.PRICE_WHOLE)),
            fraction_text=_node_text(self.block.select_one(self._S.PRICE_FRACTION)),
        )
        logger.debug("💰 Цінові сигнали: %s", signals)
        return signals

    def extract_price(self) -> PriceResolution:
        """💰 Ціна, прапорець підписки та ціна «купити» для блоку."""
        return resolve_price(self.read_price_signals())
