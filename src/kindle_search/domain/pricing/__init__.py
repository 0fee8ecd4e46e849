# 💸 kindle_search/domain/pricing/__init__.py
"""
💸 Пакет `domain.pricing` публікує таблицю рішень для нормалізації цін.

🔹 `rules.py` — PriceSignals / PriceResolution та впорядковані правила.
"""

# 🧩 Внутрішні модулі проєкту
from .rules import (
    PRICE_RULES,
    PriceResolution,
    PriceSignals,
    PriceSource,
    ZERO_PRICE_SENTINEL,
    resolve_price,
)

# ================================
# 📤 ПУБЛІЧНИЙ API ПАКЕТА
# ================================
__all__ = [
    "PRICE_RULES",
    "PriceResolution",
    "PriceSignals",
    "PriceSource",
    "ZERO_PRICE_SENTINEL",
    "resolve_price",
]
