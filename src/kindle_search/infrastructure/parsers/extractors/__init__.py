# 🧾 kindle_search/infrastructure/parsers/extractors/__init__.py
"""
🧾 Міксини/екстрактори для витягування полів одного блоку результату.

🔹 `Selectors`, `DEFAULT_SELECTORS` — базова конфігурація селекторів.
🔹 `TitleMixin`, `PriceMixin`, `ImagesMixin`, `LinksMixin` — спеціалізовані екстрактори.
"""

from __future__ import annotations

from .base import DEFAULT_SELECTORS, Selectors												# 🧱 Базові селектори
from .images import ImagesMixin															# 🖼️ Обкладинка
from .links import LinksMixin															# 🔗 Посилання
from .price import PriceMixin															# 💰 Ціна
from .title import TitleMixin															# 🏷️ Назва

__all__ = [
    "DEFAULT_SELECTORS",
    "Selectors",
    "ImagesMixin",
    "LinksMixin",
    "PriceMixin",
    "TitleMixin",
]
