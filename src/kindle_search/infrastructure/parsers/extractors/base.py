# 🧾 kindle_search/infrastructure/parsers/extractors/base.py
"""
🧾 Спільні селектори та DOM-утиліти для екстракторів блоку результату.

🔹 `Selectors` — іммутабельний набір CSS-селекторів (первинні + fallback).
🔹 Хелпери читають текст/атрибути з першого селектора, що дав непорожнє значення.
🔹 Екстрактори працюють відносно одного блоку (`Tag`), а не всього документа.
"""

from __future__ import annotations

# 🌐 Зовнішні бібліотеки
from bs4.element import Tag	# 🧱 Тип DOM-вузлів

# 🔠 Системні імпорти
import logging	# 🧾 Логування подій
from dataclasses import dataclass	# 🧱 Створення датакласів
from typing import Any, Iterable, Optional, Tuple	# 🧰 Типи для статичного аналізу

# 🧩 Внутрішні модулі проєкту
from kindle_search.shared.utils.logger import LOG_NAME	# 🏷️ Базова назва логера
from kindle_search.shared.utils.number import norm_ws	# 🧹 Нормалізація пробілів

# ================================
# 🧾 ЛОГЕР
# ================================
logger = logging.getLogger(f"{LOG_NAME}.parser.extractor")	# 🧾 Логер для екстракторів


# ================================
# 🧱 СТРУКТУРА СЕЛЕКТОРІВ
# ================================
@dataclass(frozen=True)
class Selectors:
    """Структура із CSS-селекторами для екстракторів блоку."""
    RESULT_BLOCK: str
    TITLE_LIST: Tuple[str, ...]
    OFFSCREEN_PRICE: str
    SUBSCRIPTION_BADGE_IMG: str
    SUBSCRIPTION_TEXT_ROW: str
    SECONDARY_OFFER_ROW: str
    PRICE_WHOLE: str
    PRICE_FRACTION: str
    COVER_IMAGE_LIST: Tuple[str, ...]
    LINK_LIST: Tuple[str, ...]


DEFAULT_SELECTORS = Selectors(
    RESULT_BLOCK='div[data-component-type="s-search-result"]',
    TITLE_LIST=(
        'div[data-cy="title-recipe"] > a > h2 > span',
        'div[data-cy="title-recipe"] h2 span',
        "div.s-title-instructions-style h2 span",
        "h2 span",
    ),
    OFFSCREEN_PRICE='div[data-cy="price-recipe"] > div > div > a > span.a-price > span.a-offscreen',
    SUBSCRIPTION_BADGE_IMG="span.apex-kindle-program-badge img[alt]",
    SUBSCRIPTION_TEXT_ROW=".a-row.a-size-small.a-color-secondary",
    SECONDARY_OFFER_ROW='div[data-cy="secondary-offer-recipe"] .a-row.a-size-base.a-color-secondary',
    PRICE_WHOLE="span.a-price-whole",
    PRICE_FRACTION="span.a-price-fraction",
    COVER_IMAGE_LIST=(
        'div[data-cy="image-container"] > div > span > a > div > img',
        "img.s-image",
    ),
    LINK_LIST=(
        'div[data-cy="title-recipe"] > a',
        "div.s-title-instructions-style > a",
        "h2 > a",
        "a:has(> h2)",
    ),
)	# 🧾 Первинні селектори спираються на data-атрибути, класи лише як fallback


# ================================
# 🛠️ ДОПОМІЖНІ ФУНКЦІЇ
# ================================
def _attr_to_str(value: Any) -> str:
    """Повертає перше непорожнє текстове значення атрибута."""
    if value is None:
        return ""
    if isinstance(value, (list, tuple)):	# 📚 Мультизначні атрибути (class, rel)
        for candidate in value:
            if candidate:
                return str(candidate)
        return ""
    return str(value)


def _node_text(node: Optional[Tag]) -> str:
    """Текст вузла з нормалізованими пробілами ("" для None)."""
    if node is None:
        return ""
    return norm_ws(node.get_text(" ", strip=True))


def _first_text(root: Tag, selectors: Iterable[str]) -> Optional[str]:
    """🔁 Текст першого селектора, що дав непорожнє значення."""
    for selector in selectors:
        text = _node_text(root.select_one(selector))
        if text:
            logger.debug("🔎 Текст знайдено селектором '%s'.", selector)
            return text
    return None


def _first_attr(root: Tag, selectors: Iterable[str], attr: str) -> Optional[str]:
    """🔁 Атрибут `attr` першого елемента, у якого він непорожній."""
    for selector in selectors:
        node = root.select_one(selector)
        if node is None:
            continue
        value = _attr_to_str(node.get(attr)).strip()
        if value:
            return value
    return None


__all__ = [
    "DEFAULT_SELECTORS",
    "Selectors",
    "_attr_to_str",
    "_first_attr",
    "_first_text",
    "_node_text",
]
