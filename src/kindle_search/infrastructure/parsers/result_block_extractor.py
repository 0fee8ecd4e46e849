# 🧾 kindle_search/infrastructure/parsers/result_block_extractor.py
"""
🧾 SearchResultExtractor — композиція міксинів для одного блоку результату.

🔹 Забезпечує єдиний API витягування (title/price/cover/link).
🔹 Кожне поле ізольоване: збій одного екстрактора не зупиняє інші.
🔹 Збої полів фіксуються у `field_errors` для діагностики.
"""

from __future__ import annotations

# 🌐 Зовнішні бібліотеки
from bs4.element import Tag	# 🧱 Тип елементів BeautifulSoup

# 🔠 Системні імпорти
import logging	# 🧾 Логування сценаріїв
from dataclasses import dataclass	# 🧱 DTO полів
from typing import Callable, List, Optional, Tuple, TypeVar	# 🧰 Типізація

# 🧩 Внутрішні модулі проєкту
from kindle_search.domain.pricing.rules import PriceResolution	# 💸 Результат цінових правил
from kindle_search.shared.utils.logger import LOG_NAME	# 🏷️ Імʼя базового логера
from kindle_search.shared.utils.url_parser_service import UrlParserService	# 🌍 Канонікалізація URL
from ._infra_options import DEFAULT_SCRAPER_OPTIONS, ScraperOptions	# 🧱 Інфра-налаштування
from .extractors import (	# 🧩 Міксини полів
    DEFAULT_SELECTORS,
    ImagesMixin,
    LinksMixin,
    PriceMixin,
    Selectors,
    TitleMixin,
)

# ================================
# 🧾 ЛОГЕР
# ================================
logger = logging.getLogger(f"{LOG_NAME}.parser.block")	# 🧾 Модульний логер

T = TypeVar("T")


# ================================
# 📦 DTO ПОЛІВ БЛОКУ
# ================================
@dataclass(frozen=True, slots=True)
class ExtractedFields:
    """📦 Сирі, але вже нормалізовані поля одного блоку."""

    title: Optional[str]
    product_link: Optional[str]
    cover_image_url: Optional[str]
    price: PriceResolution
    field_errors: Tuple[str, ...] = ()


# ================================
# 🏛️ ОСНОВНИЙ ЕКСТРАКТОР
# ================================
class SearchResultExtractor(TitleMixin, PriceMixin, ImagesMixin, LinksMixin):
    """🏛️ Оркеструє роботу mixin-класів для одного блоку результату."""

    def __init__(
        self,
        block: Tag,
        *,
        options: ScraperOptions = DEFAULT_SCRAPER_OPTIONS,
        url_parser: Optional[UrlParserService] = None,
        selectors: Selectors = DEFAULT_SELECTORS,
    ) -> None:
        self.block = block	# 🧱 DOM-вузол блоку
        self._S = selectors	# 🧷 Селектори
        self._options = options	# ⚙️ Опції (бейдж/фраза підписки)
        self._url_parser = url_parser or UrlParserService.from_options(options)	# 🌍 URL-сервіс

    def extract(self) -> ExtractedFields:
        """📦 Проганяє всі екстрактори незалежно один від одного."""
        errors: List[str] = []
        title = self._safe("title", self.extract_title, None, errors)
        price = self._safe("price", self.extract_price, PriceResolution(), errors)
        cover = self._safe("cover_image_url", self.extract_cover_image, None, errors)
        link = self._safe("product_link", self.extract_product_link, None, errors)
        return ExtractedFields(
            title=title,
            product_link=link,
            cover_image_url=cover,
            price=price,
            field_errors=tuple(errors),
        )

    @staticmethod
    def _safe(field_name: str, extractor: Callable[[], T], default: T, errors: List[str]) -> T:
        """🛡️ Виконує екстрактор поля; виняток → default + запис у errors."""
        try:
            return extractor()
        except Exception as exc:  # noqa: BLE001
            logger.warning(
                "⚠️ Екстрактор поля '%s' впав: %s",
                field_name,
                exc,
                extra={"field": field_name, "exc_type": type(exc).__name__},
            )
            errors.append(field_name)
            return default


__all__ = ["ExtractedFields", "SearchResultExtractor"]
