# 🔗 kindle_search/infrastructure/parsers/extractors/links.py
"""
🔗 LinksMixin — посилання на товар із якоря заголовка.

🔹 Первинний якір — `data-cy="title-recipe"`, далі fallback-селектори.
🔹 Канонікалізацію виконує `UrlParserService` (origin + очищення трекінг-параметрів).
"""

from __future__ import annotations

# 🌐 Зовнішні бібліотеки
from bs4.element import Tag													# 🧱 Ноди BeautifulSoup

# 🔠 Системні імпорти
from typing import Optional													# 🧰 Типізація

# 🧩 Внутрішні модулі проєкту
from kindle_search.shared.utils.url_parser_service import UrlParserService	# 🌍 Канонікалізація URL
from .base import Selectors, _first_attr, logger							# 🔗 Спільні утиліти


class LinksMixin:
    """🔗 Сире та канонічне посилання на товар."""

    block: Tag
    _S: Selectors
    _url_parser: UrlParserService

    def extract_raw_href(self) -> Optional[str]:
        """🔗 `href` якоря заголовка (перший непорожній)."""
        return _first_attr(self.block, self._S.LINK_LIST, "href")

    def extract_product_link(self) -> Optional[str]:
        """🔗 Абсолютне канонічне посилання або None."""
        href = self.extract_raw_href()
        if not href:
            logger.debug("🔗 Якір заголовка без href.")
            return None
        return self._url_parser.canonicalize(href)
