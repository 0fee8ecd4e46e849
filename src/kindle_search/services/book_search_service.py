# 🧠 kindle_search/services/book_search_service.py
"""
🧠 `BookSearchService` — оркестратор пошуку книг.

🔹 Завантажує сторінку результатів (`IDocumentFetcher`).
🔹 Проганяє HTML через пайплайн витягування (`ISearchResultsParser`).
🔹 Повертає `SearchOutcome`: записи + (опційно) причина збою фетчу.
"""

from __future__ import annotations

# 🔠 Системні імпорти
from dataclasses import dataclass									# 🧱 DTO результату
from typing import Dict, List, Optional, Tuple						# 🧰 Типізація

# 🧩 Внутрішні модулі проєкту
from kindle_search.config.config_service import ConfigService		# ⚙️ Статичний конфіг
from kindle_search.domain.products.entities import BookProduct		# 📦 Доменний запис
from kindle_search.domain.products.interfaces import (
    FetchFailure,
    IDocumentFetcher,
    ISearchResultsParser,
)
from kindle_search.errors.reason_codes import ReasonCode			# 🧮 Коди причин
from kindle_search.infrastructure.parsers import ScraperOptions, SearchResultsParser
from kindle_search.infrastructure.web import SearchPageFetcher		# 🌐 Фетчер сторінки
from kindle_search.shared.utils.logger import get_logger				# 🏷️ Логер із префіксом застосунку
from kindle_search.shared.utils.url_parser_service import UrlParserService	# 🔗 URL-сервіс

logger = get_logger("services.search")			# 🧾 Модульний логер


# ================================
# 📬 DTO РЕЗУЛЬТАТУ
# ================================
@dataclass(frozen=True, slots=True)
class SearchOutcome:
    """📬 Результат одного пошуку."""

    query: str															# 🔎 Запит користувача
    products: Tuple[BookProduct, ...] = ()								# 📚 Записи в порядку документа
    failure: Optional[FetchFailure] = None								# 🚨 Причина збою фетчу

    @property
    def is_empty(self) -> bool:
        return not self.products

    @property
    def reason(self) -> Optional[ReasonCode]:
        """🧮 Чому результат порожній (None, якщо записи є)."""
        if self.failure is not None:
            return self.failure.reason
        return ReasonCode.NO_RESULTS if self.is_empty else None

    def to_list(self) -> List[Dict[str, object]]:
        """📦 Записи у JSON-формі."""
        return [product.to_dict() for product in self.products]


# ================================
# 🏛️ СЕРВІС ПОШУКУ
# ================================
class BookSearchService:
    """🏛️ Компонує фетчер і пайплайн витягування."""

    def __init__(self, fetcher: IDocumentFetcher, parser: ISearchResultsParser) -> None:
        self._fetcher = fetcher
        self._parser = parser

    @classmethod
    def from_options(cls, options: ScraperOptions) -> "BookSearchService":
        """🏗️ Збирає сервіс з одного набору опцій (спільний URL-сервіс)."""
        url_parser = UrlParserService.from_options(options)
        return cls(
            SearchPageFetcher(options, url_parser=url_parser),
            SearchResultsParser(options, url_parser=url_parser),
        )

    @classmethod
    def from_config(cls, config: Optional[ConfigService] = None) -> "BookSearchService":
        """⚙️ Збирає сервіс із `config.yaml` + ENV (`SCRAPER_*`)."""
        config = config or ConfigService()
        options = ScraperOptions.from_env(base=ScraperOptions.from_config(config))
        return cls.from_options(options)

    async def search(self, query: str) -> SearchOutcome:
        """
        🔎 Виконує пошук.

        Raises:
            ValueError: Якщо запит порожній після нормалізації.
        """
        outcome = await self._fetcher.fetch(query)
        if isinstance(outcome, FetchFailure):
            logger.warning(
                "🚫 Пошук '%s' без результатів: збій фетчу (%s).",
                query,
                outcome.reason.value,
                extra={"failure": outcome.to_dict()},
            )
            return SearchOutcome(query=query, failure=outcome)

        products = tuple(self._parser.parse(outcome.html))
        logger.info("📚 Пошук '%s' → %d записів.", query, len(products))
        return SearchOutcome(query=query, products=products)


__all__ = ["BookSearchService", "SearchOutcome"]
