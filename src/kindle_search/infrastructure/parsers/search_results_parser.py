# 📚 kindle_search/infrastructure/parsers/search_results_parser.py
"""
📚 `SearchResultsParser` — пайплайн витягування записів зі сторінки пошуку.

🔹 Знаходить блоки результатів за стабільним data-атрибутом.
🔹 Для кожного блоку незалежно витягує поля й валідує запис (назва + посилання).
🔹 Збій одного блоку не перериває обробку наступних; порядок документа зберігається.
🔹 Кожен результат блоку породжує структуровану діагностичну подію.
"""

from __future__ import annotations

# 🌐 Зовнішні бібліотеки
from bs4 import BeautifulSoup												# 🥣 Розбір HTML
from bs4.element import Tag												# 🧱 Тип блоку

# 🔠 Системні імпорти
import logging															# 🧾 Логування подій
from dataclasses import asdict, dataclass									# 🧱 DTO подій
from enum import Enum														# 🏷️ Причини відмови
from typing import Callable, List, Optional, Union						# 🧰 Узгоджена типізація

# 🧩 Внутрішні модулі проєкту
from kindle_search.domain.products.entities import BookProduct				# 📦 Доменний запис
from kindle_search.domain.products.interfaces import ISearchResultsParser	# 🤝 Контракт пайплайна
from kindle_search.errors.custom_errors import ParsingError				# 🚨 Збій блоку
from kindle_search.shared.metrics import inc_block_emitted, inc_block_skipped	# 📈 Лічильники блоків
from kindle_search.shared.utils.logger import LOG_NAME						# 🏷️ Базове імʼя логера
from kindle_search.shared.utils.url_parser_service import UrlParserService	# 🌍 Канонікалізація URL
from ._infra_options import DEFAULT_SCRAPER_OPTIONS, ScraperOptions		# 🧱 Інфра-налаштування
from .extractors import DEFAULT_SELECTORS, Selectors						# 🧷 Селектори
from .result_block_extractor import SearchResultExtractor					# 🧾 Екстрактор блоку

logger = logging.getLogger(f"{LOG_NAME}.parsers.search_results")			# 🧾 Модульний логер


# ================================
# 🧱 РЕЗУЛЬТАТИ ТА ПОДІЇ
# ================================
class ExtractionFailure(str, Enum):
    """🚫 Причини, з яких блок не дав запису."""

    MISSING_TITLE = "missing_title"										# 🏷️ Немає назви
    MISSING_LINK = "missing_link"											# 🔗 Немає валідного посилання
    BLOCK_ERROR = "block_error"											# 💥 Неочікуваний збій блоку


BlockOutcome = Union[BookProduct, ExtractionFailure]						# 🔀 Результат одного блоку

EMITTED = "emitted"															# ✅ Статус події для успішного блоку


@dataclass(frozen=True, slots=True)
class ExtractionEvent:
    """📡 Структурована діагностика одного блоку."""

    index: int																# 📍 Позиція блоку в документі
    status: str																# ✅ emitted або значення ExtractionFailure
    title: Optional[str] = None
    product_link: Optional[str] = None
    price_source: Optional[str] = None
    detail: Optional[str] = None


EventSink = Callable[[ExtractionEvent], None]


def log_extraction_event(event: ExtractionEvent) -> None:
    """🪵 Дефолтний приймач подій: debug-запис із extra-полями."""
    logger.debug(
        "📡 block #%d → %s",
        event.index,
        event.status,
        extra={"extraction": asdict(event)},
    )


# ================================
# 🏛️ ПАРСЕР СТОРІНКИ РЕЗУЛЬТАТІВ
# ================================
class SearchResultsParser(ISearchResultsParser):
    """
    🏛️ Перетворює сиру сторінку результатів у впорядкований список `BookProduct`.

    Кроки:
      1. Розібрати HTML обраним парсером BeautifulSoup.
      2. Знайти блоки результатів (`data-component-type="s-search-result"`).
      3. Для кожного блоку витягнути поля та побудувати запис.
      4. Відфільтрувати відмови, зберігши порядок документа.
    """

    def __init__(
        self,
        options: ScraperOptions = DEFAULT_SCRAPER_OPTIONS,
        *,
        url_parser: Optional[UrlParserService] = None,
        selectors: Selectors = DEFAULT_SELECTORS,
        on_event: Optional[EventSink] = None,
    ) -> None:
        self._options = options												# ⚙️ Опції пайплайна
        self._url_parser = url_parser or UrlParserService.from_options(options)
        self._S = selectors													# 🧷 Селектори
        self._on_event = on_event or log_extraction_event					# 📡 Приймач діагностики

    # ================================
    # 🔑 ПУБЛІЧНИЙ API
    # ================================
    def parse(self, html: str) -> List[BookProduct]:
        """📚 Сирий HTML → список записів (порожній — валідний результат)."""
        soup = BeautifulSoup(html or "", self._options.html_parser)
        return self.parse_document(soup)

    def parse_document(self, soup: BeautifulSoup) -> List[BookProduct]:
        """📚 Вже розібраний документ → список записів."""
        blocks = self.locate_blocks(soup)
        if not blocks:
            logger.info("📭 Блоків результатів не знайдено.")
            return []

        outcomes = [self.extract_block(block, index) for index, block in enumerate(blocks)]
        products = [outcome for outcome in outcomes if isinstance(outcome, BookProduct)]
        logger.info("✅ Витягнуто %d записів з %d блоків.", len(products), len(blocks))
        return products

    def locate_blocks(self, soup: BeautifulSoup) -> List[Tag]:
        """🔎 Блоки результатів у порядку документа."""
        return list(soup.select(self._S.RESULT_BLOCK))

    def extract_block(self, block: Tag, index: int) -> BlockOutcome:
        """🧾 Один блок → запис або причина відмови (виняток назовні не виходить)."""
        try:
            outcome = self._build_product(block, index)
        except Exception as exc:  # noqa: BLE001
            error = ParsingError("Збій обробки блоку", details=repr(exc), block_index=index)
            logger.warning("⚠️ Блок #%d пропущено: %s", index, exc, extra=error.to_log_extra())
            self._emit(ExtractionEvent(index=index, status=ExtractionFailure.BLOCK_ERROR.value, detail=repr(exc)))
            return ExtractionFailure.BLOCK_ERROR
        return outcome

    # ================================
    # 🛠️ ВНУТРІШНІ КРОКИ
    # ================================
    def _build_product(self, block: Tag, index: int) -> BlockOutcome:
        extractor = SearchResultExtractor(
            block,
            options=self._options,
            url_parser=self._url_parser,
            selectors=self._S,
        )
        fields = extractor.extract()
        detail = ",".join(fields.field_errors) or None

        if not fields.title:
            self._emit(ExtractionEvent(index=index, status=ExtractionFailure.MISSING_TITLE.value, detail=detail))
            return ExtractionFailure.MISSING_TITLE
        if not fields.product_link:
            self._emit(
                ExtractionEvent(
                    index=index,
                    status=ExtractionFailure.MISSING_LINK.value,
                    title=fields.title,
                    detail=detail,
                )
            )
            return ExtractionFailure.MISSING_LINK

        product = BookProduct(
            title=fields.title,
            product_link=fields.product_link,
            price=fields.price.price,
            cover_image_url=fields.cover_image_url,
            is_subscription_included=fields.price.is_subscription_included,
            subscription_buy_price=fields.price.subscription_buy_price,
        )
        self._emit(
            ExtractionEvent(
                index=index,
                status=EMITTED,
                title=product.title,
                product_link=product.product_link,
                price_source=fields.price.source.value,
                detail=detail,
            )
        )
        return product

    def _emit(self, event: ExtractionEvent) -> None:
        """📡 Рахує подію в метриках і передає приймачу; збій приймача не ламає пайплайн."""
        if event.status == EMITTED:
            inc_block_emitted()
        else:
            inc_block_skipped(event.status)
        try:
            self._on_event(event)
        except Exception:  # noqa: BLE001
            logger.debug("⚠️ Приймач подій впав", exc_info=True)


__all__ = [
    "BlockOutcome",
    "EventSink",
    "ExtractionEvent",
    "ExtractionFailure",
    "SearchResultsParser",
    "log_extraction_event",
]
