# 📚 kindle_search/infrastructure/parsers/__init__.py
"""
📚 Пайплайн витягування записів зі сторінки результатів пошуку.

🔹 `ScraperOptions` — інфраструктурні налаштування.
🔹 `SearchResultExtractor` — поля одного блоку.
🔹 `SearchResultsParser` — документ → впорядкований список `BookProduct`.
"""

from __future__ import annotations

from ._infra_options import DEFAULT_SCRAPER_OPTIONS, DEFAULT_TRACKING_PARAMS, ScraperOptions
from .result_block_extractor import ExtractedFields, SearchResultExtractor
from .search_results_parser import (
    BlockOutcome,
    EventSink,
    ExtractionEvent,
    ExtractionFailure,
    SearchResultsParser,
    log_extraction_event,
)

__all__ = [
    "DEFAULT_SCRAPER_OPTIONS",
    "DEFAULT_TRACKING_PARAMS",
    "ScraperOptions",
    "ExtractedFields",
    "SearchResultExtractor",
    "BlockOutcome",
    "EventSink",
    "ExtractionEvent",
    "ExtractionFailure",
    "SearchResultsParser",
    "log_extraction_event",
]
