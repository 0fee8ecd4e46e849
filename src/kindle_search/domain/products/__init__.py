# 📦 kindle_search/domain/products/__init__.py
"""
📦 Доменні сутності та контракти результатів пошуку.
"""

from __future__ import annotations

from .entities import BookProduct
from .interfaces import (
    FetchedDocument,
    FetchFailure,
    FetchOutcome,
    IDocumentFetcher,
    ISearchResultsParser,
)

__all__ = [
    "BookProduct",
    "FetchedDocument",
    "FetchFailure",
    "FetchOutcome",
    "IDocumentFetcher",
    "ISearchResultsParser",
]
