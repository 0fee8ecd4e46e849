# 🧠 kindle_search/services/__init__.py
"""🧠 Прикладні сервіси (оркестрація фетчу та витягування)."""

from __future__ import annotations

from .book_search_service import BookSearchService, SearchOutcome

__all__ = ["BookSearchService", "SearchOutcome"]
