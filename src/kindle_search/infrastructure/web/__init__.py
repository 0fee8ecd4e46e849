# 🌐 kindle_search/infrastructure/web/__init__.py
"""🌐 Мережевий шар: завантаження сторінки пошуку."""

from __future__ import annotations

from .search_page_fetcher import SearchPageFetcher

__all__ = ["SearchPageFetcher"]
