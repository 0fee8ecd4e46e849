# 📚 kindle_search/__init__.py
"""
📚 kindle-search — пошук Kindle-книг на сторінці результатів маркетплейсу.

🔹 `BookSearchService` — фетч сторінки + витягування записів.
🔹 `create_app` — HTTP-поверхня (Flask).
"""

__version__ = "1.0.0"
