# 🛰️ kindle_search/api/routes.py
"""
🛰️ HTTP-поверхня сервісу (Flask).

🔹 `GET /api/books/<title>` та `GET /api/books?title=...` — пошук книг.
🔹 `GET /health` — перевірка живості.
🔹 Порожній результат → 404, порожній запит → 400, несподіваний збій → 500.
"""

from __future__ import annotations

# 🌐 Зовнішні бібліотеки
from flask import Flask, current_app, jsonify, request				# 🌐 Веб-фреймворк
from werkzeug.exceptions import HTTPException						# 🚦 Штатні HTTP-помилки Flask

# 🔠 Системні імпорти
from typing import Optional											# 🧰 Типізація

# 🧩 Внутрішні модулі проєкту
from kindle_search.services.book_search_service import BookSearchService	# 🧠 Оркестратор пошуку
from kindle_search.shared.utils.logger import get_logger				# 🏷️ Логер із префіксом застосунку

logger = get_logger("api")						# 🧾 Модульний логер

SERVICE_KEY = "book_search"											# 🔑 Ключ сервісу в `app.extensions`


# ================================
# 🏭 ФАБРИКА ЗАСТОСУНКУ
# ================================
def create_app(service: Optional[BookSearchService] = None) -> Flask:
    """
    🏭 Створює Flask-застосунок.

    Args:
        service: Готовий `BookSearchService` (тести); інакше збирається з конфігу.
    """
    app = Flask(__name__)
    app.json.sort_keys = False										# 📦 Порядок ключів як у записі
    app.extensions[SERVICE_KEY] = service or BookSearchService.from_config()
    register_routes(app)
    logger.debug("🏭 Flask app створено")
    return app


def _service() -> BookSearchService:
    return current_app.extensions[SERVICE_KEY]


# ================================
# 🛣️ МАРШРУТИ
# ================================
def register_routes(app: Flask) -> None:
    """🛣️ Реєструє маршрути та обробник помилок."""

    @app.route("/health", methods=["GET"])
    def health():
        return jsonify({"status": "ok"})

    @app.route("/api/books", methods=["GET"])
    async def search_books_by_query():
        return await _search(request.args.get("title", ""))

    @app.route("/api/books/<path:title>", methods=["GET"])
    async def search_books(title: str):
        return await _search(title)

    @app.errorhandler(Exception)
    def handle_unexpected(exc: Exception):
        if isinstance(exc, HTTPException):
            return exc												# 🚦 404/405 тощо повертаємо як є
        logger.exception("💥 Необроблена помилка запиту %s", request.path)
        return jsonify({"error": "Internal server error"}), 500


async def _search(title: str):
    """🔎 Спільна логіка обох маршрутів пошуку."""
    query = " ".join((title or "").split())
    if not query:
        return jsonify({"error": "Title parameter is required"}), 400

    outcome = await _service().search(query)
    if outcome.is_empty:
        reason = outcome.reason.value if outcome.reason else None
        logger.info("📭 Немає книг для '%s' (%s)", query, reason)
        return (
            jsonify({"error": "No books found with the given title", "query": query, "reason": reason}),
            404,
        )
    return jsonify(outcome.to_list())


__all__ = ["SERVICE_KEY", "create_app", "register_routes"]
