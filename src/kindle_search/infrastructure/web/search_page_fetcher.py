# 🌐 kindle_search/infrastructure/web/search_page_fetcher.py
"""
🌐 Асинхронне завантаження сторінки результатів пошуку.

🔹 Будує URL (`k=<запит>`, `i=<категорія>`) через `UrlParserService`.
🔹 Виконує один GET через `httpx.AsyncClient` із браузерними заголовками.
🔹 Обмежує час запиту (`httpx.Timeout`) та загальний час фетчу (`asyncio.wait_for`).
🔹 Не-2xx та порожнє тіло піднімаються всередині й мапляться через `map_error_to_reason`.
🔹 Повертає `FetchedDocument` або `FetchFailure`; винятки назовні не виходять.
"""

from __future__ import annotations

# 🌐 Зовнішні бібліотеки
import httpx															# 🌐 HTTP-клієнт

# 🔠 Системні імпорти
import asyncio															# ⏱️ Загальний таймаут
import logging															# 🧾 Логування результатів
from typing import Optional											# 🧰 Типізація

# 🧩 Внутрішні модулі проєкту
from kindle_search.domain.products.interfaces import (
    FetchedDocument,
    FetchFailure,
    FetchOutcome,
    IDocumentFetcher,
)
from kindle_search.errors.custom_errors import AppError, NetworkRequestError	# 🚨 Винятки фетчу
from kindle_search.errors.reason_codes import ReasonCode				# 🧮 Коди причин
from kindle_search.errors.reason_mapper import map_error_to_reason		# 🧭 Виняток → ReasonCode
from kindle_search.infrastructure.parsers._infra_options import (
    DEFAULT_SCRAPER_OPTIONS,
    ScraperOptions,
)
from kindle_search.shared.metrics import inc_fetch_failure, inc_fetch_ok	# 📈 Лічильники фетчу
from kindle_search.shared.utils.logger import LOG_NAME					# 🏷️ Базове імʼя логера
from kindle_search.shared.utils.url_parser_service import UrlParserService	# 🔗 Побудова URL

logger = logging.getLogger(f"{LOG_NAME}.web.fetcher")					# 🧾 Локальний логер модуля


# ================================
# 📥 ФЕТЧЕР СТОРІНКИ ПОШУКУ
# ================================
class SearchPageFetcher(IDocumentFetcher):
    """📥 Отримує сирий HTML сторінки пошуку для запиту."""

    def __init__(
        self,
        options: ScraperOptions = DEFAULT_SCRAPER_OPTIONS,
        *,
        url_parser: Optional[UrlParserService] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._options = options											# ⚙️ Таймаути та заголовки
        self._url_parser = url_parser or UrlParserService.from_options(options)
        self._transport = transport										# 🧪 Підміна транспорту (тести)
        logger.debug(
            "⚙️ SearchPageFetcher init timeout=%.1fs overall=%.1fs",
            options.request_timeout_sec,
            options.overall_timeout_sec,
        )

    # ================================
    # 🔄 ПУБЛІЧНИЙ API
    # ================================
    async def fetch(self, query: str) -> FetchOutcome:
        """🔄 Запит → `FetchedDocument` або `FetchFailure`."""
        url = self._url_parser.build_search_url(query)
        logger.info("📥 fetch start: %s", url)
        try:
            document = await asyncio.wait_for(
                self._request(url),
                timeout=self._options.overall_timeout_sec,
            )
        except (AppError, httpx.HTTPError, asyncio.TimeoutError) as exc:
            return self._to_failure(exc, url)

        inc_fetch_ok()
        logger.info("✅ fetch ok: %s (status=%d, chars=%d)", url, document.status_code, len(document.html))
        return document

    # ================================
    # 🛠️ ВНУТРІШНІ КРОКИ
    # ================================
    async def _request(self, url: str) -> FetchedDocument:
        """🌐 Один GET; не-2xx та порожнє тіло піднімаються як винятки."""
        async with httpx.AsyncClient(
            headers=self._options.headers(),
            timeout=httpx.Timeout(self._options.request_timeout_sec),
            follow_redirects=True,
            transport=self._transport,
        ) as client:
            response = await client.get(url)

        response.raise_for_status()										# 🚦 Не-2xx → HTTPStatusError

        html = response.text
        if not html.strip():
            raise NetworkRequestError(
                "Порожня відповідь сторінки пошуку",
                reason=ReasonCode.EMPTY_BODY,
                url=url,
                status_code=response.status_code,
            )
        return FetchedDocument(url=str(response.url), status_code=response.status_code, html=html)

    @staticmethod
    def _to_failure(exc: BaseException, url: str) -> FetchFailure:
        """🧭 Виняток фетчу → `FetchFailure` через `map_error_to_reason`."""
        reason, ctx = map_error_to_reason(exc)
        if isinstance(exc, AppError):
            extra = exc.to_log_extra()
            details = exc.details or exc.message
        else:
            extra = {"error_code": reason.value, "exc_type": type(exc).__name__}
            if isinstance(exc, httpx.HTTPStatusError):
                details = exc.response.reason_phrase or None
            else:
                details = str(exc) or type(exc).__name__
        status_code = ctx.get("status_code")
        if status_code is not None:
            extra["status_code"] = status_code

        inc_fetch_failure(reason.value)
        logger.warning("⚠️ fetch failed: %s (%s)", url, reason.value, extra=extra)
        return FetchFailure(reason=reason, url=url, status_code=status_code, details=details)


__all__ = ["SearchPageFetcher"]
