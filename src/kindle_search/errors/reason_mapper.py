# 🧭 kindle_search/errors/reason_mapper.py
"""
🧭 Мапить винятки → `ReasonCode` + контекст.

🔹 Інкапсулює специфіку httpx та asyncio-таймаутів.
🔹 Повертає словник параметрів (`ctx`) для діагностики (наприклад, `status_code`).
"""

from __future__ import annotations

# 🌐 Зовнішні бібліотеки
import httpx															# 🌐 HTTP-клієнт (винятки)

# 🔠 Системні імпорти
import asyncio															# ⏱️ asyncio.TimeoutError
import logging															# 🧾 Логування процесу мапінгу
from typing import Any, Dict, Optional, Tuple							# 📐 Типи для повернення

# 🧩 Внутрішні модулі проєкту
from kindle_search.shared.utils.logger import LOG_NAME					# 🏷️ Базове імʼя логера
from .custom_errors import AppError									# ⚠️ Доменні винятки
from .reason_codes import ReasonCode									# 🧮 Перелік причин

logger = logging.getLogger(f"{LOG_NAME}.errors.reason_mapper")			# 🧾 Локальний логер


# ================================
# 🧭 ОСНОВНИЙ МАПЕР
# ================================
def map_error_to_reason(exc: BaseException) -> Tuple[ReasonCode, Dict[str, Any]]:
    """
    Повертає (reason_code, ctx) для винятку фетчу.
    """
    logger.debug("🔎 map_error_to_reason start", extra={"exc_type": type(exc).__name__})

    if isinstance(exc, AppError):
        ctx: Dict[str, Any] = {}
        status_code = getattr(exc, "status_code", None)
        if status_code is not None:
            ctx["status_code"] = status_code
        return exc.reason, ctx

    if isinstance(exc, asyncio.TimeoutError):
        logger.debug("⏱️ Overall timeout")
        return ReasonCode.HTTP_TIMEOUT, {}

    httpx_result = _map_httpx_errors(exc)
    if httpx_result:
        return httpx_result

    logger.warning("❓ Unknown error mapped to INTERNAL", extra={"exc_type": type(exc).__name__})
    return ReasonCode.INTERNAL, {}


# ================================
# 🧩 ДОПОМІЖНІ ФУНКЦІЇ
# ================================
def _map_httpx_errors(exc: BaseException) -> Optional[Tuple[ReasonCode, Dict[str, Any]]]:
    """Повертає ReasonCode для httpx-винятків або None."""
    if isinstance(exc, httpx.TimeoutException):
        logger.debug("🌐 HTTP timeout")
        return ReasonCode.HTTP_TIMEOUT, {}
    if isinstance(exc, httpx.HTTPStatusError):
        status_code = exc.response.status_code if exc.response is not None else None
        logger.debug("🌐 HTTP status error", extra={"status_code": status_code})
        return ReasonCode.HTTP_STATUS, {"status_code": status_code}
    if isinstance(exc, httpx.TransportError):
        logger.debug("🌐 HTTP transport error")
        return ReasonCode.HTTP_CONNECTION, {}
    return None


__all__ = ["map_error_to_reason"]
