# 🚨 kindle_search/errors/custom_errors.py
"""
🚨 Ієрархія винятків застосунку.

🔹 `AppError` — базовий виняток із деталями для логів.
🔹 `NetworkRequestError` — мережевий збій під час фетчу сторінки (таймаут, транспорт, не-2xx).
🔹 `ParsingError` — неочікуваний збій під час обробки одного блоку результату.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging														# 🧾 Логування створення винятків
from typing import Dict, Optional									# 📐 Типізація

# 🧩 Внутрішні модулі проєкту
from kindle_search.shared.utils.logger import LOG_NAME				# 🏷️ Базове імʼя логера
from .reason_codes import ReasonCode								# 🧮 Коди причин

logger = logging.getLogger(f"{LOG_NAME}.errors")					# 🧾 Локальний логер


# ================================
# 🧠 БАЗОВИЙ ВИНЯТОК
# ================================
class AppError(Exception):
    """🧠 Базовий виняток застосунку."""

    reason: ReasonCode = ReasonCode.INTERNAL						# 🧮 Код причини за замовчуванням

    def __init__(self, message: str, *, details: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message											# 🗒️ Коротке повідомлення
        self.details = details											# 🔎 Технічні деталі

    def to_log_extra(self) -> Dict[str, object]:
        """📦 Формує словник для `logger.extra`."""
        extra: Dict[str, object] = {"error_code": self.reason.value}
        if self.details:
            extra["details"] = self.details
        return extra


# ================================
# 🌐 МЕРЕЖЕВІ ПОМИЛКИ
# ================================
class NetworkRequestError(AppError):
    """🌐 Збій HTTP-запиту до сторінки пошуку."""

    def __init__(
        self,
        message: str,
        *,
        reason: ReasonCode = ReasonCode.HTTP_CONNECTION,
        details: Optional[str] = None,
        url: Optional[str] = None,
        status_code: Optional[int] = None,
    ) -> None:
        super().__init__(message, details=details)
        self.reason = reason											# 🧮 Категорія збою
        self.url = url													# 🔗 URL, що викликав помилку
        self.status_code = status_code									# 🔢 HTTP-код відповіді
        logger.debug(
            "🌐 NetworkRequestError created",
            extra={"url": url, "status_code": status_code, "reason": reason.value},
        )

    def to_log_extra(self) -> Dict[str, object]:
        extra = super().to_log_extra()
        if self.url:
            extra["url"] = self.url
        if self.status_code is not None:
            extra["status_code"] = self.status_code
        return extra


# ================================
# 🧾 ПОМИЛКИ ПАРСИНГУ
# ================================
class ParsingError(AppError):
    """🧾 Неочікуваний збій під час витягування одного блоку."""

    def __init__(self, message: str, *, details: Optional[str] = None, block_index: Optional[int] = None) -> None:
        super().__init__(message, details=details)
        self.block_index = block_index									# 📍 Позиція блоку в документі

    def to_log_extra(self) -> Dict[str, object]:
        extra = super().to_log_extra()
        if self.block_index is not None:
            extra["block_index"] = self.block_index
        return extra


# ================================
# 📤 ПУБЛІЧНИЙ API
# ================================
__all__ = [
    "AppError",
    "NetworkRequestError",
    "ParsingError",
]
