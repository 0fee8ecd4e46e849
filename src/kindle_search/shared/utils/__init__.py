# 🧰 kindle_search/shared/utils/__init__.py
"""
🧰 Пакет спільних утиліт: логування та текстові/числові хелпери.
"""

from __future__ import annotations

# 🔠 Логування
from .logger import (
    LOG_NAME,
    JsonFormatter,
    get_logger,
    init_logging,
    init_logging_from_config,
)

# 💰 Числові утиліти
from .number import decimal_from_price_str, norm_ws

# 🌐 URL
from .url_parser_service import UrlParserService

# ================================
# 📦 ЕКСПОРТ ПАКЕТУ
# ================================
__all__ = [
    "LOG_NAME",
    "JsonFormatter",
    "get_logger",
    "init_logging",
    "init_logging_from_config",
    "decimal_from_price_str",
    "norm_ws",
    "UrlParserService",
]
