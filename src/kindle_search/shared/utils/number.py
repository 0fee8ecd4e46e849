# 💰 kindle_search/shared/utils/number.py
"""
💰 Числові та текстові хелпери для цін.

🔹 `decimal_from_price_str` — толерантний парсинг валютного рядка у `Decimal`.
🔹 `norm_ws` — стискання пробілів у тексті DOM-вузлів.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging	# 🧾 Логування невдалих конверсій
import re	# 🧵 Очищення рядків
from decimal import Decimal, InvalidOperation	# 💵 Грошові значення
from typing import Optional	# 🧰 Типізація

# 🧩 Внутрішні модулі проєкту
from .logger import LOG_NAME	# 🏷️ Базове імʼя логера

logger = logging.getLogger(f"{LOG_NAME}.utils.number")	# 🧾 Модульний логер

_NON_NUMERIC_RE = re.compile(r"[^0-9.]")	# ✂️ Усе, крім цифр і крапки
_WS_RE = re.compile(r"\s+")	# 🧹 Послідовності пробілів


def norm_ws(text: Optional[str]) -> str:
    """Нормалізує пробіли у переданому рядку."""
    if not text:
        return ""
    return _WS_RE.sub(" ", text).strip()


def decimal_from_price_str(raw: Optional[str]) -> Optional[Decimal]:
    """
    Прибирає символи валюти та розділювачі груп і повертає `Decimal`.

    Порожній або некоректний рядок (``""``, ``"."``, ``"1.2.3"``) → ``None``;
    виняток назовні не виходить.
    """
    cleaned = _NON_NUMERIC_RE.sub("", raw or "")	# 🧼 Лишаємо тільки цифри та крапку
    if not cleaned:
        return None
    try:
        value = Decimal(cleaned)
    except InvalidOperation:
        logger.debug("🐛 Не вдалося розпарсити ціну: %r", raw)
        return None
    if not value.is_finite():	# 🚫 NaN/Infinity вважаємо відсутньою ціною
        return None
    return value
