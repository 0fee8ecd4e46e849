# 🧮 kindle_search/errors/reason_codes.py
"""
🧮 Перелік причин збоїв, які бачить викликач або діагностика.
"""

from __future__ import annotations

# 🔠 Системні імпорти
from enum import Enum, unique											# 🏷️ Стабільні коди причин


@unique
class ReasonCode(str, Enum):
    """🧮 Коди причин для FetchFailure та HTTP-відповідей."""

    HTTP_TIMEOUT = "http_timeout"										# ⏱️ Таймаут запиту
    HTTP_CONNECTION = "http_connection"								# 🌐 Транспортна помилка
    HTTP_STATUS = "http_status"										# 🔢 Відповідь не 2xx
    EMPTY_BODY = "empty_body"											# 🕳️ Порожнє тіло відповіді
    NO_RESULTS = "no_results"											# 📭 Документ без результатів
    INTERNAL = "internal"												# ❓ Резервний код

    def __str__(self) -> str:
        return self.value


__all__ = ["ReasonCode"]
