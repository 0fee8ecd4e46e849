# 🔗 kindle_search/shared/utils/url_parser_service.py
"""
🔗 url_parser_service.py — Єдиний сервіс для побудови та канонікалізації URL.

🔹 Клас `UrlParserService`:
- Будує URL сторінки пошуку з вільного текстового запиту.
- Кваліфікує відносні посилання базовим origin.
- Прибирає трекінг-параметри з query, не чіпаючи решту пар.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging                                             # 🧾 Логування збоїв канонікалізації
from typing import Any, FrozenSet, Iterable, Optional      # 🧰 Типізація
from urllib.parse import quote_plus, unquote_plus, urlsplit, urlunsplit  # 🌐 Парсинг URL

# 🧩 Внутрішні модулі проєкту
from .logger import LOG_NAME                               # 🏷️ Базове імʼя логера

logger = logging.getLogger(f"{LOG_NAME}.utils.url_parser")  # 🧾 Модульний логер


# ================================
# 🏛️ КЛАС СЕРВІСУ РОЗБОРУ URL
# ================================
class UrlParserService:
    """
    ⚙️ Інструменти для роботи з URL маркетплейсу.
    """

    def __init__(
        self,
        base_url: str,
        tracking_params: Iterable[str] = (),
        *,
        search_path: str = "/s",
        category: Optional[str] = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")                                           # 🌐 Origin без «/»
        self._denylist: FrozenSet[str] = frozenset(tracking_params)                     # 🧹 Ключі для видалення
        self._search_path = search_path                                                 # 🔎 Шлях пошуку
        self._category = category                                                       # 📚 Фіксована категорія

    @classmethod
    def from_options(cls, options: Any) -> "UrlParserService":
        """🏗️ Створює сервіс з `ScraperOptions`."""
        return cls(
            options.base_url,
            options.tracking_params,
            search_path=options.search_path,
            category=options.category,
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    # ================================
    # 🔎 ПОШУК
    # ================================

    @staticmethod
    def fold_query(query: str) -> str:
        """🔡 Стискає пробіли та знижує регістр запиту."""
        return " ".join((query or "").split()).lower()

    def build_search_url(self, query: str) -> str:
        """
        🏗️ Будує абсолютний URL сторінки пошуку.

        Raises:
            ValueError: Якщо запит порожній після нормалізації.
        """
        folded = self.fold_query(query)
        if not folded:
            raise ValueError("Пошуковий запит не може бути порожнім.")
        url = f"{self._base_url}{self._search_path}?k={quote_plus(folded)}"            # ➕ Пробіли → «+»
        if self._category:
            url += f"&i={quote_plus(self._category)}"                                   # 📚 Обмеження категорії
        return url

    # ================================
    # 🔗 ПОСИЛАННЯ НА ТОВАР
    # ================================

    def qualify(self, href: Optional[str]) -> Optional[str]:
        """
        🌐 «/…» → origin + href, «http…» → як є, інше → None.
        """
        cleaned = (href or "").strip()
        if cleaned.startswith("/"):
            return f"{self._base_url}{cleaned}"
        if cleaned.startswith("http"):
            return cleaned
        if cleaned:
            logger.debug("🚫 Невалідне посилання: %r", cleaned)
        return None

    def strip_tracking(self, url: str) -> str:
        """
        🧹 Видаляє трекінг-параметри та збирає origin + path + query (+ fragment).

        Raises:
            ValueError: Якщо URL не розбирається або не має схеми/хоста.
        """
        parts = urlsplit(url)
        _ = parts.port                                                                  # 🔍 Некоректний порт → ValueError
        if not parts.scheme or not parts.netloc:
            raise ValueError(f"URL без схеми або хоста: {url!r}")
        kept = [
            pair
            for pair in parts.query.split("&")
            if pair and unquote_plus(pair.split("=", 1)[0]) not in self._denylist
        ]                                                                               # ✅ Решта пар байт-у-байт
        return urlunsplit((parts.scheme, parts.netloc, parts.path, "&".join(kept), parts.fragment))

    def canonicalize(self, href: Optional[str]) -> Optional[str]:
        """
        🔗 Кваліфікує та очищає посилання.

        Збій розбору URL не відкидає посилання: повертається кваліфікований сирий варіант.
        """
        qualified = self.qualify(href)
        if qualified is None:
            return None
        try:
            return self.strip_tracking(qualified)
        except ValueError as exc:
            logger.warning("⚠️ Не вдалося канонікалізувати URL %r: %s", qualified, exc)
            return qualified
