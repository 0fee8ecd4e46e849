# 📦 kindle_search/domain/products/entities.py
"""
📦 Доменно-чисті сутності результатів пошуку.

🔹 `BookProduct` — незмінний запис одного результату пошуку.
🔹 Працює лише з валідними типами (Decimal для цін, абсолютний http(s) URL для посилання).
🔹 Серіалізується у JSON-придатний dict із wire-іменами полів.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging                                                      # 🧾 Логування валідації
from dataclasses import dataclass                                   # 🧱 Опис сутностей
from decimal import Decimal, InvalidOperation                       # 💰 Робота з фінансовими даними
from typing import Any, Dict, Optional                              # 🧰 Типізація
from urllib.parse import urlparse                                   # 🌐 Перевірка URL

# 🧩 Внутрішні модулі проєкту
from kindle_search.shared.utils.logger import LOG_NAME              # 🏷️ Базове імʼя логера

# ================================
# 🪵 ЛОГЕР МОДУЛЯ
# ================================
logger = logging.getLogger(f"{LOG_NAME}.domain.products")           # 🧾 Модульний логер domain-level


# ================================
# 🧽 НОРМАЛІЗАЦІЙНІ ХЕЛПЕРИ
# ================================
def _is_http_url(value: str) -> bool:
    """
    Перевіряє, чи є рядок валідним http(s) URL із netloc.
    """
    try:
        parsed = urlparse(value)
    except ValueError:
        return False                                               # 🚫 Помилка парсингу → не валідно
    return parsed.scheme in {"http", "https"} and bool(parsed.netloc)


def _coerce_price(value: Any, field_name: str) -> Optional[Decimal]:
    """
    None → None; інакше Decimal ≥ 0, або ValueError.
    """
    if value is None:
        return None
    try:
        price = value if isinstance(value, Decimal) else Decimal(str(value))
    except InvalidOperation:
        raise ValueError(f"Некоректне значення {field_name}: {value!r}")
    if not price.is_finite() or price < 0:
        raise ValueError(f"{field_name} має бути невідʼємним числом, отримано {value!r}")
    return price


def _decimal_to_json(value: Optional[Decimal]) -> Optional[float]:
    """💵 Decimal → JSON-число (None зберігається)."""
    return float(value) if value is not None else None


# ================================
# 📚 ОСНОВНА СУТНІСТЬ
# ================================
@dataclass(frozen=True, slots=True)
class BookProduct:
    """
    Валідований, незмінний запис одного результату пошуку.

    Запис існує лише тоді, коли є і назва, і абсолютне посилання;
    решта полів можуть бути відсутні незалежно одне від одного.
    """

    title: str                                                      # 🏷️ Назва (обов'язкова)
    product_link: str                                               # 🔗 Канонічне посилання (обов'язкове)
    price: Optional[Decimal] = None                                 # 💰 Ціна (None → не розпізнано)
    cover_image_url: Optional[str] = None                           # 🖼️ Обкладинка
    is_subscription_included: bool = False                          # 📖 Доступно за підпискою
    subscription_buy_price: Optional[Decimal] = None                # 💵 Ціна «купити» поруч із підпискою

    def __post_init__(self) -> None:
        normalized_title = (self.title or "").strip()
        if not normalized_title:
            raise ValueError("Назва книги (title) не може бути порожньою.")
        object.__setattr__(self, "title", normalized_title)

        normalized_link = (self.product_link or "").strip()
        if not _is_http_url(normalized_link):
            raise ValueError(f"product_link must be absolute (http/https): {normalized_link!r}")
        object.__setattr__(self, "product_link", normalized_link)

        object.__setattr__(self, "price", _coerce_price(self.price, "price"))
        object.__setattr__(
            self,
            "subscription_buy_price",
            _coerce_price(self.subscription_buy_price, "subscription_buy_price"),
        )
        object.__setattr__(self, "cover_image_url", (self.cover_image_url or "").strip() or None)
        object.__setattr__(self, "is_subscription_included", bool(self.is_subscription_included))

    def to_dict(self) -> Dict[str, Any]:
        """
        Серіалізатор у JSON-придатний dict (wire-імена полів).
        """
        return {
            "title": self.title,
            "price": _decimal_to_json(self.price),
            "coverImageUrl": self.cover_image_url,
            "productLink": self.product_link,
            "isSubscriptionIncluded": self.is_subscription_included,
            "subscriptionBuyPrice": _decimal_to_json(self.subscription_buy_price),
        }


__all__ = ["BookProduct"]
