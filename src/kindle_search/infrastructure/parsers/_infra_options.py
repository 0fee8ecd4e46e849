# 🧾 kindle_search/infrastructure/parsers/_infra_options.py
"""
🧾 Налаштування інфраструктурного шару пошуку та парсингу.

🔹 Визначає іммутабельні опції (origin, категорія, таймаути, заголовки, denylist трекінг-параметрів).
🔹 Підтримує зчитування з ENV, з `ConfigService` та мердж оверрайдів.
🔹 Експортує дефолтний обʼєкт `DEFAULT_SCRAPER_OPTIONS` для швидкого використання.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging	# 🧾 Логування ініціалізації та валідації
import os	# 🌱 Зчитування ENV
from dataclasses import dataclass, fields	# 🧱 Dataclass для опцій
from typing import TYPE_CHECKING, Any, Dict, Literal, Mapping, Optional, Tuple	# 🧰 Типи для статичного аналізу

# 🧩 Внутрішні модулі проєкту
from kindle_search.shared.utils.logger import LOG_NAME	# 🏷️ Базове імʼя логера

if TYPE_CHECKING:  # pragma: no cover
    from kindle_search.config.config_service import ConfigService

# ================================
# 🧾 ЛОГЕР ТА КОНСТАНТИ
# ================================
logger = logging.getLogger(f"{LOG_NAME}.parsers.infra_options")	# 🧾 Модульний логер

_ALLOWED_PARSERS = {"lxml", "html.parser", "html5lib"}	# 🥣 Підтримувані бекенди BeautifulSoup

DEFAULT_TRACKING_PARAMS: Tuple[str, ...] = (
    "ref",
    "ref_",
    "dib",
    "dib_tag",
    "qid",
    "sr",
    "sprefix",
    "keywords",
    "s",
    "crid",
    "pd_rd_i",
    "pd_rd_w",
    "pd_rd_r",
    "pd_rd_wg",
    "pf_rd_p",
    "pf_rd_r",
    "pf_rd_s",
    "pf_rd_t",
    "pf_rd_i",
    "tag",
    "linkCode",
    "linkId",
    "creative",
    "creativeASIN",
    "ascsubtag",
    "content-id",
)	# 🧹 Реферальні, сесійні, рангові та афіліатні ключі

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/93.0.4577.82 Safari/537.36"
)	# 🕵️ Браузерний User-Agent
DEFAULT_ACCEPT = (
    "text/html,application/xhtml+xml,application/xml;q=0.9,"
    "image/avif,image/webp,image/apng,*/*;q=0.8"
)	# 📨 Accept для HTML-сторінок


# ================================
# 🛠️ ХЕЛПЕРИ КОНВЕРСІЙ
# ================================
def _to_float(val: Optional[str], default_val: float) -> float:
    """🔢 Конвертує рядок у float із fallback."""
    if val is None:
        return default_val
    try:
        return float(val)
    except ValueError:
        logger.warning("⚠️ Неможливо перетворити '%s' у float → fallback=%s.", val, default_val)
        return default_val


def _to_tuple(value: Any) -> Tuple[str, ...]:
    """📚 Рядок «a,b,c» або послідовність → кортеж непорожніх рядків."""
    if value is None:
        return tuple()
    if isinstance(value, str):
        value = value.split(",")
    return tuple(str(item).strip() for item in value if str(item).strip())


# ================================
# 🧱 МОДЕЛЬ ОПЦІЙ
# ================================
@dataclass(frozen=True, slots=True)
class ScraperOptions:
    """🧱 Іммутабельні параметри фетчера та пайплайна витягування."""

    base_url: str = "https://www.amazon.com"	# 🌐 Origin для відносних посилань
    search_path: str = "/s"	# 🔎 Шлях сторінки пошуку
    category: str = "digital-text"	# 📚 Обмеження видачі (Kindle eBooks)
    html_parser: Literal["lxml", "html.parser", "html5lib"] = "lxml"	# 🥣 Парсер DOM
    request_timeout_sec: float = 15.0	# ⏱️ Таймаут одного HTTP-запиту
    overall_timeout_sec: float = 20.0	# ⏱️ Загальний ліміт на фетч
    user_agent: str = DEFAULT_USER_AGENT	# 🕵️ Ідентифікація клієнта
    accept: str = DEFAULT_ACCEPT	# 📨 Accept
    accept_language: str = "en-US,en;q=0.9"	# 🌍 Accept-Language
    tracking_params: Tuple[str, ...] = DEFAULT_TRACKING_PARAMS	# 🧹 Denylist query-ключів
    subscription_badge_alt: str = "Kindle Unlimited"	# 🏷️ alt бейджа підписки
    subscription_phrase: str = "Free with Kindle Unlimited membership"	# 🧾 Текст «безкоштовно з підпискою»

    def __post_init__(self) -> None:
        """🛡️ Валідує інваріанти одразу після створення."""
        if self.html_parser not in _ALLOWED_PARSERS:
            raise ValueError(f"html_parser must be one of {_ALLOWED_PARSERS}, got: {self.html_parser!r}")
        if not self.base_url.startswith(("http://", "https://")):
            raise ValueError(f"base_url must be absolute http(s), got: {self.base_url!r}")
        if not self.search_path.startswith("/"):
            raise ValueError("search_path must start with '/'")
        if self.request_timeout_sec <= 0:
            raise ValueError("request_timeout_sec must be > 0")
        if self.overall_timeout_sec < self.request_timeout_sec:
            raise ValueError("overall_timeout_sec must be >= request_timeout_sec")
        object.__setattr__(self, "base_url", self.base_url.rstrip("/"))	# 🔐 Origin без хвостового «/»
        object.__setattr__(self, "tracking_params", _to_tuple(self.tracking_params))

    # ================================
    # 🧱 КОНСТРУКТОРИ
    # ================================
    @classmethod
    def default(cls) -> "ScraperOptions":
        """🧾 Повертає дефолтний набір опцій."""
        return cls()

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "ScraperOptions":
        """🧾 Складання опцій із словника (зайві ключі ігноруються)."""
        if not data:
            return cls.default()
        keys = {f.name for f in fields(cls)}	# 🗂️ Дозволені ключі
        kwargs: Dict[str, Any] = {key: data[key] for key in keys if data.get(key) is not None}
        if "tracking_params" in kwargs:
            kwargs["tracking_params"] = _to_tuple(kwargs["tracking_params"])
        logger.debug("🧾 ScraperOptions.from_dict з ключами: %s", sorted(kwargs))
        return cls(**kwargs)

    @classmethod
    def from_config(cls, config: "ConfigService", section: str = "scraper") -> "ScraperOptions":
        """⚙️ Будує опції з розділу `scraper` у ConfigService."""
        return cls.from_dict(config.section(section))

    @classmethod
    def from_env(cls, prefix: str = "SCRAPER_", base: Optional["ScraperOptions"] = None) -> "ScraperOptions":
        """🌱 Накладає ENV-змінні на `base` (або дефолти)."""
        defaults = base or cls.default()
        overrides: Dict[str, Any] = {
            "base_url": os.getenv(f"{prefix}BASE_URL"),
            "search_path": os.getenv(f"{prefix}SEARCH_PATH"),
            "category": os.getenv(f"{prefix}CATEGORY"),
            "html_parser": os.getenv(f"{prefix}HTML_PARSER"),
            "request_timeout_sec": _to_float(os.getenv(f"{prefix}REQUEST_TIMEOUT_SEC"), defaults.request_timeout_sec),
            "overall_timeout_sec": _to_float(os.getenv(f"{prefix}OVERALL_TIMEOUT_SEC"), defaults.overall_timeout_sec),
            "user_agent": os.getenv(f"{prefix}USER_AGENT"),
            "accept_language": os.getenv(f"{prefix}ACCEPT_LANGUAGE"),
            "tracking_params": os.getenv(f"{prefix}TRACKING_PARAMS"),
        }
        logger.info("🌱 ScraperOptions зібрано з ENV (prefix=%s).", prefix)
        return defaults.merge(**overrides)

    # ================================
    # 🧰 УТИЛІТИ ЕКЗЕМПЛЯРА
    # ================================
    def merge(self, **overrides: Any) -> "ScraperOptions":
        """🔀 Повертає новий екземпляр із підмінними полями (immutability)."""
        base = self.to_kwargs()
        base.update({key: value for key, value in overrides.items() if value is not None})
        return ScraperOptions.from_dict(base)

    def to_kwargs(self) -> Dict[str, Any]:
        """📦 Представляє опції як dict для передавання/логування."""
        return {f.name: getattr(self, f.name) for f in fields(self)}

    def headers(self) -> Dict[str, str]:
        """📨 Набір заголовків для HTTP-клієнта."""
        return {
            "User-Agent": self.user_agent,
            "Accept": self.accept,
            "Accept-Language": self.accept_language,
        }

    @property
    def search_url(self) -> str:
        """🔎 Абсолютний URL сторінки пошуку без query."""
        return f"{self.base_url}{self.search_path}"


# ================================
# 📦 ГЛОБАЛЬНИЙ ДЕФОЛТ
# ================================
DEFAULT_SCRAPER_OPTIONS = ScraperOptions.default()	# 📦 Базовий екземпляр

__all__ = ["ScraperOptions", "DEFAULT_SCRAPER_OPTIONS", "DEFAULT_TRACKING_PARAMS"]
