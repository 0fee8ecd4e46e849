# 🧩 kindle_search/domain/products/interfaces.py
"""
🧩 Контракти для отримання та розбору сторінки результатів пошуку.
"""

from __future__ import annotations

# 🔠 Системні імпорти
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, List, Optional, Union

# 🧩 Внутрішні модулі проєкту
from kindle_search.errors.reason_codes import ReasonCode
from .entities import BookProduct


# ================================
# 📚 DTO ФЕТЧУ
# ================================
@dataclass(frozen=True, slots=True)
class FetchedDocument:
    """Сира сторінка результатів пошуку."""

    url: str
    status_code: int
    html: str


@dataclass(frozen=True, slots=True)
class FetchFailure:
    """Причина, з якої сторінку не вдалося отримати."""

    reason: ReasonCode
    url: str
    status_code: Optional[int] = None
    details: Optional[str] = None

    def to_dict(self) -> Dict[str, object]:
        return {
            "reason": self.reason.value,
            "url": self.url,
            "statusCode": self.status_code,
            "details": self.details,
        }


FetchOutcome = Union[FetchedDocument, FetchFailure]


# ================================
# 🏛️ ІНТЕРФЕЙСИ
# ================================
class IDocumentFetcher(ABC):
    """Контракт для джерела сирих сторінок пошуку."""

    @abstractmethod
    async def fetch(self, query: str) -> FetchOutcome:
        """Завантажує сторінку пошуку для запиту або повертає причину збою."""


class ISearchResultsParser(ABC):
    """Контракт для пайплайна витягування записів із документа."""

    @abstractmethod
    def parse(self, html: str) -> List[BookProduct]:
        """Повертає впорядкований список записів (можливо порожній)."""
