# 📈 kindle_search/shared/metrics.py
"""
📈 Prometheus-лічильники пошуку.

🔹 `FETCH_OK_TOTAL` / `FETCH_FAILURE_TOTAL` — результати завантаження сторінки (за `ReasonCode`).
🔹 `BLOCKS_EMITTED_TOTAL` / `BLOCKS_SKIPPED_TOTAL` — результати обробки блоків (за `ExtractionFailure`).
🔹 Без `prometheus_client` хелпери стають no-op; збій метрик не ламає пайплайн.
"""

from __future__ import annotations

try:																	# 📈 Опційні метрики Prometheus
    from prometheus_client import Counter								# type: ignore
except Exception:														# pragma: no cover
    Counter = None														# type: ignore

# 🧩 Внутрішні модулі проєкту
from kindle_search.shared.utils.logger import get_logger				# 🏷️ Логер із префіксом застосунку

logger = get_logger("metrics")											# 🧾 Модульний логер


# ================================
# 📊 ЛІЧИЛЬНИКИ
# ================================
if Counter:															# ✅ Ініціалізуємо лічильники, якщо доступні
    FETCH_OK_TOTAL = Counter(
        "kindle_search_fetch_ok_total",
        "Успішні завантаження сторінки пошуку",
    )
    FETCH_FAILURE_TOTAL = Counter(
        "kindle_search_fetch_failure_total",
        "Збої завантаження сторінки пошуку за причинами",
        ["reason"],
    )
    BLOCKS_EMITTED_TOTAL = Counter(
        "kindle_search_blocks_emitted_total",
        "Блоки результатів, що дали запис",
    )
    BLOCKS_SKIPPED_TOTAL = Counter(
        "kindle_search_blocks_skipped_total",
        "Пропущені блоки результатів за причинами",
        ["reason"],
    )
else:
    FETCH_OK_TOTAL = None												# type: ignore
    FETCH_FAILURE_TOTAL = None											# type: ignore
    BLOCKS_EMITTED_TOTAL = None										# type: ignore
    BLOCKS_SKIPPED_TOTAL = None										# type: ignore


# ================================
# ➕ ХЕЛПЕРИ ІНКРЕМЕНТУ
# ================================
def _inc(counter, **labels: str) -> None:
    if not counter:													# 🚫 Немає метрик — виходимо
        return
    try:
        (counter.labels(**labels) if labels else counter).inc()
    except Exception:
        logger.debug("⚠️ Не вдалося оновити метрику", exc_info=True)


def inc_fetch_ok() -> None:
    _inc(FETCH_OK_TOTAL)


def inc_fetch_failure(reason: str) -> None:
    """🔢 Збій фетчу; `reason` — значення `ReasonCode`."""
    _inc(FETCH_FAILURE_TOTAL, reason=reason)


def inc_block_emitted() -> None:
    _inc(BLOCKS_EMITTED_TOTAL)


def inc_block_skipped(reason: str) -> None:
    """🔢 Пропущений блок; `reason` — значення `ExtractionFailure`."""
    _inc(BLOCKS_SKIPPED_TOTAL, reason=reason)


__all__ = [
    "BLOCKS_EMITTED_TOTAL",
    "BLOCKS_SKIPPED_TOTAL",
    "FETCH_FAILURE_TOTAL",
    "FETCH_OK_TOTAL",
    "inc_block_emitted",
    "inc_block_skipped",
    "inc_fetch_failure",
    "inc_fetch_ok",
]
