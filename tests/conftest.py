# tests/conftest.py
import os
import sys
from pathlib import Path

import pytest

# 1) Гасим автоподхват сторонних плагинов (pytest-twisted и пр.)
os.environ.setdefault("PYTEST_DISABLE_PLUGIN_AUTOLOAD", "1")

# 2) Добавляем src в sys.path, чтобы работал импорт "kindle_search.…"
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

# 3) pytest-asyncio подключаем явно: автоподхват может быть выключен
pytest_plugins = ("pytest_asyncio",)


@pytest.fixture(autouse=True)
def _reset_config_singleton():
    """Каждый тест получает свежий ConfigService."""
    from kindle_search.config.config_service import ConfigService

    ConfigService.reset()
    yield
    ConfigService.reset()
