# ⚙️ kindle_search/config/__init__.py
"""⚙️ Доступ до статичної конфігурації (`config.yaml` + ENV)."""

from __future__ import annotations

from .config_service import DEFAULT_CONFIG_PATH, ConfigService

__all__ = ["ConfigService", "DEFAULT_CONFIG_PATH"]
