# 🚀 kindle_search/__main__.py
"""
🚀 Entry-point HTTP-сервісу пошуку книг.

🔹 Мапить CLI-флаги (`--host=`, `--port=`, `--log-level=`, `--json-logs`) на ENV.
🔹 Піднімає логування з `ConfigService` та запускає Flask-сервер.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging															# 🧾 Логування подій запуску
import os																# 🌍 Робота з ENV
import sys																# 🧵 CLI-аргументи
from typing import List, Optional										# 🧮 Анотації

# 🧩 Внутрішні модулі проєкту
from kindle_search.api.routes import create_app						# 🏭 Flask-застосунок
from kindle_search.config.config_service import ConfigService			# ⚙️ Конфігурація
from kindle_search.shared.utils.logger import LOG_NAME, init_logging_from_config	# 🪵 Логування

logger = logging.getLogger(LOG_NAME)									# 🧾 Кореневий логер застосунку


# ================================
# ⚙️ CLI-ФЛАГИ → ENV
# ================================
def _apply_cli_flags_to_env(args: List[str]) -> None:
    """Мапить CLI-прапорці на ENV, які читає `ConfigService`."""

    def value(prefix: str) -> Optional[str]:
        for arg in args:
            if arg.startswith(prefix + "="):
                return arg.split("=", 1)[1]
        return None

    mapping = {
        "--host": "KINDLE_SEARCH_HOST",
        "--port": "KINDLE_SEARCH_PORT",
        "--log-level": "KINDLE_SEARCH_LOG_LEVEL",
        "--log-file": "KINDLE_SEARCH_LOG_FILE",
    }
    for flag, env_key in mapping.items():
        flag_value = value(flag)
        if flag_value:
            os.environ[env_key] = flag_value

    if "--json-logs" in args:
        os.environ["KINDLE_SEARCH_LOG_JSON"] = "true"


def _as_bool(raw: object) -> bool:
    if isinstance(raw, str):
        return raw.strip().lower() in {"1", "true", "yes", "on"}
    return bool(raw)


# ================================
# 🚀 ENTRYPOINT
# ================================
def main(argv: Optional[List[str]] = None) -> None:
    """Основна точка входу: конфіг → логування → Flask."""
    _apply_cli_flags_to_env(list(sys.argv[1:] if argv is None else argv))

    config = ConfigService()
    logging_section = config.section("logging")
    logging_section["json"] = _as_bool(logging_section.get("json", False))
    init_logging_from_config(logging_section)

    host = str(config.get("server.host", "0.0.0.0"))
    port = int(config.get("server.port", 3000))

    app = create_app()
    logger.info("🚀 Server running on http://%s:%d", host, port)
    app.run(host=host, port=port)
    logger.info("👋 Server stopped")


if __name__ == "__main__":
    main()
