# 🏷️ kindle_search/infrastructure/parsers/extractors/title.py
"""
🏷️ TitleMixin — назва книги з заголовка блоку результату.

🔹 Первинний селектор — `data-cy="title-recipe"`, далі альтернативні.
🔹 Відсутність назви не є помилкою: повертається None.
"""

from __future__ import annotations

# 🌐 Зовнішні бібліотеки
from bs4.element import Tag				# 🧱 Ноди BeautifulSoup

# 🔠 Системні імпорти
from typing import Optional				# 🧰 Типізація

# 🧩 Внутрішні модулі проєкту
from .base import Selectors, _first_text, logger	# 🔗 Спільні утиліти


# ================================
# 🏷️ МІКСИН НАЗВИ
# ================================
class TitleMixin:
    """🏷️ Повертає нормалізовану назву з блоку."""

    block: Tag															# 🧱 Блок результату
    _S: Selectors														# 🧷 Набір CSS-селекторів

    def extract_title(self) -> Optional[str]:
        """🏷️ Текст першого непорожнього заголовка або None."""
        title = _first_text(self.block, self._S.TITLE_LIST)
        if not title:
            logger.debug("🏷️ Назву в блоці не знайдено.")
        return title
