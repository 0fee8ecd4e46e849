# 🖼️ kindle_search/infrastructure/parsers/extractors/images.py
"""
🖼️ ImagesMixin — URL обкладинки з контейнера зображення блоку.
"""

from __future__ import annotations

# 🌐 Зовнішні бібліотеки
from bs4.element import Tag				# 🧱 Ноди BeautifulSoup

# 🔠 Системні імпорти
from typing import Optional				# 🧰 Типізація

# 🧩 Внутрішні модулі проєкту
from .base import Selectors, _first_attr	# 🔗 Спільні утиліти


class ImagesMixin:
    """🖼️ Обкладинка не нормалізується: лише перевірка наявності `src`."""

    block: Tag
    _S: Selectors

    def extract_cover_image(self) -> Optional[str]:
        return _first_attr(self.block, self._S.COVER_IMAGE_LIST, "src")
