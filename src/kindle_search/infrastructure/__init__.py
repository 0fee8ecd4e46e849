# 🏗️ kindle_search/infrastructure/__init__.py
"""🏗️ Інфраструктурний шар: завантаження сторінки пошуку та її розбір."""
