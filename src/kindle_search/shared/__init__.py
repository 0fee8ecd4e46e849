# 🧰 kindle_search/shared/__init__.py
"""🧰 Спільні утиліти застосунку."""
