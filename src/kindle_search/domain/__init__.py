# 🧠 kindle_search/domain/__init__.py
"""🧠 Доменний шар: сутності, контракти та цінові правила."""
