# 🛰️ kindle_search/api/__init__.py
"""🛰️ HTTP-поверхня (Flask)."""

from __future__ import annotations

from .routes import create_app, register_routes

__all__ = ["create_app", "register_routes"]
