# 🚨 kindle_search/errors/__init__.py
"""🚨 Винятки, коди причин та їх мапінг."""

from __future__ import annotations

from .custom_errors import AppError, NetworkRequestError, ParsingError
from .reason_codes import ReasonCode
from .reason_mapper import map_error_to_reason

__all__ = [
    "AppError",
    "NetworkRequestError",
    "ParsingError",
    "ReasonCode",
    "map_error_to_reason",
]
