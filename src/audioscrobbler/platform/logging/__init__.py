"""Logging facade exports.

Where: src/audioscrobbler/platform/logging/__init__.py
What: Re-export the configured logger, setup helper, and the Rich handler.
Why: Provide a single canonical import path for every module.
"""

from __future__ import annotations

from .config import DEFAULT_LOG_FILE, logger, setup_logger
from .handlers import ApiEventRichHandler

__all__ = [
    "ApiEventRichHandler",
    "DEFAULT_LOG_FILE",
    "logger",
    "setup_logger",
]
