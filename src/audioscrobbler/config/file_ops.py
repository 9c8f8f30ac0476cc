"""Utility helpers for configuration file persistence."""

from __future__ import annotations

import os
from pathlib import Path


def write_text_file(path: Path, content: str, *, private: bool = False) -> None:
    """Persist textual content ensuring parent directories exist.

    Args:
        path: Target file.
        content: Text to write as UTF-8.
        private: Restrict the file to its owner; used for credential files.
    """

    path.parent.mkdir(parents=True, exist_ok=True)
    _ = path.write_text(content, encoding="utf-8")
    if private and os.name == "posix":
        path.chmod(0o600)


__all__ = ["write_text_file"]
