"""
Runtime locations and environment overrides.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

DATA_DIR_ENV = "INVOICE_STUDIO_DATA_DIR"
FONT_DIR_ENV = "INVOICE_STUDIO_PDF_FONT"
LOG_LEVEL_ENV = "INVOICE_STUDIO_LOG_LEVEL"


def data_dir() -> Path:
    override = os.environ.get(DATA_DIR_ENV)
    if override:
        return Path(override).expanduser()
    return Path.home() / ".invoice_studio"


def settings_path() -> Path:
    return data_dir() / "settings.json"


def counter_path() -> Path:
    return data_dir() / "counter.json"


def archive_dir() -> Path:
    return data_dir() / "archive"


def font_dir() -> Path | None:
    override = os.environ.get(FONT_DIR_ENV)
    return Path(override).expanduser() if override else None


def log_level() -> int:
    name = (os.environ.get(LOG_LEVEL_ENV) or "INFO").upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO
