# -*- coding: utf-8 -*-
"""Reading and writing config.json."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from ..constant import CONFIG_FILE, STORE_DIR, WORKING_DIR
from .config import Config

logger = logging.getLogger(__name__)


def get_config_path() -> Path:
    """Return the default config.json path."""
    return WORKING_DIR / CONFIG_FILE


def load_config(path: Optional[Path] = None) -> Config:
    """Load config.json; a missing or unreadable file yields defaults."""
    if path is None:
        path = get_config_path()
    if not path.is_file():
        return Config()
    try:
        with open(path, "r", encoding="utf-8") as fh:
            raw = json.load(fh)
        return Config.model_validate(raw)
    except (json.JSONDecodeError, ValidationError) as exc:
        logger.warning("Ignoring invalid config %s: %s", path, exc)
        return Config()


def save_config(config: Config, path: Optional[Path] = None) -> None:
    """Write config.json."""
    if path is None:
        path = get_config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as fh:
        json.dump(config.model_dump(mode="json"), fh, indent=2)


def get_store_dir(config: Config) -> Path:
    """Resolve the manifest store directory from *config*."""
    if config.store_dir:
        return Path(config.store_dir).expanduser().resolve()
    return STORE_DIR
