"""Settings loader for Quick Notes."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv


@dataclass(frozen=True)
class Settings:
    data_dir: Path
    db_name: str
    dark_mode: bool
    log_level: str


def load_settings() -> Settings:
    load_dotenv(find_dotenv(usecwd=True))
    data_dir = Path(
        os.environ.get("QUICKNOTES_DATA_DIR", "~/.quicknotes")
    ).expanduser()
    db_name = os.environ.get("QUICKNOTES_DB_NAME", "app.db").strip()
    if not db_name:
        raise ValueError("QUICKNOTES_DB_NAME must not be empty")
    dark_mode = _parse_bool(
        os.environ.get("QUICKNOTES_DARK_MODE", "false"), "QUICKNOTES_DARK_MODE"
    )
    log_level = _parse_log_level(
        os.environ.get("QUICKNOTES_LOG_LEVEL", "WARNING"), "QUICKNOTES_LOG_LEVEL"
    )

    return Settings(
        data_dir=data_dir,
        db_name=db_name,
        dark_mode=dark_mode,
        log_level=log_level,
    )


def _parse_bool(value: str, name: str) -> bool:
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    raise ValueError(f"Invalid boolean for {name}: {value}")


def _parse_log_level(value: str, name: str) -> str:
    normalized = value.strip().upper()
    if normalized not in logging.getLevelNamesMapping():
        raise ValueError(f"Invalid log level for {name}: {value}")
    return normalized
