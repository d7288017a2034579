"""Compose the store, bridge, and TUI."""

from __future__ import annotations

from quicknotes.app.tui import run_tui
from quicknotes.bridge.bridge import NoteBridge
from quicknotes.core.display import DisplayConfig
from quicknotes.core.logs import configure_logging
from quicknotes.core.settings import load_settings
from quicknotes.storage.db import db_path
from quicknotes.storage.note_store import NoteStore


def run_app() -> None:
    settings = load_settings()
    configure_logging(settings.log_level)
    settings.data_dir.mkdir(parents=True, exist_ok=True)

    display = DisplayConfig(dark=settings.dark_mode)
    with NoteStore(db_path(settings)) as store:
        run_tui(NoteBridge(store, display))
