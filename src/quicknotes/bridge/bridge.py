"""Text-in/text-out bridge between a display layer and the note store."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from quicknotes.bridge.schemas import (
    EMPTY_LIST,
    SUCCESS,
    BridgeResult,
    failure,
    notes_payload,
    stats_payload,
)
from quicknotes.core.display import DisplayConfig
from quicknotes.storage.errors import StorageError
from quicknotes.storage.note_store import NoteStore

logger = logging.getLogger(__name__)

Renderer = Callable[[str], None]


class NoteBridge:
    """Expose ``NoteStore`` to a display layer.

    Mutations return a ``BridgeResult`` and, when they succeed, push the full
    note list to the renderer. Query methods return JSON strings.
    """

    EXPOSED: dict[str, str] = {
        "addData": "add_data",
        "updateData": "update_data",
        "deleteData": "delete_data",
        "getAllData": "get_all_data",
        "searchData": "search_data",
        "getStats": "get_stats",
        "toggleTheme": "toggle_theme",
    }

    def __init__(
        self,
        store: NoteStore,
        display: DisplayConfig,
        renderer: Renderer | None = None,
    ) -> None:
        self._store = store
        self._display = display
        self._renderer = renderer

    @property
    def display(self) -> DisplayConfig:
        return self._display

    def set_renderer(self, renderer: Renderer | None) -> None:
        self._renderer = renderer

    def load(self) -> None:
        self._render()

    def add_data(self, text: str) -> BridgeResult:
        return self._mutate("add", lambda: self._store.insert(text))

    def update_data(self, note_id: int, text: str) -> BridgeResult:
        return self._mutate("update", lambda: self._store.update(note_id, text))

    def delete_data(self, note_id: int) -> BridgeResult:
        return self._mutate("delete", lambda: self._store.delete(note_id))

    def get_all_data(self) -> str:
        try:
            return notes_payload(self._store.list_all())
        except StorageError:
            logger.exception("Listing notes failed")
            return EMPTY_LIST

    def search_data(self, query: str) -> str:
        try:
            return notes_payload(self._store.search(query))
        except StorageError:
            logger.exception("Searching notes for %r failed", query)
            return EMPTY_LIST

    def get_stats(self) -> str:
        try:
            return stats_payload(self._store.count(), self._store.count_today())
        except StorageError:
            logger.exception("Reading note stats failed")
            return stats_payload(0, 0)

    def toggle_theme(self, is_dark: bool) -> None:
        self._display.set_dark(is_dark)

    def invoke(self, name: str, *args: Any) -> Any:
        """Call a bridge method by its display-layer name, e.g. ``addData``."""
        method = getattr(self, self.EXPOSED[name])
        result = method(*args)
        if isinstance(result, BridgeResult):
            return result.ok
        return result

    def _mutate(self, action: str, operation: Callable[[], int]) -> BridgeResult:
        try:
            affected = operation()
        except StorageError as exc:
            logger.exception("Note %s failed", action)
            return failure(exc)
        logger.debug("Note %s done (%s)", action, affected)
        self._render()
        return SUCCESS

    def _render(self) -> None:
        if self._renderer is None:
            return
        self._renderer(self.get_all_data())
