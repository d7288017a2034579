"""Textual-based TUI."""

from __future__ import annotations

import json
from typing import ClassVar

from rich.text import Text
from textual.app import App, ComposeResult
from textual.widgets import DataTable, Footer, Header, Input, Static

from quicknotes.bridge.bridge import NoteBridge
from quicknotes.core.display import DisplayConfig


class NotesApp(App):
    CSS_PATH = "style.tcss"
    AUTO_FOCUS = "#note"
    TITLE = "Quick Notes"

    BINDINGS: ClassVar[list[tuple[str, str, str]]] = [
        ("f2", "edit", "Edit"),
        ("f8", "delete", "Delete"),
        ("f9", "toggle_theme", "Theme"),
        ("escape", "cancel_edit", "Cancel"),
    ]

    def __init__(self, bridge: NoteBridge) -> None:
        super().__init__()
        self._note_bridge = bridge
        self._display_config: DisplayConfig = bridge.display
        self._note_texts: dict[int, str] = {}
        self._search_query = ""
        self._editing_id: int | None = None
        self.status_text = ""

    def compose(self) -> ComposeResult:
        yield Header()
        yield Input(placeholder="Search notes...", id="search")
        yield DataTable(id="notes", cursor_type="row", zebra_stripes=True)
        yield Static("", id="status")
        yield Input(placeholder="Write a note and press enter", id="note")
        yield Footer()

    def on_mount(self) -> None:
        table = self.query_one("#notes", DataTable)
        table.add_columns("ID", "Text", "Date")
        self._sync_theme(self._display_config)
        self._display_config.subscribe(self._sync_theme)
        self._note_bridge.set_renderer(self.render_notes)
        self._note_bridge.load()

    def on_unmount(self) -> None:
        self._note_bridge.set_renderer(None)
        self._display_config.unsubscribe(self._sync_theme)

    def render_notes(self, payload: str) -> None:
        """Replace every row in the table with ``payload``, keeping the search."""
        if self._search_query:
            payload = self._note_bridge.search_data(self._search_query)
        self._fill_table(payload)

    def _fill_table(self, payload: str) -> None:
        notes = json.loads(payload)
        table = self.query_one("#notes", DataTable)
        table.clear()
        self._note_texts = {}
        for note in notes:
            self._note_texts[note["id"]] = note["text"]
            table.add_row(
                str(note["id"]), Text(note["text"]), note["date"], key=str(note["id"])
            )
        self._update_status_line()

    async def on_input_submitted(self, event: Input.Submitted) -> None:
        if event.input.id != "note":
            return
        text = event.value.strip()
        if not text:
            return

        if self._editing_id is not None:
            result = self._note_bridge.update_data(self._editing_id, text)
        else:
            result = self._note_bridge.add_data(text)
        if not result:
            self.notify(result.error or "Saving failed", severity="error")
            return
        self._editing_id = None
        event.input.value = ""

    def on_input_changed(self, event: Input.Changed) -> None:
        if event.input.id != "search":
            return
        self._search_query = event.value
        self._fill_table(self._note_bridge.search_data(self._search_query))

    def action_edit(self) -> None:
        note_id = self._highlighted_id()
        if note_id is None:
            return
        self._editing_id = note_id
        note_input = self.query_one("#note", Input)
        note_input.value = self._note_texts.get(note_id, "")
        self.set_focus(note_input)
        self._set_status(f"Editing note {note_id}, escape to cancel")

    def action_cancel_edit(self) -> None:
        if self._editing_id is None:
            return
        self._editing_id = None
        self.query_one("#note", Input).value = ""
        self._update_status_line()

    def action_delete(self) -> None:
        note_id = self._highlighted_id()
        if note_id is None:
            return
        result = self._note_bridge.delete_data(note_id)
        if not result:
            self.notify(result.error or "Delete failed", severity="error")
            return
        if self._editing_id == note_id:
            self.action_cancel_edit()

    def action_toggle_theme(self) -> None:
        self._note_bridge.toggle_theme(not self._display_config.dark)

    def _highlighted_id(self) -> int | None:
        table = self.query_one("#notes", DataTable)
        if table.row_count == 0:
            return None
        row_key = table.coordinate_to_cell_key(table.cursor_coordinate).row_key
        return int(row_key.value) if row_key.value is not None else None

    def _sync_theme(self, display: DisplayConfig) -> None:
        self.theme = display.theme

    def _update_status_line(self) -> None:
        stats = json.loads(self._note_bridge.get_stats())
        self._set_status(f"{stats['total']} notes, {stats['today']} added today")

    def _set_status(self, text: str) -> None:
        self.status_text = text
        self.query_one("#status", Static).update(text)


def run_tui(bridge: NoteBridge) -> None:
    app = NotesApp(bridge)
    app.run()
