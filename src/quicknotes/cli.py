"""Typer CLI for Quick Notes."""

from __future__ import annotations

import contextlib
import json
from collections.abc import Iterator
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from quicknotes.app.main import run_app
from quicknotes.bridge.bridge import NoteBridge
from quicknotes.bridge.schemas import BridgeResult
from quicknotes.core.display import DisplayConfig
from quicknotes.core.logs import configure_logging
from quicknotes.core.settings import load_settings
from quicknotes.storage.db import db_path, initialize_db
from quicknotes.storage.note_store import NoteStore

app = typer.Typer(help="Quick Notes CLI")
console = Console()


notes_app = typer.Typer(help="Notes operations")
config_app = typer.Typer(help="Configuration")
db_app = typer.Typer(help="Database operations")


@app.command()
def tui() -> None:
    """Run the Textual TUI."""
    run_app()


@notes_app.command("list")
def notes_list() -> None:
    with _bridge() as bridge:
        _print_notes(bridge.get_all_data())


@notes_app.command("add")
def notes_add(text: str) -> None:
    text = _require_text(text)
    with _bridge() as bridge:
        _report(bridge.add_data(text), "note added")


@notes_app.command("update")
def notes_update(note_id: int, text: str) -> None:
    text = _require_text(text)
    with _bridge() as bridge:
        _report(bridge.update_data(note_id, text), f"note {note_id} updated")


@notes_app.command("delete")
def notes_delete(note_id: int) -> None:
    with _bridge() as bridge:
        _report(bridge.delete_data(note_id), f"note {note_id} deleted")


@notes_app.command("search")
def notes_search(query: str) -> None:
    with _bridge() as bridge:
        _print_notes(bridge.search_data(query))


@notes_app.command("stats")
def notes_stats() -> None:
    with _bridge() as bridge:
        stats = json.loads(bridge.get_stats())
    console.print(f"total={stats['total']} today={stats['today']}")


@app.command("export")
def export_notes(out_path: Path | None = typer.Option(None, "--out")) -> None:
    with _bridge() as bridge:
        payload = bridge.get_all_data()
    output = json.dumps(json.loads(payload), indent=2, ensure_ascii=False)
    if out_path is None:
        console.print(output, markup=False, highlight=False, soft_wrap=True)
        return
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(output, encoding="utf-8")
    console.print(f"exported notes to {out_path}")


@db_app.command("init")
def db_init() -> None:
    settings = load_settings()
    path = initialize_db(settings)
    console.print(f"database initialized at {path}")


@config_app.command("show")
def config_show() -> None:
    settings = load_settings()
    console.print(f"data_dir={settings.data_dir}")
    console.print(f"db_name={settings.db_name}")
    console.print(f"dark_mode={settings.dark_mode}")
    console.print(f"log_level={settings.log_level}")


app.add_typer(notes_app, name="notes")
app.add_typer(config_app, name="config")
app.add_typer(db_app, name="db")


@contextlib.contextmanager
def _bridge() -> Iterator[NoteBridge]:
    settings = load_settings()
    configure_logging(settings.log_level)
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    with NoteStore(db_path(settings)) as store:
        yield NoteBridge(store, DisplayConfig(dark=settings.dark_mode))


def _require_text(text: str) -> str:
    text = text.strip()
    if not text:
        raise typer.BadParameter("note text must not be blank")
    return text


def _report(result: BridgeResult, message: str) -> None:
    if not result:
        console.print(f"[red]{escape(result.error or 'operation failed')}[/red]")
        raise typer.Exit(code=1)
    console.print(message)


def _print_notes(payload: str) -> None:
    for note in json.loads(payload):
        line = f"{note['id']} | {note['date']} | {note['text']}"
        console.print(line, markup=False, highlight=False, soft_wrap=True)
