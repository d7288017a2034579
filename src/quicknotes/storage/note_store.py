"""SQLite-backed note store."""

from __future__ import annotations

import contextlib
import sqlite3
from collections.abc import Iterator
from pathlib import Path

from quicknotes.storage.db import open_db
from quicknotes.storage.errors import StorageError
from quicknotes.storage.repos import notes as notes_repo
from quicknotes.storage.repos.notes import Note


class NoteStore:
    """Notes in one local file, behind a lazily opened connection.

    The connection is created on first use and kept until ``close``. Every
    ``sqlite3.Error`` surfaces as ``StorageError``.
    """

    def __init__(self, db_path: Path) -> None:
        self._db_path = db_path
        self._conn: sqlite3.Connection | None = None

    @property
    def db_path(self) -> Path:
        return self._db_path

    def __enter__(self) -> NoteStore:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        if self._conn is not None:
            self._conn.close()
            self._conn = None

    def insert(self, text: str) -> int:
        with self._translate_errors("insert"):
            return notes_repo.insert_note(self._connection(), text)

    def update(self, note_id: int, text: str) -> int:
        with self._translate_errors("update"):
            return notes_repo.update_note(self._connection(), note_id, text)

    def delete(self, note_id: int) -> int:
        with self._translate_errors("delete"):
            return notes_repo.delete_note(self._connection(), note_id)

    def get(self, note_id: int) -> Note | None:
        with self._translate_errors("get"):
            return notes_repo.get_note(self._connection(), note_id)

    def list_all(self) -> list[Note]:
        with self._translate_errors("list"):
            return notes_repo.list_notes(self._connection())

    def search(self, query: str) -> list[Note]:
        with self._translate_errors("search"):
            return notes_repo.search_notes(self._connection(), query)

    def count(self) -> int:
        with self._translate_errors("count"):
            return notes_repo.count_notes(self._connection())

    def count_today(self) -> int:
        with self._translate_errors("count"):
            return notes_repo.count_notes_today(self._connection())

    def _connection(self) -> sqlite3.Connection:
        if self._conn is None:
            self._conn = open_db(self._db_path)
        return self._conn

    @contextlib.contextmanager
    def _translate_errors(self, operation: str) -> Iterator[None]:
        try:
            yield
        except sqlite3.Error as exc:
            if self._conn is not None and self._conn.in_transaction:
                with contextlib.suppress(sqlite3.Error):
                    self._conn.rollback()
            raise StorageError(f"Note {operation} failed: {exc}") from exc
