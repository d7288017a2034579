"""Notes repository."""

from __future__ import annotations

import sqlite3
from dataclasses import dataclass


@dataclass(frozen=True)
class Note:
    id: int
    text: str
    date: str

    def to_dict(self) -> dict[str, int | str]:
        return {"id": self.id, "text": self.text, "date": self.date}


def insert_note(conn: sqlite3.Connection, text: str) -> int:
    cursor = conn.execute(
        "INSERT INTO data (text, date) VALUES (?, datetime('now'))",
        (text,),
    )
    conn.commit()
    return int(cursor.lastrowid)


def update_note(conn: sqlite3.Connection, note_id: int, text: str) -> int:
    cursor = conn.execute(
        "UPDATE data SET text = ? WHERE id = ?",
        (text, note_id),
    )
    conn.commit()
    return cursor.rowcount


def delete_note(conn: sqlite3.Connection, note_id: int) -> int:
    cursor = conn.execute("DELETE FROM data WHERE id = ?", (note_id,))
    conn.commit()
    return cursor.rowcount


def get_note(conn: sqlite3.Connection, note_id: int) -> Note | None:
    row = conn.execute(
        "SELECT id, text, date FROM data WHERE id = ?",
        (note_id,),
    ).fetchone()
    if row is None:
        return None
    return _row_to_note(row)


def list_notes(conn: sqlite3.Connection) -> list[Note]:
    rows = conn.execute("SELECT id, text, date FROM data ORDER BY id DESC").fetchall()
    return [_row_to_note(row) for row in rows]


def search_notes(conn: sqlite3.Connection, query: str) -> list[Note]:
    like_query = f"%{_escape_like(query)}%"
    rows = conn.execute(
        "SELECT id, text, date FROM data WHERE text LIKE ? ESCAPE '\\' "
        "ORDER BY id DESC",
        (like_query,),
    ).fetchall()
    return [_row_to_note(row) for row in rows]


def count_notes(conn: sqlite3.Connection) -> int:
    return conn.execute("SELECT COUNT(*) FROM data").fetchone()[0]


def count_notes_today(conn: sqlite3.Connection) -> int:
    return conn.execute(
        "SELECT COUNT(*) FROM data WHERE date(date) = date('now')"
    ).fetchone()[0]


def _escape_like(value: str) -> str:
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def _row_to_note(row: sqlite3.Row) -> Note:
    return Note(id=row[0], text=row[1], date=row[2])
