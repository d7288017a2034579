"""SQLite database helpers."""

from __future__ import annotations

import logging
import sqlite3
from pathlib import Path

from quicknotes.core.settings import Settings
from quicknotes.storage.errors import StorageError

logger = logging.getLogger(__name__)

SCHEMA_VERSION = 1

SAMPLE_NOTES = (
    "Welcome to Quick Notes",
    "Press F2 to edit a note",
    "Notes live in a local SQLite file",
    "Search filters the list as you type",
    "Toggle the theme with F9",
)

_CREATE_TABLE = """
CREATE TABLE data (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    text TEXT NOT NULL,
    date TEXT NOT NULL
)
"""


def db_path(settings: Settings) -> Path:
    return settings.data_dir / settings.db_name


def connect(db_path_value: Path) -> sqlite3.Connection:
    conn = sqlite3.connect(db_path_value)
    conn.row_factory = sqlite3.Row
    return conn


def open_db(db_path_value: Path, version: int = SCHEMA_VERSION) -> sqlite3.Connection:
    """Connect to ``db_path_value`` and bring its schema to ``version``.

    A fresh file gets the ``data`` table plus the sample notes. An older
    version is dropped and recreated, losing every stored note.
    """
    try:
        conn = connect(db_path_value)
    except sqlite3.Error as exc:
        raise StorageError(f"Cannot open {db_path_value}: {exc}") from exc
    try:
        _migrate(conn, version)
    except sqlite3.Error as exc:
        conn.close()
        raise StorageError(f"Cannot prepare {db_path_value}: {exc}") from exc
    except StorageError:
        conn.close()
        raise
    return conn


def initialize_db(settings: Settings) -> Path:
    db_path_value = db_path(settings)
    db_path_value.parent.mkdir(parents=True, exist_ok=True)
    conn = open_db(db_path_value)
    conn.close()
    return db_path_value


def schema_version(conn: sqlite3.Connection) -> int:
    return conn.execute("PRAGMA user_version").fetchone()[0]


def _migrate(conn: sqlite3.Connection, version: int) -> None:
    current = schema_version(conn)
    if current == version:
        return
    if current > version:
        raise StorageError(
            f"Database schema version {current} is newer than supported {version}"
        )
    if current == 0 and not _table_exists(conn):
        _create_schema(conn)
    else:
        logger.warning(
            "Upgrading notes schema from %s to %s, existing notes are dropped",
            current,
            version,
        )
        conn.execute("DROP TABLE IF EXISTS data")
        _create_schema(conn)
    conn.execute(f"PRAGMA user_version = {int(version)}")
    conn.commit()


def _create_schema(conn: sqlite3.Connection) -> None:
    conn.execute(_CREATE_TABLE)
    conn.executemany(
        "INSERT INTO data (text, date) VALUES (?, datetime('now'))",
        [(text,) for text in SAMPLE_NOTES],
    )


def _table_exists(conn: sqlite3.Connection) -> bool:
    row = conn.execute(
        "SELECT 1 FROM sqlite_master WHERE type = 'table' AND name = 'data'"
    ).fetchone()
    return row is not None
