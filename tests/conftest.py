from __future__ import annotations

import pytest

from quicknotes.core.display import DisplayConfig
from quicknotes.storage.note_store import NoteStore


@pytest.fixture
def seeded_store(tmp_path):
    with NoteStore(tmp_path / "app.db") as store:
        yield store


@pytest.fixture
def store(seeded_store):
    for note in seeded_store.list_all():
        seeded_store.delete(note.id)
    return seeded_store


@pytest.fixture
def display():
    return DisplayConfig()
