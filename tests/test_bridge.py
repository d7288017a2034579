from __future__ import annotations

import json

import pytest

from quicknotes.bridge.bridge import NoteBridge
from quicknotes.bridge.schemas import BridgeResult
from quicknotes.core.display import DisplayConfig
from quicknotes.storage.note_store import NoteStore


@pytest.fixture
def rendered() -> list[str]:
    return []


@pytest.fixture
def bridge(store, display, rendered) -> NoteBridge:
    return NoteBridge(store, display, renderer=rendered.append)


def test_get_all_data_payload_shape(bridge, store) -> None:
    store.insert("first")
    store.insert("second")
    notes = json.loads(bridge.get_all_data())
    assert [note["text"] for note in notes] == ["second", "first"]
    assert all(set(note) == {"id", "text", "date"} for note in notes)
    assert isinstance(notes[0]["id"], int)


def test_add_data_rerenders_full_list(bridge, rendered) -> None:
    result = bridge.add_data("buy milk")
    assert result == BridgeResult(ok=True)
    assert len(rendered) == 1
    assert [note["text"] for note in json.loads(rendered[0])] == ["buy milk"]


def test_update_and_delete_rerender(bridge, store, rendered) -> None:
    note_id = store.insert("draft")
    assert bridge.update_data(note_id, "final")
    assert json.loads(rendered[-1])[0]["text"] == "final"
    assert bridge.delete_data(note_id)
    assert json.loads(rendered[-1]) == []
    assert len(rendered) == 2


def test_delete_missing_id_still_succeeds(bridge, rendered) -> None:
    assert bridge.delete_data(4242).ok
    assert rendered == ["[]"]


def test_search_data_filters(bridge, store) -> None:
    store.insert("buy milk")
    store.insert("call mom")
    assert [n["text"] for n in json.loads(bridge.search_data("mom"))] == ["call mom"]
    assert json.loads(bridge.search_data("bread")) == []
    assert bridge.search_data("") == bridge.get_all_data()


def test_get_stats_counts_notes(seeded_store, display) -> None:
    bridge = NoteBridge(seeded_store, display)
    seeded_store.insert("one more")
    assert json.loads(bridge.get_stats()) == {"total": 6, "today": 6}


def test_storage_failure_becomes_false_result(tmp_path, display, rendered) -> None:
    broken = NoteStore(tmp_path / "missing" / "app.db")
    bridge = NoteBridge(broken, display, renderer=rendered.append)

    result = bridge.add_data("lost")
    assert not result
    assert result.error
    assert rendered == []
    assert bridge.get_all_data() == "[]"
    assert bridge.search_data("x") == "[]"
    assert json.loads(bridge.get_stats()) == {"total": 0, "today": 0}


def test_failure_is_logged(tmp_path, display, caplog) -> None:
    bridge = NoteBridge(NoteStore(tmp_path / "missing" / "app.db"), display)
    with caplog.at_level("ERROR", logger="quicknotes"):
        bridge.update_data(1, "x")
    assert "Note update failed" in caplog.text


def test_load_pushes_current_list(bridge, store, rendered) -> None:
    store.insert("hello")
    bridge.load()
    assert json.loads(rendered[0])[0]["text"] == "hello"


def test_without_renderer_mutations_still_work(store, display) -> None:
    bridge = NoteBridge(store, display)
    assert bridge.add_data("quiet")
    assert store.count() == 1


def test_toggle_theme_updates_display(store) -> None:
    display = DisplayConfig(dark=False)
    seen: list[bool] = []
    display.subscribe(lambda config: seen.append(config.dark))
    bridge = NoteBridge(store, display)

    bridge.toggle_theme(True)
    assert display.dark is True
    assert display.theme == "textual-dark"
    bridge.toggle_theme(False)
    assert display.theme == "textual-light"
    assert seen == [True, False]


def test_invoke_uses_display_names(bridge, rendered) -> None:
    assert bridge.invoke("addData", "via invoke") is True
    assert json.loads(bridge.invoke("getAllData"))[0]["text"] == "via invoke"
    assert json.loads(bridge.invoke("getStats"))["total"] == 1
    assert bridge.invoke("toggleTheme", True) is None
    assert bridge.display.dark is True
    with pytest.raises(KeyError):
        bridge.invoke("dropTable")
