"""Bridge payloads."""

from __future__ import annotations

import json
from collections.abc import Iterable
from dataclasses import dataclass

from quicknotes.storage.repos.notes import Note

EMPTY_LIST = "[]"


@dataclass(frozen=True)
class BridgeResult:
    ok: bool
    error: str | None = None

    def __bool__(self) -> bool:
        return self.ok


SUCCESS = BridgeResult(ok=True)


def failure(exc: Exception) -> BridgeResult:
    return BridgeResult(ok=False, error=str(exc))


def notes_payload(notes: Iterable[Note]) -> str:
    return json.dumps([note.to_dict() for note in notes], ensure_ascii=False)


def stats_payload(total: int, today: int) -> str:
    return json.dumps({"total": total, "today": today})
