"""Display configuration shared by the bridge and the front end."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

DARK_THEME = "textual-dark"
LIGHT_THEME = "textual-light"

DisplayListener = Callable[["DisplayConfig"], None]


@dataclass
class DisplayConfig:
    """Light/dark mode for the running app. Not persisted across restarts."""

    dark: bool = False
    _listeners: list[DisplayListener] = field(
        default_factory=list, repr=False, compare=False
    )

    @property
    def theme(self) -> str:
        return DARK_THEME if self.dark else LIGHT_THEME

    def set_dark(self, value: bool) -> None:
        self.dark = bool(value)
        for listener in list(self._listeners):
            listener(self)

    def subscribe(self, listener: DisplayListener) -> None:
        self._listeners.append(listener)

    def unsubscribe(self, listener: DisplayListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)
