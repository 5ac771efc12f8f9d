"""Per-tick message buffer behind the message pane."""

from __future__ import annotations

import threading
from typing import List


class MessageLog:
    """Lines emitted by the simulation since the last command prompt.

    ``append`` returns the text the pane should show now; ``begin_tick``
    returns the text to leave on screen while the player chooses and starts
    the next tick from an empty buffer.
    """

    def __init__(self) -> None:
        self._lines: List[str] = []
        self._lock = threading.Lock()

    def append(self, message: str) -> str:
        with self._lock:
            self._lines.append(message)
            return self._render()

    def begin_tick(self) -> str:
        with self._lock:
            text = self._render()
            self._lines.clear()
            return text

    @property
    def text(self) -> str:
        with self._lock:
            return self._render()

    def _render(self) -> str:
        return "".join(f"{line}\n" for line in self._lines)


__all__ = ["MessageLog"]
