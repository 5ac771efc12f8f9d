"""Marshalling of widget work from worker threads onto the Tk main loop."""

from __future__ import annotations

import queue
from typing import Any, Callable, Optional, Protocol, Tuple

from hobbitworld.logging_utils import log_error


class Scheduler(Protocol):
    def after(self, ms: int, func: Callable[[], None]) -> Any: ...


class UiDispatcher:
    """FIFO of callables drained on the UI thread.

    Worker threads call the dispatcher like a function; the UI thread runs
    the queued calls in submission order every ``interval_ms`` through
    ``widget.after``.
    """

    def __init__(self, widget: Scheduler, interval_ms: int = 50) -> None:
        self.widget = widget
        self.interval_ms = interval_ms
        self._queue: "queue.Queue[Tuple[Callable[..., None], Tuple[Any, ...]]]" = queue.Queue()
        self._running = False

    def __call__(self, func: Callable[..., None], *args: Any) -> None:
        self._queue.put((func, args))

    @property
    def pending(self) -> int:
        return self._queue.qsize()

    def start(self) -> None:
        if self._running:
            return
        self._running = True
        self.widget.after(self.interval_ms, self._poll)

    def stop(self) -> None:
        self._running = False

    def drain(self, limit: Optional[int] = None) -> int:
        """Run queued calls on the current thread; returns how many ran."""

        handled = 0
        while limit is None or handled < limit:
            try:
                func, args = self._queue.get_nowait()
            except queue.Empty:
                break
            try:
                func(*args)
            except Exception as exc:
                # Reported and skipped; the calls queued behind it still run.
                log_error(f"UI call {getattr(func, '__qualname__', func)!r} failed: {exc!r}")
            handled += 1
        return handled

    def _poll(self) -> None:
        if not self._running:
            return
        try:
            self.drain()
        finally:
            self.widget.after(self.interval_ms, self._poll)


__all__ = ["Scheduler", "UiDispatcher"]
