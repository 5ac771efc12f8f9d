"""Hand-off of a single button press from the UI thread to the simulation."""

from __future__ import annotations

import threading
from typing import Optional


class SelectionCoordinator:
    """A one-value slot that the simulation thread can block on.

    Buttons publish the token they represent; the simulation thread waits in
    :meth:`await_selection`. Each :meth:`reset` starts a new generation, and
    buttons built for an older generation can no longer fill the slot.
    """

    def __init__(self) -> None:
        self._condition = threading.Condition()
        self._slot: Optional[int] = None
        self._generation = 0

    @property
    def is_pending(self) -> bool:
        with self._condition:
            return self._slot is not None

    def reset(self) -> int:
        with self._condition:
            self._slot = None
            self._generation += 1
            return self._generation

    def publish(self, index: int, generation: Optional[int] = None) -> bool:
        """Fill the slot with ``index``; the latest publish wins.

        Returns ``False`` when ``generation`` refers to an earlier round.
        """

        with self._condition:
            if generation is not None and generation != self._generation:
                return False
            self._slot = index
            self._condition.notify_all()
            return True

    def await_selection(self) -> int:
        with self._condition:
            self._condition.wait_for(lambda: self._slot is not None)
            index = self._slot
            self.reset()
        return index


__all__ = ["SelectionCoordinator"]
