"""Tram stops: a platform that serves one tram at a time."""

from __future__ import annotations

import threading
from time import sleep


class TramStop:
    """A named stop where trams exchange passengers, one tram at a time."""

    def __init__(self, name: str = "", time_scale: float = 1.0) -> None:
        self.name = name
        self.time_scale = time_scale
        self._lock = threading.Lock()
        self._empty = threading.Event()
        self._empty.set()

    def make_stop(self, time: int) -> None:
        """Occupy the stop for ``time`` units (10 ms each, scaled)."""
        with self._lock:
            self._empty.clear()
            try:
                sleep(max(0.0, 0.01 * time * self.time_scale))
            finally:
                self._empty.set()

    def is_empty(self) -> bool:
        """Return whether no tram is standing at the stop."""
        return self._empty.is_set()

    def __repr__(self) -> str:
        return f"TramStop({self.name!r})"