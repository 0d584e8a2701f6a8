"""Base tram that drives along a timetable of stops."""

from __future__ import annotations

import random
import time
from abc import ABC, abstractmethod
from collections import deque
from collections.abc import Iterable
from datetime import timedelta
from typing import Protocol

from tramsim.stop import TramStop


class _RandomSource(Protocol):
    def randint(self, a: int, b: int) -> int: ...


class Tram(ABC):
    """A tram that travels a route, stopping at each stop in turn."""

    time_at_stop: int = 0

    def __init__(
        self,
        tram_id: int,
        rng: _RandomSource | None = None,
        time_scale: float = 1.0,
    ) -> None:
        self.tram_id = tram_id
        self.time_scale = time_scale
        self._rng = rng if rng is not None else random.Random()
        self._remaining: deque[tuple[TramStop, int]] = deque()
        self._on_route = False
        self._delays: list[str] = []
        self._total_delay = 0

    @property
    def on_route(self) -> bool:
        return self._on_route

    def set_route(self, timetable: Iterable[tuple[TramStop, int]]) -> None:
        """Assign the route: pairs of (stop, travel time to it). Ignored once on a route."""
        if not self._on_route:
            self._remaining = deque(timetable)
            self._on_route = True

    def route_runtime(self) -> timedelta:
        """Drive the remaining route and return the time it actually took."""
        start = time.monotonic()
        while self._remaining:
            stop, travel = self._remaining[0]
            self._move(travel)
            self._open_doors(stop)
            self._remaining.popleft()
        elapsed_ms = int((time.monotonic() - start) * 1000)
        return timedelta(milliseconds=elapsed_ms)

    @abstractmethod
    def model(self) -> str:
        """Return the tram's model description."""

    def delays(self) -> list[str]:
        """Return the log of delays met so far."""
        return list(self._delays)

    def total_delay(self) -> int:
        """Return the accumulated delay in milliseconds of simulated time."""
        return self._total_delay

    def _move(self, travel: int) -> None:
        time.sleep(max(0.0, 0.1 * travel * self.time_scale))

    def _open_doors(self, stop: TramStop) -> None:
        while not stop.is_empty():
            time.sleep(0)
        delay = self._add_delay(stop)
        stop.make_stop(self.time_at_stop + delay)
        self._total_delay += 10 * delay

    def _add_delay(self, stop: TramStop) -> int:
        if self._rng.randint(1, 20) < 5:
            self._delays.append(f"blocked intersection/red lights at {stop.name}")
            return 3
        if self._rng.randint(1, 20) == 5:
            self._delays.append(f"blocked doors/passenger misbehave at {stop.name}")
            return 7
        if self._rng.randint(1, 20) == 6:
            self._delays.append(f"random accident at {stop.name}")
            return 10
        return 0