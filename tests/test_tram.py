from datetime import timedelta

import pytest

from tramsim.stop import TramStop
from tramsim.tram import Tram


class SequenceRng:
    def __init__(self, values):
        self.values = list(values)
        self.calls = []

    def randint(self, a, b):
        self.calls.append((a, b))
        return self.values.pop(0) if self.values else 20


class SimpleTram(Tram):
    time_at_stop = 5

    def model(self):
        return f"Simple {self.tram_id}"


def make_stop(name):
    return TramStop(name, time_scale=0)


def test_base_tram_is_abstract():
    with pytest.raises(TypeError):
        Tram(1)


def test_intersection_delay():
    tram = SimpleTram(1, rng=SequenceRng([1]), time_scale=0)
    tram.set_route([(make_stop("Rondo"), 2)])
    tram.route_runtime()
    assert tram.delays() == ["blocked intersection/red lights at Rondo"]
    assert tram.total_delay() == 30


def test_doors_delay_uses_second_draw():
    rng = SequenceRng([10, 5])
    tram = SimpleTram(1, rng=rng, time_scale=0)
    tram.set_route([(make_stop("Most"), 1)])
    tram.route_runtime()
    assert tram.delays() == ["blocked doors/passenger misbehave at Most"]
    assert rng.calls == [(1, 20), (1, 20)]


def test_accident_delay_uses_third_draw():
    tram = SimpleTram(1, rng=SequenceRng([10, 10, 6]), time_scale=0)
    tram.set_route([(make_stop("Park"), 1)])
    tram.route_runtime()
    assert tram.delays() == ["random accident at Park"]
    assert tram.total_delay() == 10 * 10


def test_no_delay():
    tram = SimpleTram(1, rng=SequenceRng([10, 10, 10]), time_scale=0)
    tram.set_route([(make_stop("Park"), 1)])
    tram.route_runtime()
    assert tram.delays() == []
    assert tram.total_delay() == 0


def test_route_visits_stops_in_order():
    stops = [make_stop(n) for n in ("A", "B", "C")]
    tram = SimpleTram(2, rng=SequenceRng([1, 1, 1]), time_scale=0)
    tram.set_route([(s, 1) for s in stops])
    runtime = tram.route_runtime()
    assert runtime >= timedelta(0)
    assert [d.rsplit(" ", 1)[1] for d in tram.delays()] == ["A", "B", "C"]


def test_second_route_is_ignored():
    tram = SimpleTram(3, rng=SequenceRng([1, 1]), time_scale=0)
    tram.set_route([(make_stop("First"), 1)])
    tram.set_route([(make_stop("Second"), 1)])
    tram.route_runtime()
    assert tram.on_route
    assert tram.delays() == ["blocked intersection/red lights at First"]


def test_delays_returns_copy():
    tram = SimpleTram(4, rng=SequenceRng([1]), time_scale=0)
    tram.set_route([(make_stop("Q"), 1)])
    tram.route_runtime()
    log = tram.delays()
    log.clear()
    assert len(tram.delays()) == 1


def test_runtime_reflects_travel_time():
    tram = SimpleTram(5, rng=SequenceRng([10, 10, 10]), time_scale=0.1)
    tram.set_route([(TramStop("S", time_scale=0.1), 2)])
    runtime = tram.route_runtime()
    assert runtime >= timedelta(milliseconds=20)


def test_empty_route_after_run():
    tram = SimpleTram(6, rng=SequenceRng([1]), time_scale=0)
    tram.set_route([(make_stop("Z"), 1)])
    tram.route_runtime()
    tram.route_runtime()
    assert len(tram.delays()) == 1