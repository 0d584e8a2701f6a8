# tramsim

A small simulation of trams running along a line of stops.

Each tram follows a timetable of stops and travel times. At every stop it
waits until the platform is free, exchanges passengers for a time that
depends on its model, and may be held up by a random delay: a blocked
intersection, a door problem or an accident. The tram records what held it
up and how long its whole route took.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Usage

```python
import random

from tramsim.models import PesaTwist, create_tram
from tramsim.stop import TramStop

# time_scale shrinks simulated time so the example finishes quickly
stops = [TramStop("Central", time_scale=0.01), TramStop("Harbour", time_scale=0.01)]

tram = PesaTwist(7, rng=random.Random(42), time_scale=0.01)
tram.set_route([(stops[0], 2), (stops[1], 3)])  # (stop, travel time to it)

runtime = tram.route_runtime()
print(tram.model())          # "Pesa Twist 146n 7"
print(runtime)               # measured duration of the whole route, a timedelta
print(tram.delays())         # e.g. ["random accident at Harbour"]
print(tram.total_delay())    # accumulated delay

other = create_tram("Konstal", 3)   # default rng and time scale
print(other.model())                # "Konstal 105 Na 3"
```

### Stops (`tramsim.stop`)

`TramStop(name="", time_scale=1.0)` is a platform that holds one tram at a
time. `make_stop(time)` occupies it for `time` units of 10 ms each,
multiplied by `time_scale`; while one tram is standing there, another
calling `make_stop` waits for it to leave. `is_empty()` tells whether the
stop is free. Stops are safe to share between trams running in separate
threads.

### Trams (`tramsim.tram`)

`Tram(tram_id, rng=None, time_scale=1.0)` is the abstract base class. `rng`
is any object with a `randint(a, b)` method, such as a `random.Random`;
pass a seeded one to make delays reproducible. `time_scale` multiplies the
travel time, which is 100 ms per unit.

- `set_route(timetable)` takes an iterable of `(stop, travel_time)` pairs.
  Only the first call has an effect; `on_route` tells whether a route has
  been set.
- `route_runtime()` drives the tram over its route: for each stop it
  travels, waits until the stop is empty, rolls for a delay and stands at
  the stop for its model's `time_at_stop` plus the delay. It returns the
  measured wall-clock time as a `timedelta`.
- `delays()` returns a copy of the log of delay messages.
- `total_delay()` returns the accumulated delay, 10 per delay unit
  (3 for a blocked intersection, 7 for blocked doors, 10 for an accident).
- `model()` returns the model description; subclasses supply it.

### Models (`tramsim.models`)

| Class           | Model string            | Time at stop |
|-----------------|-------------------------|--------------|
| `ModerusGamma`  | Moderus Gamma LF 07 AC  | 5            |
| `ModerusBeta`   | Moderus Beta MF 24 AC   | 5            |
| `PesaTwist`     | Pesa Twist 146n         | 7            |
| `PesaTwist2010` | Pesa Twist 2010 NW      | 7            |
| `Konstal`       | Konstal 105 Na          | 9            |
| `Protram`       | Protram 105 NWr         | 9            |

Each model string is followed by the tram's id. `create_tram(model_name,
tram_id)` builds a tram from its class name, with the default random source
and time scale, and raises `ValueError` for an unknown name.

## What it does not do

The package provides the building blocks only. It has no command-line
program, does not read timetables or fleets from files, does not write
results anywhere, and has no manager that starts several trams on a line
at once; running trams together (for example one thread per tram sharing
the same `TramStop` objects) is left to the caller.