# rumormundo

A small discrete-event simulation of a world where people wander between
places, wait in line when a place is full, and pass rumors to the people
around them.

The world holds 30 rumors, 100 people and 8 places. Every person has an
extroversion, a patience and an age, and starts out knowing a few rumors.
Every place has a capacity, a waiting queue and a position on a plane.
Events (arrival, departure, rumor telling and the end of the world) are kept
in a time-ordered future event list and processed one by one until none are
left or the simulated clock reaches the end of the world (time 34944).

## Installation

```
pip install .
```

## Running

```
rumormundo
rumormundo --seed 42
```

`--seed` sets the random seed (default 0); the same seed gives the same run.
The simulation prints one line per event:

- `CHEGA` — a person arrives at a place, showing the current audience and
  capacity, followed by `ENTRA` (enters), `FILA n` (joins the queue, now `n`
  long) or `DESISTE` (gives up and leaves).
- `SAIDA` — a person leaves a place; `REMOVE FILA Pessoa n` means the first
  person in that place's queue is let in.
- `RUMOR` — a person tells rumors; each `(Pp:Rr)` means person `p` learned
  rumor `r`.

For example:

```
    12:CHEGA Pessoa  42 Local   3  (4/17), ENTRA
    15:RUMOR Pessoa  42 Local   3 (P7:R12) (P19:R4) 
    20:SAIDA Pessoa  42 Local   3  (5/17)
```

## Using it from Python

```python
import io
import random

from rumormundo.mundo import create_world
from rumormundo.simulation import Simulation

rng = random.Random(0)
world = create_world(rng)
log = io.StringIO()
simulation = Simulation(world, rng, log)
simulation.schedule_initial_arrivals()
simulation.run()
print(log.getvalue())
```

`Simulation.step(event)` handles a single event and returns `False` once the
world has ended; `Simulation.events` is the pending `EventList`.

The building blocks can be used on their own:

- `rumormundo.conjunto.BoundedSet` — an insertion-ordered set of integers
  with a fixed capacity; `add` raises `SetFullError` when it would overflow,
  and `grow()` doubles the capacity. It also offers `union`, `intersection`,
  `difference`, `issubset`, `random_subset` and `remove_random`.
- `rumormundo.fila.Queue` — a FIFO queue (`push`, `pop`, `peek`) with a
  cursor that can walk the queue (`reset_cursor`, `advance_cursor`,
  `current`) and remove the key under it (`remove_current`).
- `rumormundo.lef.EventList` — a future event list of `Event` objects,
  ordered by `Event.time`, with `add_ordered`, `add_first`, `first` and
  `pop_first`.
- `rumormundo.mundo` — the `World`, `Person` and `Place` records,
  `create_world(rng)`, the `EventKind` enum and helpers that build each kind
  of event.

## What it does not do

The package only prints the event log. It does not collect statistics, draw
the world, or save a run to a file.

## Tests

```
pip install .[test]
pytest
```