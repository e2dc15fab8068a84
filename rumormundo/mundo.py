"""The world of the rumour simulation: people, places, rumours and events."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import IntEnum

from .conjunto import BoundedSet
from .fila import Queue
from .lef import Event

WORLD_SIZE = 20000
N_RUMORS = 30
N_PEOPLE = 100
N_PLACES = 8
END_OF_WORLD = 34944


class EventKind(IntEnum):
    """The kinds of event the simulation knows."""

    ARRIVAL = 0
    DEPARTURE = 1
    RUMOR = 2
    END = 3


@dataclass(frozen=True)
class Movement:
    """Who arrives at or leaves which place."""

    person_id: int
    place_id: int


@dataclass(frozen=True)
class RumorTelling:
    """A person telling up to ``nrd`` of their rumours at a place."""

    person_id: int
    place_id: int
    nrd: int


@dataclass
class Person:
    """Someone in the world and the rumours they know."""

    id: int
    extroversion: int
    patience: int
    age: int
    known_rumors: BoundedSet


@dataclass
class Place:
    """A place with a limited audience and a queue for when it is full."""

    id: int
    capacity: int
    x: int
    y: int
    audience: BoundedSet = field(default=None)  # type: ignore[assignment]
    queue: Queue = field(default_factory=Queue)

    def __post_init__(self) -> None:
        if self.audience is None:
            self.audience = BoundedSet(self.capacity)


@dataclass
class World:
    """Everything the simulation acts on."""

    rumors: BoundedSet
    people: list[Person]
    places: list[Place]
    time: int = 0


def aleat(rng: random.Random, low: int, high: int) -> int:
    """Return a random integer between ``low`` and ``high``, both included."""
    if high < low:
        raise ValueError(f"empty range [{low}, {high}]")
    return rng.randint(low, high)


def _create_person(rng: random.Random, person_id: int, rumors: BoundedSet) -> Person:
    extroversion = aleat(rng, 0, 100)
    patience = aleat(rng, 0, 100)
    age = aleat(rng, 18, 100)
    known = rumors.random_subset(aleat(rng, 1, 5), rng)
    return Person(person_id, extroversion, patience, age, known)


def _create_place(rng: random.Random, place_id: int) -> Place:
    capacity = aleat(rng, 5, 30)
    x = aleat(rng, 0, WORLD_SIZE - 1)
    y = aleat(rng, 0, WORLD_SIZE - 1)
    return Place(place_id, capacity, x, y)


def create_world(rng: random.Random) -> World:
    """Build a world of random people and places around a fixed set of rumours."""
    rumors = BoundedSet(N_RUMORS, range(N_RUMORS))
    people = [_create_person(rng, person_id, rumors) for person_id in range(N_PEOPLE)]
    places = [_create_place(rng, place_id) for place_id in range(N_PLACES)]
    return World(rumors=rumors, people=people, places=places)


def arrival_event(time: int, person_id: int, place_id: int) -> Event:
    """A person arriving at a place."""
    return Event(time, EventKind.ARRIVAL, Movement(person_id, place_id))


def departure_event(time: int, person_id: int, place_id: int) -> Event:
    """A person leaving a place."""
    return Event(time, EventKind.DEPARTURE, Movement(person_id, place_id))


def rumor_event(time: int, person_id: int, place_id: int, nrd: int) -> Event:
    """A person spreading rumours at a place."""
    return Event(time, EventKind.RUMOR, RumorTelling(person_id, place_id, nrd))


def end_of_world_event(time: int) -> Event:
    """The end of the simulation."""
    return Event(time, EventKind.END)