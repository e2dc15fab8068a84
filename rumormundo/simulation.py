"""The discrete-event simulation of people moving between places and spreading rumours."""

from __future__ import annotations

import argparse
import math
import random
import sys
from typing import TextIO

from .conjunto import SetFullError
from .lef import Event, EventList
from .mundo import (
    END_OF_WORLD,
    EventKind,
    World,
    aleat,
    arrival_event,
    create_world,
    departure_event,
    end_of_world_event,
    rumor_event,
)

INITIAL_ARRIVAL_WINDOW = 96 * 7


class Simulation:
    """Runs the events of a world in time order, writing a log to ``out``."""

    def __init__(self, world: World, rng: random.Random, out: TextIO | None = None) -> None:
        self.world = world
        self.rng = rng
        self.out = out if out is not None else sys.stdout
        self.events = EventList()

    def _write(self, text: str) -> None:
        self.out.write(text)

    def schedule_initial_arrivals(self) -> None:
        """Schedule one arrival for every person at a random place and time."""
        last_place = len(self.world.places) - 1
        for person in self.world.people:
            time = aleat(self.rng, 0, INITIAL_ARRIVAL_WINDOW)
            place_id = aleat(self.rng, 0, last_place)
            self.events.add_ordered(arrival_event(time, person.id, place_id))

    def step(self, event: Event) -> bool:
        """Handle one event; return False once the world has ended."""
        self.world.time = event.time
        if self.world.time >= END_OF_WORLD:
            self.events.add_first(end_of_world_event(END_OF_WORLD))
            return False
        if event.kind == EventKind.ARRIVAL:
            self._arrive(event)
        elif event.kind == EventKind.DEPARTURE:
            self._depart(event)
        elif event.kind == EventKind.RUMOR:
            self._tell_rumors(event)
        return True

    def run(self) -> None:
        """Process events until none are left or the world ends."""
        while self.events:
            if not self.step(self.events.pop_first()):
                break

    def _arrive(self, event: Event) -> None:
        person = self.world.people[event.data.person_id]
        place = self.world.places[event.data.place_id]
        now = self.world.time
        self._write(
            f"\n{event.time:6d}:CHEGA Pessoa{person.id:4d} Local{place.id:4d}"
            f"  ({len(place.audience)}/{place.capacity})"
        )
        if len(place.audience) >= place.capacity:
            if person.patience // 4 - len(place.queue) > 0:
                place.queue.push(person.id)
                self._write(f", FILA {len(place.queue)}")
            else:
                self._write(", DESISTE")
                self.events.add_ordered(departure_event(now, person.id, place.id))
            return
        self._write(", ENTRA")
        place.audience.add(person.id)
        stay = max(1, person.patience // 10 + aleat(self.rng, -2, 6))
        nrd = person.extroversion // 10
        self.events.add_ordered(
            rumor_event(now + aleat(self.rng, 0, stay), person.id, place.id, nrd)
        )
        self.events.add_ordered(departure_event(now + stay, person.id, place.id))

    def _depart(self, event: Event) -> None:
        person = self.world.people[event.data.person_id]
        place = self.world.places[event.data.place_id]
        now = self.world.time
        self._write(
            f"\n{event.time:6d}:SAIDA Pessoa{person.id:4d} Local{place.id:4d}"
            f"  ({len(place.audience)}/{place.capacity})"
        )
        place.audience.discard(person.id)
        if not place.queue.is_empty() and len(place.audience) < place.capacity:
            waiting = place.queue.peek()
            self._write(f", REMOVE FILA Pessoa {waiting}")
            self.events.add_first(arrival_event(now, waiting, place.id))
            place.queue.pop()
            return
        destination = self.world.places[aleat(self.rng, 0, len(self.world.places) - 1)]
        speed = 100 - max(0, person.age - 40)
        distance = int(
            math.sqrt((destination.x - place.x) ** 2 + (destination.y - place.y) ** 2)
        )
        travel = distance // speed
        self.events.add_ordered(arrival_event(now + travel // 15, person.id, destination.id))

    def _tell_rumors(self, event: Event) -> None:
        telling = event.data
        teller = self.world.people[telling.person_id]
        place = self.world.places[telling.place_id]
        subset = teller.known_rumors.random_subset(telling.nrd, self.rng)
        self._write(f"\n{event.time:6d}:RUMOR Pessoa{teller.id:4d} Local{place.id:4d} ")
        for listener_id in place.audience:
            listener = self.world.people[listener_id]
            if aleat(self.rng, 0, 100) >= listener.extroversion:
                continue
            for rumor in subset:
                if rumor in listener.known_rumors:
                    continue
                self._write(f"(P{listener_id}:R{rumor}) ")
                try:
                    listener.known_rumors.add(rumor)
                except SetFullError:
                    listener.known_rumors.grow()
                    listener.known_rumors.add(rumor)
                subset.discard(rumor)
                break


def main(argv: list[str] | None = None) -> int:
    """Build a world, run the simulation and print its log."""
    parser = argparse.ArgumentParser(
        prog="rumormundo", description="Simulate rumours spreading between people."
    )
    parser.add_argument("--seed", type=int, default=0, help="random seed (default 0)")
    args = parser.parse_args(argv)
    rng = random.Random(args.seed)
    world = create_world(rng)
    simulation = Simulation(world, rng, sys.stdout)
    simulation.schedule_initial_arrivals()
    simulation.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())