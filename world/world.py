"""
organism_sim module: world/world.py

World state container: organisms, food, counters, event log and bounds.

Not thread-safe on its own; sim.service.SimulationService owns the only
instance and serialises all access to it.
"""

from __future__ import annotations
from dataclasses import dataclass, field
import itertools
import random
from typing import Iterator, List, Mapping, Optional, Sequence

import config
from organism.genome import default_dna
from organism.organism import Organism
from world.events import Event, EventLog
from world.food import Food, random_food_energy


def numeric_traits(seed: Optional[Mapping[str, object]]) -> dict:
    """Keep only the numeric entries of a caller-supplied trait mapping."""
    if not seed:
        return {}
    return {
        str(k): float(v)
        for k, v in seed.items()
        if isinstance(v, (int, float)) and not isinstance(v, bool)
    }


@dataclass
class World:
    w: float
    h: float
    tick: int = 0
    organisms: List[Organism] = field(default_factory=list)
    foods: List[Food] = field(default_factory=list)
    births: int = 0
    deaths: int = 0
    events: EventLog = field(default_factory=EventLog)

    _org_ids: Iterator[int] = field(default_factory=lambda: itertools.count(1), repr=False)
    _food_ids: Iterator[int] = field(default_factory=lambda: itertools.count(1), repr=False)

    @staticmethod
    def create(w: float, h: float, event_limit: Optional[int] = None) -> "World":
        return World(w=w, h=h, events=EventLog(event_limit))

    # -- creation paths --

    def new_organism(
        self,
        dna: Optional[Sequence[str]] = None,
        seed_traits: Optional[Mapping[str, object]] = None,
    ) -> Organism:
        """
        Create and append one organism at a random position.

        Shared by external spawns and reproduction; counters and events are
        the caller's job.
        """
        org = Organism(
            id=f"org-{next(self._org_ids)}",
            x=random.uniform(0.0, self.w),
            y=random.uniform(0.0, self.h),
            size=random.uniform(*config.SIZE_RANGE),
            energy=random.uniform(*config.SPAWN_ENERGY_RANGE),
            dna=list(dna) if dna else default_dna(),
            traits=numeric_traits(seed_traits),
        )
        self.organisms.append(org)
        return org

    def spawn_food_at(self, x: float, y: float, energy: Optional[float] = None) -> Food:
        f = Food(
            id=f"food-{next(self._food_ids)}",
            x=x,
            y=y,
            energy=random_food_energy() if energy is None else energy,
        )
        self.foods.append(f)
        return f

    def spawn_food_random(self) -> Food:
        return self.spawn_food_at(random.uniform(0.0, self.w), random.uniform(0.0, self.h))

    def take_food(self, index: int) -> Food:
        return self.foods.pop(index)

    # -- bookkeeping --

    def record_birth(self, child: Organism, parent: Optional[Organism] = None) -> None:
        self.births += 1
        self.events.append(Event.birth(child.id, parent.id if parent is not None else None))

    def record_death(self, org: Organism) -> None:
        self.deaths += 1
        self.events.append(Event.death(org.id))

    def avg_energy(self) -> float:
        if not self.organisms:
            return 0.0
        return sum(o.energy for o in self.organisms) / len(self.organisms)
