"""
SimulationService: the single owner of the World and its lock.

Every public method takes the lock for its whole duration, so a caller can
never forget to lock and a read never observes a half-applied tick. Reads
return detached plain-dict snapshots so that encoding and socket writes
happen after the lock is released.
"""

from __future__ import annotations
import logging
import threading
from typing import List, Mapping, Optional, Tuple

import config
from organism.organism import Organism
from sim.step import SimParams, step_world
from world.food import Food, touch_scatter
from world.world import World

logger = logging.getLogger(__name__)


class SimulationService:
    def __init__(
        self,
        world: Optional[World] = None,
        params: Optional[SimParams] = None,
    ) -> None:
        self._world = world if world is not None else World.create(
            config.WORLD_W, config.WORLD_H, config.EVENT_LOG_LIMIT
        )
        self.params = params if params is not None else SimParams()
        self._lock = threading.Lock()

    # -- writers --

    def step(self) -> int:
        with self._lock:
            step_world(self._world, self.params)
            return self._world.tick

    def seed(self, organisms: int = config.START_POP, foods: int = config.START_FOOD) -> None:
        """Initial population. Not counted as births."""
        with self._lock:
            for _ in range(organisms):
                self._world.new_organism()
            for _ in range(foods):
                self._world.spawn_food_random()
        logger.info("Seeded world with %d organisms and %d food", organisms, foods)

    def spawn(self, seed_traits: Optional[Mapping[str, object]] = None) -> dict:
        with self._lock:
            org = self._world.new_organism(seed_traits=seed_traits)
            self._world.record_birth(org)
            return org.to_dict()

    def touch(self, x: float, y: float) -> Tuple[float, float]:
        with self._lock:
            for fx, fy in touch_scatter(x, y):
                self._world.spawn_food_at(fx, fy)
        return x, y

    def spawn_food_at(self, x: float, y: float) -> dict:
        with self._lock:
            return self._world.spawn_food_at(x, y).to_dict()

    # -- readers --

    def state_snapshot(self) -> dict:
        with self._lock:
            w = self._world
            return {
                "tick": w.tick,
                "organisms": [o.to_dict() for o in w.organisms],
                "maps": {"foods": [f.to_dict() for f in w.foods]},
            }

    def config_snapshot(self) -> dict:
        with self._lock:
            return {
                "foodSpawnProb": self.params.food_spawn_prob,
                "reproductionBaseChance": self.params.reproduction_base_chance,
                "worldWidth": self._world.w,
                "worldHeight": self._world.h,
            }

    def metrics_snapshot(self) -> dict:
        with self._lock:
            w = self._world
            return {
                "foodSpawnProb": self.params.food_spawn_prob,
                "reproductionBaseChance": self.params.reproduction_base_chance,
                "worldWidth": w.w,
                "worldHeight": w.h,
                "tick": w.tick,
                "population": len(w.organisms),
                "avgEnergy": w.avg_energy(),
                "births": w.births,
                "deaths": w.deaths,
            }

    def events_snapshot(self) -> List[dict]:
        with self._lock:
            return self._world.events.to_list()

    # -- test and tooling hooks --

    def place_organism(self, org: Organism) -> None:
        with self._lock:
            self._world.organisms.append(org)

    def place_food(self, food: Food) -> None:
        with self._lock:
            self._world.foods.append(food)
