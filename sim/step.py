"""
Per-tick world transition: move, drain, starve, eat, reproduce, grow food.
"""

from __future__ import annotations
from dataclasses import dataclass
import random
from typing import Optional

import config
from evolution.reproduction import try_reproduce
from organism.organism import Organism
from world.events import Event
from world.food import first_within_reach
from world.physics import apply_step, clamp_to_bounds, drain_energy, random_step
from world.world import World


@dataclass
class SimParams:
    food_spawn_prob: float = config.FOOD_SPAWN_PROB
    reproduction_base_chance: float = config.REPRO_BASE_CHANCE


def feed(world: World, org: Organism) -> bool:
    """Eat the first pellet in reach, if any. Returns True on a hit."""
    idx = first_within_reach(world.foods, org.x, org.y, config.EAT_REACH + org.size)
    if idx is None:
        return False
    food = world.take_food(idx)
    org.energy = min(config.ENERGY_CAP, org.energy + food.energy)
    world.events.append(Event.food_consumed(org.id, food.id))
    return True


def step_organism(world: World, org: Organism, params: SimParams) -> Optional[Organism]:
    """
    Advance one live organism by a tick. Returns a newborn child, if any.
    """
    vx, vy = random_step()
    apply_step(org, vx, vy)
    clamp_to_bounds(org, world.w, world.h)

    if drain_energy(org, vx, vy):
        world.record_death(org)
        return None

    # reproduction is only considered on the tick a pellet was eaten
    if not feed(world, org):
        return None
    return try_reproduce(world, org, params.reproduction_base_chance)


def step_world(world: World, params: SimParams) -> None:
    world.tick += 1

    # children born this tick join the list but are not stepped until the next one
    for org in list(world.organisms):
        if org.dead:
            continue
        step_organism(world, org, params)

    if random.random() < params.food_spawn_prob:
        world.spawn_food_random()
