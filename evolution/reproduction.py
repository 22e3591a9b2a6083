"""
Live reproduction: a well-fed parent buds one mutated child.
"""

from __future__ import annotations
import random
from typing import Optional

import config
from evolution.mutate import mutate_dna
from organism.organism import Organism
from world.events import Event
from world.world import World


def ready_to_reproduce(org: Organism, base_chance: float) -> bool:
    return org.energy > config.REPRO_ENERGY_THRESHOLD and random.random() < base_chance


def spawn_child(
    world: World,
    parent: Organism,
    mutation_rate: float = config.DNA_MUTATION_RATE,
    cost: float = config.REPRO_COST,
) -> Organism:
    """
    Create one child through the regular creation path with inherited,
    possibly mutated DNA, then charge the parent.
    """
    child_dna = mutate_dna(parent.dna, mutation_rate)
    child = world.new_organism(dna=child_dna)
    world.record_birth(child, parent)
    if child.dna != parent.dna:
        world.events.append(Event.mutation(child.id, child.dna))
    parent.energy -= cost
    return child


def try_reproduce(world: World, parent: Organism, base_chance: float) -> Optional[Organism]:
    if not ready_to_reproduce(parent, base_chance):
        return None
    return spawn_child(world, parent)
