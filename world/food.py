"""
organism_sim module: world/food.py

Food system:
- Pellets sit at a fixed position with a fixed energy value
- Spawned one at a time (random or exact position) or scattered around a touch
- Removed exactly once, by the first organism that reaches them
"""

from __future__ import annotations
from dataclasses import dataclass
import random
from typing import List, Optional, Tuple

import config


@dataclass(frozen=True)
class Food:
    id: str
    x: float
    y: float
    energy: float

    def to_dict(self) -> dict:
        return {"id": self.id, "x": self.x, "y": self.y, "energy": self.energy}


def random_food_energy() -> float:
    return random.uniform(*config.FOOD_ENERGY_RANGE)


def touch_scatter(
    x: float,
    y: float,
    n: int = config.TOUCH_FOOD_COUNT,
    jitter: float = config.TOUCH_JITTER,
) -> List[Tuple[float, float]]:
    """
    Positions for ``n`` pellets jittered uniformly within +-jitter of (x, y).
    """
    return [
        (x + random.uniform(-jitter, jitter), y + random.uniform(-jitter, jitter))
        for _ in range(n)
    ]


def first_within_reach(foods: List[Food], x: float, y: float, reach: float) -> Optional[int]:
    """
    Index of the first pellet (in list order) strictly within ``reach`` of (x, y).

    First match wins, not the nearest one.
    """
    reach2 = reach * reach
    for i, f in enumerate(foods):
        dx = f.x - x
        dy = f.y - y
        if dx * dx + dy * dy < reach2:
            return i
    return None
