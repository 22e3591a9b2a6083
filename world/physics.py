"""
organism_sim module: world/physics.py

Top-down 2D motion:
- organisms random-walk with an independent uniform step per axis
- positions are clamped to the world rectangle (no wrap)
- drain_energy charges a metabolic base cost plus a cost per unit of motion
"""

from __future__ import annotations
import random
from typing import Tuple

import config
from organism.organism import Organism


def random_step(max_step: float = config.MAX_STEP) -> Tuple[float, float]:
    return random.uniform(-max_step, max_step), random.uniform(-max_step, max_step)


def apply_step(org: Organism, vx: float, vy: float) -> None:
    org.x += vx
    org.y += vy
    org.vx = vx
    org.vy = vy


def clamp_to_bounds(org: Organism, w: float, h: float) -> None:
    org.x = max(0.0, min(w, org.x))
    org.y = max(0.0, min(h, org.y))


def motion_cost(vx: float, vy: float) -> float:
    return config.BASE_DRAIN + config.MOTION_DRAIN * (abs(vx) + abs(vy))


def drain_energy(org: Organism, vx: float, vy: float) -> bool:
    """
    Charge this tick's metabolism. Returns True if the organism starved.
    """
    org.energy -= motion_cost(vx, vy)
    if org.energy <= 0.0:
        org.die()
        return True
    return False
