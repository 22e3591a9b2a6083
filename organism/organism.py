"""
organism_sim module: organism/organism.py

Organism container: position, motion, energy, life state and DNA.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List

from organism.genome import default_dna


class OrganismState(Enum):
    NORMAL = "normal"
    DEAD = "dead"


@dataclass
class Organism:
    id: str
    x: float
    y: float
    size: float
    energy: float

    # last applied displacement
    vx: float = 0.0
    vy: float = 0.0

    state: OrganismState = OrganismState.NORMAL
    dna: List[str] = field(default_factory=default_dna)
    traits: Dict[str, float] = field(default_factory=dict)

    @property
    def dead(self) -> bool:
        return self.state is OrganismState.DEAD

    def die(self) -> None:
        self.energy = 0.0
        self.state = OrganismState.DEAD

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "position": {"x": self.x, "y": self.y},
            "velocity": {"x": self.vx, "y": self.vy},
            "size": self.size,
            "energy": self.energy,
            "state": self.state.value,
            "dna_layers": list(self.dna),
            "traits": dict(self.traits),
        }
