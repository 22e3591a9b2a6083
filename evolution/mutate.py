"""
organism_sim module: evolution/mutate.py

Mutation operator for colour DNA.
"""

from __future__ import annotations
import random
from typing import List, Sequence

import config
from organism.genome import BASELINE_COLOR, mutate_color


def mutate_dna(
    parent_dna: Sequence[str],
    mutation_rate: float,
    layer_magnitude: float = config.MUT_LAYER_MAGNITUDE,
    append_magnitude: float = config.MUT_APPEND_MAGNITUDE,
) -> List[str]:
    """
    Return a mutated copy of ``parent_dna``.

    - Each layer is re-coloured with probability ``mutation_rate``.
    - If nothing changed, a fresh baseline layer is appended with
      probability ``mutation_rate / 3`` so a uniform population can still
      diversify.

    The result is never shorter than the parent and at most one layer longer.
    """
    out: List[str] = []
    changed = False
    for layer in parent_dna:
        if random.random() < mutation_rate:
            out.append(mutate_color(layer, layer_magnitude))
            changed = True
        else:
            out.append(layer)

    if not changed and random.random() < mutation_rate / 3.0:
        out.append(mutate_color(BASELINE_COLOR, append_magnitude))

    return out
