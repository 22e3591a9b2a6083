"""
organism_sim module: organism/genome.py

Genome codec for trait colours.

DNA is an ordered list of colour codes ("#rrggbb" or shorthand "#rgb").
A layer mutates by nudging each 8-bit channel and clamping it back into range.
Codes that do not parse are returned unchanged.
"""

from __future__ import annotations
import random
import string
from typing import List, Optional, Tuple

import config

BASELINE_COLOR = config.BASE_COLOR


def default_dna() -> List[str]:
    return [BASELINE_COLOR]


def normalize_hex(code: str) -> str:
    """
    Strip the leading '#' and expand 3-digit shorthand ("abc" -> "aabbcc").
    """
    h = code[1:] if code.startswith("#") else code
    if len(h) == 3:
        h = "".join(c + c for c in h)
    return h


def parse_rgb(code: str) -> Optional[Tuple[int, int, int]]:
    h = normalize_hex(code)
    # int() alone would also accept signs, underscores and whitespace
    if not h or any(c not in string.hexdigits for c in h):
        return None
    v = int(h, 16)
    return (v >> 16) & 0xFF, (v >> 8) & 0xFF, v & 0xFF


def _clamp_channel(c: int) -> int:
    return max(0, min(255, c))


def mutate_color(code: str, magnitude: float) -> str:
    """
    Return a perturbed copy of ``code``.

    Each channel moves by a uniform offset in [-magnitude*255, +magnitude*255].
    """
    rgb = parse_rgb(code)
    if rgb is None:
        return code

    change = int(magnitude * 255)
    r, g, b = (
        _clamp_channel(c + int(random.uniform(-1.0, 1.0) * change))
        for c in rgb
    )
    return f"#{r:02x}{g:02x}{b:02x}"
