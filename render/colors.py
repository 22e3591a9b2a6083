"""
organism_sim module: render/colors.py

Central color palette.
"""

from typing import Tuple

from organism.genome import parse_rgb

BG = (12, 18, 24)
HUD = (235, 235, 235)
FOOD = (70, 200, 90)
DEAD = (70, 70, 78)
BODY = (200, 150, 220)
EYE = (10, 10, 10)


def dna_rgb(code: str, fallback: Tuple[int, int, int] = BODY) -> Tuple[int, int, int]:
    rgb = parse_rgb(code)
    return rgb if rgb is not None else fallback
