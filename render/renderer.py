"""
organism_sim module: render/renderer.py

Pygame rendering of /state snapshots (top-down).
"""

from __future__ import annotations
import pygame

from render import colors


def world_to_screen(x: float, y: float, world: tuple[float, float], screen: tuple[int, int]) -> tuple[int, int]:
    return int(x / world[0] * screen[0]), int(y / world[1] * screen[1])


def screen_to_world(sx: int, sy: int, world: tuple[float, float], screen: tuple[int, int]) -> tuple[float, float]:
    return sx / screen[0] * world[0], sy / screen[1] * world[1]


def draw_food(screen: pygame.Surface, foods: list[dict], world: tuple[float, float]) -> None:
    size = screen.get_size()
    for f in foods:
        # brightness scales with energy
        v = int(110 + min(120, f.get("energy", 0.0) * 100))
        pygame.draw.circle(screen, (40, v, 60), world_to_screen(f["x"], f["y"], world, size), 3)


def draw_organism(screen: pygame.Surface, org: dict, world: tuple[float, float]) -> None:
    size = screen.get_size()
    pos = org.get("position", {})
    cx, cy = world_to_screen(pos.get("x", 0.0), pos.get("y", 0.0), world, size)
    scale = size[0] / world[0]
    body_r = max(2, int(org.get("size", 10.0) * scale))
    dead = org.get("state") == "dead"

    # DNA layers as concentric rings, newest outermost
    layers = list(org.get("dna_layers") or [])
    for i, code in reversed(list(enumerate(layers))):
        col = colors.DEAD if dead else colors.dna_rgb(code)
        pygame.draw.circle(screen, col, (cx, cy), body_r + 2 * (i + 1))

    pygame.draw.circle(screen, colors.DEAD if dead else colors.BODY, (cx, cy), body_r)
    if not dead:
        pygame.draw.circle(screen, colors.EYE, (cx + body_r // 3, cy - body_r // 3), max(1, body_r // 4))


def draw_hud(screen: pygame.Surface, stats: dict) -> None:
    font = pygame.font.Font(None, 26)

    lines = [
        f"Tick: {stats.get('tick', 0)}",
        f"Population: {stats.get('population', 0)}  Alive: {stats.get('alive', 0)}",
        f"Food: {stats.get('food', 0)}",
    ]
    if stats.get("error"):
        lines.append(f"Offline: {stats['error']}")

    y = 10
    for line in lines:
        txt = font.render(line, True, colors.HUD)
        screen.blit(txt, (12, y))
        y += 22


def hud_stats(state: dict) -> dict:
    organisms = state.get("organisms", [])
    return {
        "tick": state.get("tick", 0),
        "population": len(organisms),
        "alive": sum(1 for o in organisms if o.get("state") != "dead"),
        "food": len(state.get("maps", {}).get("foods", [])),
    }
