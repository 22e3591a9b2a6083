"""
organism_sim module: render/viewer.py

Live window onto a running simulation server.
Polls GET /state, draws the world, and turns mouse clicks into POST /touch.
"""

from __future__ import annotations
import logging
from typing import Optional
import urllib.error
import urllib.request

import orjson
import pygame

import config
from render import colors
from render.renderer import draw_food, draw_hud, draw_organism, hud_stats, screen_to_world

logger = logging.getLogger(__name__)


class SimClient:
    def __init__(self, base_url: str, timeout: float = 1.0) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def _request(self, path: str, body: Optional[dict] = None):
        data = orjson.dumps(body) if body is not None else None
        req = urllib.request.Request(self.base_url + path, data=data, method="POST" if data else "GET")
        if data is not None:
            req.add_header("Content-Type", "application/json")
        with urllib.request.urlopen(req, timeout=self.timeout) as resp:
            return orjson.loads(resp.read())

    def state(self) -> dict:
        return self._request("/state")

    def world_size(self) -> tuple[float, float]:
        cfg = self._request("/config")
        return float(cfg["worldWidth"]), float(cfg["worldHeight"])

    def touch(self, x: float, y: float) -> dict:
        return self._request("/touch", {"x": x, "y": y})


def run_viewer(url: str = config.VIEW_URL, poll: float = config.VIEW_POLL_SECONDS) -> None:
    client = SimClient(url)
    try:
        world = client.world_size()
    except (urllib.error.URLError, OSError, orjson.JSONDecodeError) as e:
        logger.warning("Could not read world size from %s (%s); assuming defaults", url, e)
        world = (config.WORLD_W, config.WORLD_H)

    pygame.init()
    screen = pygame.display.set_mode((config.VIEW_W, config.VIEW_H))
    pygame.display.set_caption(f"ameba_sim viewer - {url}")
    clock = pygame.time.Clock()

    state: dict = {}
    error = ""
    since_poll = poll
    running = True

    while running:
        since_poll += clock.tick(60) / 1000.0

        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                running = False
            elif e.type == pygame.MOUSEBUTTONDOWN and e.button == 1:
                wx, wy = screen_to_world(e.pos[0], e.pos[1], world, screen.get_size())
                try:
                    client.touch(wx, wy)
                except (urllib.error.URLError, OSError) as err:
                    logger.warning("Touch failed: %s", err)

        if since_poll >= poll:
            since_poll = 0.0
            try:
                state = client.state()
                error = ""
            except (urllib.error.URLError, OSError, orjson.JSONDecodeError) as err:
                # keep drawing the last good frame
                logger.warning("Poll failed: %s", err)
                error = str(err)

        screen.fill(colors.BG)
        draw_food(screen, state.get("maps", {}).get("foods", []), world)
        for org in state.get("organisms", []):
            draw_organism(screen, org, world)

        stats = hud_stats(state)
        stats["error"] = error
        draw_hud(screen, stats)

        pygame.display.flip()

    pygame.quit()
