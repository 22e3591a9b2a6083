"""
Fixed-period driver that advances the simulation on a background thread.
"""

from __future__ import annotations
import logging
import threading
import time
from typing import Optional

import config
from sim.service import SimulationService

logger = logging.getLogger(__name__)


class TickScheduler:
    """
    Calls ``service.step()`` once every ``interval`` seconds until stopped.

    Deadlines advance by a fixed amount, so a slow tick shortens the next
    wait instead of shifting the whole schedule. A tick that overruns a
    full period fires the next one immediately; there is one driver
    thread, so steps never overlap.
    """

    def __init__(self, service: SimulationService, interval: float = config.TICK_INTERVAL) -> None:
        self.service = service
        self.interval = interval
        self._stop = threading.Event()
        self._thread: Optional[threading.Thread] = None

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        if self.running:
            return
        self._stop.clear()
        self._thread = threading.Thread(target=self._run, name="tick-scheduler", daemon=True)
        self._thread.start()
        logger.info("Tick scheduler started (interval=%.3fs)", self.interval)

    def stop(self, timeout: Optional[float] = None) -> None:
        self._stop.set()
        if self._thread is not None:
            self._thread.join(timeout)
            if self._thread.is_alive():
                logger.warning("Tick scheduler still finishing a step after %ss", timeout)
                return
            self._thread = None
            logger.info("Tick scheduler stopped")

    def _run(self) -> None:
        next_at = time.monotonic() + self.interval
        while not self._stop.wait(max(0.0, next_at - time.monotonic())):
            try:
                self.service.step()
            except Exception:
                logger.exception("Simulation step failed")
            next_at += self.interval
            now = time.monotonic()
            if next_at < now:
                next_at = now
