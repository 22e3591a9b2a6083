"""
TickScheduler: periodic stepping, clean stop, survival of a failing step.
"""

import threading
import time

from sim.scheduler import TickScheduler


def wait_for(predicate, timeout: float = 3.0) -> bool:
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if predicate():
            return True
        time.sleep(0.005)
    return predicate()


def current_tick(service) -> int:
    return service.metrics_snapshot()["tick"]


def test_scheduler_advances_ticks(service):
    scheduler = TickScheduler(service, interval=0.01)
    scheduler.start()
    try:
        assert wait_for(lambda: current_tick(service) >= 5)
        assert scheduler.running
    finally:
        scheduler.stop(timeout=1.0)


def test_stop_halts_ticking(service):
    scheduler = TickScheduler(service, interval=0.01)
    scheduler.start()
    assert wait_for(lambda: current_tick(service) >= 2)
    scheduler.stop(timeout=1.0)

    assert not scheduler.running
    stopped_at = current_tick(service)
    time.sleep(0.08)
    assert current_tick(service) == stopped_at


def test_start_is_idempotent(service):
    scheduler = TickScheduler(service, interval=0.01)
    scheduler.start()
    first = scheduler._thread
    scheduler.start()
    try:
        assert scheduler._thread is first
    finally:
        scheduler.stop(timeout=1.0)


class FlakyService:
    def __init__(self):
        self.calls = 0

    def step(self):
        self.calls += 1
        if self.calls == 1:
            raise RuntimeError("first tick fails")
        return self.calls


def test_failing_step_does_not_kill_scheduler():
    flaky = FlakyService()
    scheduler = TickScheduler(flaky, interval=0.01)
    scheduler.start()
    try:
        assert wait_for(lambda: flaky.calls >= 3)
        assert scheduler.running
    finally:
        scheduler.stop(timeout=1.0)


class BlockingService:
    def __init__(self):
        self.entered = threading.Event()
        self.release = threading.Event()

    def step(self):
        self.entered.set()
        self.release.wait(5.0)


def test_stop_keeps_handle_while_step_is_running():
    blocking = BlockingService()
    scheduler = TickScheduler(blocking, interval=0.01)
    scheduler.start()
    try:
        assert blocking.entered.wait(3.0)
        thread = scheduler._thread
        scheduler.stop(timeout=0.05)
        assert scheduler._thread is thread
        assert scheduler.running
    finally:
        blocking.release.set()
        scheduler.stop(timeout=1.0)
    assert scheduler._thread is None
    assert not scheduler.running
