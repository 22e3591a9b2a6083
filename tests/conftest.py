"""
Shared fixtures: small worlds, quiet services and a live HTTP server.
"""

import threading

import pytest

from api.server import SimHTTPServer
from organism.organism import Organism
from sim.service import SimulationService
from sim.step import SimParams
from world.world import World


@pytest.fixture
def quiet_params() -> SimParams:
    """No random food and no reproduction, so a tick only does what a test sets up."""
    return SimParams(food_spawn_prob=0.0, reproduction_base_chance=0.0)


@pytest.fixture
def world() -> World:
    return World.create(400.0, 400.0)


@pytest.fixture
def service(quiet_params) -> SimulationService:
    return SimulationService(world=World.create(2000.0, 2000.0), params=quiet_params)


@pytest.fixture
def live_server(service):
    server = SimHTTPServer(("127.0.0.1", 0), service)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    yield f"http://127.0.0.1:{server.server_address[1]}"
    server.shutdown()
    server.server_close()
    thread.join(timeout=2.0)


@pytest.fixture
def make_org():
    return _make_organism


def _make_organism(
    org_id: str = "o1",
    x: float = 100.0,
    y: float = 100.0,
    size: float = 10.0,
    energy: float = 1.0,
    dna=None,
) -> Organism:
    return Organism(id=org_id, x=x, y=y, size=size, energy=energy, dna=list(dna or ["#88c1ff"]))
