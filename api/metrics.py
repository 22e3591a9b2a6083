"""
Prometheus exposition of the world counters.

The collector reads one metrics snapshot per scrape, so all samples in a
response come from the same tick.
"""

from __future__ import annotations
from typing import TYPE_CHECKING

from prometheus_client import CollectorRegistry, generate_latest
from prometheus_client.core import CounterMetricFamily, GaugeMetricFamily
from prometheus_client.registry import Collector

if TYPE_CHECKING:
    from sim.service import SimulationService

# text exposition format 0.0.4, which generate_latest emits
CONTENT_TYPE = "text/plain; version=0.0.4; charset=utf-8"


class WorldCollector(Collector):
    def __init__(self, service: "SimulationService") -> None:
        self.service = service

    def collect(self):
        m = self.service.metrics_snapshot()
        yield GaugeMetricFamily("ameba_population", "Current population", value=m["population"])
        yield GaugeMetricFamily("ameba_avg_energy", "Average organism energy", value=m["avgEnergy"])
        yield CounterMetricFamily("ameba_births", "Total births", value=m["births"])
        yield CounterMetricFamily("ameba_deaths", "Total deaths", value=m["deaths"])
        yield GaugeMetricFamily("ameba_tick", "Current tick", value=m["tick"])


def build_registry(service: "SimulationService") -> CollectorRegistry:
    registry = CollectorRegistry()
    registry.register(WorldCollector(service))
    return registry


def render(registry: CollectorRegistry) -> bytes:
    return generate_latest(registry)
