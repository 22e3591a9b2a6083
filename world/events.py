"""
organism_sim module: world/events.py

Audit log of notable occurrences (birth, death, food_consumed, mutation).
"""

from __future__ import annotations
from collections import deque
from dataclasses import dataclass, field
import time
from typing import Deque, List, Optional, Tuple


BIRTH = "birth"
DEATH = "death"
FOOD_CONSUMED = "food_consumed"
MUTATION = "mutation"


def _now_ns() -> int:
    return time.time_ns()


@dataclass(frozen=True)
class Event:
    type: str
    organism: Optional[str] = None
    food: Optional[str] = None
    parent: Optional[str] = None
    child: Optional[str] = None
    dna: Optional[Tuple[str, ...]] = None
    at: int = field(default_factory=_now_ns)

    @staticmethod
    def birth(child_id: str, parent_id: Optional[str] = None) -> "Event":
        return Event(type=BIRTH, parent=parent_id, child=child_id)

    @staticmethod
    def death(organism_id: str) -> "Event":
        return Event(type=DEATH, organism=organism_id)

    @staticmethod
    def food_consumed(organism_id: str, food_id: str) -> "Event":
        return Event(type=FOOD_CONSUMED, organism=organism_id, food=food_id)

    @staticmethod
    def mutation(organism_id: str, dna: List[str]) -> "Event":
        return Event(type=MUTATION, organism=organism_id, dna=tuple(dna))

    def to_dict(self) -> dict:
        out: dict = {"type": self.type}
        for key in ("organism", "food", "parent", "child"):
            value = getattr(self, key)
            if value is not None:
                out[key] = value
        if self.dna is not None:
            out["dna"] = list(self.dna)
        out["at"] = self.at
        return out


class EventLog:
    """
    Append-only event sequence.

    With ``limit`` set, the oldest records are evicted once the log is full.
    ``limit`` of None, 0 or a negative number keeps everything.
    """

    def __init__(self, limit: Optional[int] = None):
        self.limit = limit if limit and limit > 0 else None
        self._events: Deque[Event] = deque(maxlen=self.limit)

    def append(self, event: Event) -> None:
        self._events.append(event)

    def __len__(self) -> int:
        return len(self._events)

    def of_type(self, kind: str) -> List[Event]:
        return [e for e in self._events if e.type == kind]

    def to_list(self) -> List[dict]:
        return [e.to_dict() for e in self._events]
