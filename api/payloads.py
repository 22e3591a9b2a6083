"""
Typed request bodies.

Decoding is permissive: unknown fields are ignored, missing or wrong-typed
fields fall back to their defaults, and a body that is not a JSON object
decodes to an all-default payload. No request is rejected for its body.
"""

from __future__ import annotations
import logging
from typing import Dict, Optional, Type, TypeVar

import orjson
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

logger = logging.getLogger(__name__)

P = TypeVar("P", bound=BaseModel)


def _is_number(v: object) -> bool:
    return isinstance(v, (int, float)) and not isinstance(v, bool)


class Payload(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class SpawnRequest(Payload):
    seed_traits: Dict[str, float] = Field(default_factory=dict, alias="seedTraits")

    @field_validator("seed_traits", mode="before")
    @classmethod
    def _numeric_entries(cls, v):
        if not isinstance(v, dict):
            return {}
        return {k: val for k, val in v.items() if _is_number(val)}


class TouchRequest(Payload):
    x: float = 0.0
    y: float = 0.0

    @field_validator("x", "y", mode="before")
    @classmethod
    def _zero_if_not_number(cls, v):
        return v if _is_number(v) else 0.0


class ConfigUpdate(Payload):
    """Accepted by POST /config; never applied to the running simulation."""

    food_spawn_prob: Optional[float] = Field(default=None, alias="foodSpawnProb")
    reproduction_base_chance: Optional[float] = Field(default=None, alias="reproductionBaseChance")

    @field_validator("food_spawn_prob", "reproduction_base_chance", mode="before")
    @classmethod
    def _none_if_not_number(cls, v):
        return v if _is_number(v) else None


def decode_body(model: Type[P], raw: bytes) -> P:
    try:
        data = orjson.loads(raw) if raw else {}
    except orjson.JSONDecodeError:
        logger.debug("Undecodable %s body, using defaults", model.__name__)
        data = {}
    if not isinstance(data, dict):
        data = {}
    try:
        return model.model_validate(data)
    except ValidationError as e:
        logger.debug("Invalid %s body (%s), using defaults", model.__name__, e.error_count())
        return model()
