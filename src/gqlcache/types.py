"""Shape tags and value aliases shared across the package."""

from __future__ import annotations

from enum import Enum
from typing import Any, TypeAlias

RawValue: TypeAlias = Any
CacheValue: TypeAlias = Any


class ShapeTag(str, Enum):
    """Structural classification of a resolver result."""

    SCALAR = "scalar"
    WRAPPER = "wrapper"
    SEQUENCE = "sequence"
    CONNECTION = "connection"
    FUTURE = "future"
