"""gqlcache - deconstruct graph-query resolver results into cachable values."""

from .deconstructor import Deconstructor, deconstruct
from .guard import UNCACHEABLE, deconstruct_for_cache, deconstruct_for_cache_sync, ensure_cacheable, is_cacheable
from .shapes import DEFAULT_PROBE, BaseConnection, ShapeProbe, classify
from .types import ShapeTag

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_PROBE",
    "UNCACHEABLE",
    "BaseConnection",
    "Deconstructor",
    "ShapeProbe",
    "ShapeTag",
    "classify",
    "deconstruct",
    "deconstruct_for_cache",
    "deconstruct_for_cache_sync",
    "ensure_cacheable",
    "is_cacheable",
]
