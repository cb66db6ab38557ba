"""Best-effort boundary between deconstruction and a cache write."""

from __future__ import annotations

import inspect
from typing import Any

from loguru import logger
from pydantic_core import PydanticSerializationError, to_jsonable_python

from gqlcache.deconstructor import Deconstructor
from gqlcache.errors import UncacheableValueError
from gqlcache.shapes import DEFAULT_PROBE, ShapeProbe
from gqlcache.types import CacheValue, RawValue

UNCACHEABLE = object()


def ensure_cacheable(value: CacheValue) -> CacheValue:
    """Return ``value`` unchanged if a cache store can serialize it."""

    try:
        to_jsonable_python(value)
    except PydanticSerializationError as error:
        raise UncacheableValueError(f"Value of type {type(value).__name__} cannot be cached") from error
    return value


def is_cacheable(result: Any) -> bool:
    return result is not UNCACHEABLE


async def deconstruct_for_cache(
    raw: RawValue,
    *,
    field: str | None = None,
    probe: ShapeProbe = DEFAULT_PROBE,
) -> CacheValue | Any:
    """Deconstruct ``raw`` for a cache write, returning UNCACHEABLE on failure.

    Failures are logged and never raised: the field is simply not cached this
    cycle, while the resolved data still reaches the query layer.
    """
    field_name = field or "<unknown>"
    try:
        deconstructor = Deconstructor.for_value(raw, probe)
        logger.debug("cache.deconstruct field={} shape={}", field_name, deconstructor.shape.value)
        value = deconstructor.perform()
        if inspect.isawaitable(value):
            value = await value
        return ensure_cacheable(value)
    except Exception as error:
        _log_failure(field_name, error)
        return UNCACHEABLE


def deconstruct_for_cache_sync(
    raw: RawValue,
    *,
    field: str | None = None,
    probe: ShapeProbe = DEFAULT_PROBE,
) -> CacheValue | Any:
    """Synchronous variant of deconstruct_for_cache for resolvers without a loop."""

    field_name = field or "<unknown>"
    try:
        deconstructor = Deconstructor.for_value(raw, probe)
        value = deconstructor.perform()
    except Exception as error:
        _log_failure(field_name, error)
        return UNCACHEABLE
    if inspect.isawaitable(value):
        deconstructor.discard(value)
        logger.warning("cache.async_not_supported field={}", field_name)
        return UNCACHEABLE
    try:
        return ensure_cacheable(value)
    except UncacheableValueError as error:
        _log_failure(field_name, error)
        return UNCACHEABLE


def _log_failure(field_name: str, error: Exception) -> None:
    logger.opt(exception=True).warning("cache.deconstruct_failed field={} error={}", field_name, type(error).__name__)
