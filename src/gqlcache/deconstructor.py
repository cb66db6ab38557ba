"""Reduce resolver results to values a cache store can persist.

Graph-query objects (domain wrappers, paginated connections, pending
awaitables) cannot be serialized, so a resolver result is deconstructed into
plain scalars and lists before it is written to cache. Deconstruction stays
synchronous unless some part of the value is still pending, in which case the
result is a coroutine that resolves to the fully reduced value.
"""

from __future__ import annotations

import asyncio
import inspect
from collections.abc import Awaitable, Sequence
from typing import Any

from gqlcache.shapes import DEFAULT_PROBE, ShapeProbe
from gqlcache.types import CacheValue, RawValue, ShapeTag


class Deconstructor:
    """Deconstructs one raw resolver value into a cache value."""

    def __init__(self, raw: RawValue, shape: ShapeTag | None = None, probe: ShapeProbe = DEFAULT_PROBE) -> None:
        self.raw = raw
        self.probe = probe
        # A caller that already knows the shape may skip probing.
        self.shape = probe.classify(raw) if shape is None else ShapeTag(shape)

    @classmethod
    def for_value(cls, raw: RawValue, probe: ShapeProbe = DEFAULT_PROBE) -> Deconstructor:
        return cls(raw, probe.classify(raw), probe)

    def perform(self) -> CacheValue | Awaitable[CacheValue]:
        """Deconstruct ``raw`` into a cachable value or an awaitable of one."""

        if self.shape is ShapeTag.FUTURE:
            return self._resolve(self.raw)
        if self.shape is ShapeTag.SEQUENCE:
            return self._deconstruct_sequence(self.raw)
        if self.shape is ShapeTag.CONNECTION:
            return self._deconstruct_sequence(list(self.probe.nodes(self.raw)))
        if self.shape is ShapeTag.WRAPPER:
            return self.probe.inner(self.raw)
        return self.raw

    async def _resolve(self, pending: Awaitable[Any]) -> CacheValue:
        resolved = await pending
        return await _settle(deconstruct(resolved, self.probe))

    def discard(self, result: CacheValue | Awaitable[CacheValue]) -> None:
        """Close a deferred ``perform`` result that will never be awaited."""

        if inspect.iscoroutine(result):
            result.close()
        _close_pending(self.raw, self.probe)

    def _deconstruct_sequence(self, items: Sequence[Any]) -> CacheValue | Awaitable[CacheValue]:
        if len(items) == 0:
            return []

        try:
            deferred = any(_has_pending(item, self.probe) for item in items)
        except Exception:
            _close_pending(items, self.probe)
            raise
        if deferred:
            # Element errors must reject the returned awaitable, so reduction waits too.
            return self._join(items)

        if all(self.probe.classify(item) is ShapeTag.WRAPPER for item in items):
            return [self.probe.inner(item) for item in items]

        reduced = [deconstruct(item, self.probe) for item in items]
        if any(value is not item for value, item in zip(reduced, items, strict=True)):
            return reduced
        if isinstance(items, (list, tuple)):
            return items
        return list(items)

    async def _join(self, items: Sequence[Any]) -> list[CacheValue]:
        reduced: list[Any] = []
        try:
            for item in items:
                reduced.append(deconstruct(item, self.probe))
        except Exception:
            _close_pending(reduced, self.probe)
            _close_pending(items, self.probe)
            raise

        pending = [index for index, value in enumerate(reduced) if inspect.isawaitable(value)]
        # gather keeps argument order, so results are spliced back by position.
        values = await asyncio.gather(*(reduced[index] for index in pending))
        for index, value in zip(pending, values, strict=True):
            reduced[index] = value
        return reduced


def _has_pending(raw: RawValue, probe: ShapeProbe) -> bool:
    # Wrappers are not probed: their accessor may raise and their inner values are plain.
    if probe.is_future(raw):
        return True
    if probe.is_connection(raw):
        return any(_has_pending(node, probe) for node in probe.nodes(raw))
    if probe.is_sequence(raw):
        return any(_has_pending(item, probe) for item in raw)
    return False


def _close_pending(raw: RawValue, probe: ShapeProbe) -> None:
    if inspect.iscoroutine(raw):
        raw.close()
    elif probe.is_connection(raw):
        _close_pending(list(probe.nodes(raw)), probe)
    elif probe.is_sequence(raw):
        for item in raw:
            _close_pending(item, probe)


async def _settle(value: CacheValue | Awaitable[CacheValue]) -> CacheValue:
    if inspect.isawaitable(value):
        return await value
    return value


def deconstruct(raw: RawValue, probe: ShapeProbe = DEFAULT_PROBE) -> CacheValue | Awaitable[CacheValue]:
    """Deconstruct a resolver result into a value suitable for writing to cache.

    Args:
        raw: Any value a field resolver may return.
        probe: Capability probe deciding how values are classified.

    Returns:
        The reduced value, or a coroutine resolving to it when any part of
        ``raw`` was still pending.
    """
    return Deconstructor.for_value(raw, probe).perform()
