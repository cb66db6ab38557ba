"""Capability probes that classify resolver results by shape."""

from __future__ import annotations

import inspect
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field, replace
from typing import Any

from gqlcache.config import Settings
from gqlcache.errors import ConfigurationError
from gqlcache.types import RawValue, ShapeTag

_TEXT_TYPES = (str, bytes, bytearray, memoryview)
_SEQUENCE_PROTOCOL = ("__len__", "__getitem__", "__iter__")


@dataclass(frozen=True)
class BaseConnection:
    """Paginated result: an ordered page of nodes plus edge metadata.

    Schema layers subclass this (or register their own connection family on a
    ``ShapeProbe``). Only ``nodes`` is ever read when deconstructing.
    """

    nodes: Sequence[Any]
    edges: Sequence[Any] = ()
    page_info: Mapping[str, Any] | None = None


@dataclass(frozen=True)
class ShapeProbe:
    """Ordered capability checks used to tag a raw value.

    Probe order is significant: future, connection, sequence, wrapper, and
    scalar as the fallback for anything else.
    """

    wrapper_attribute: str = "object"
    nodes_attribute: str = "nodes"
    connection_types: tuple[type, ...] = field(default=(BaseConnection,))

    def __post_init__(self) -> None:
        for name in (self.wrapper_attribute, self.nodes_attribute):
            if not name.isidentifier():
                raise ConfigurationError(f"Invalid accessor name: {name!r}")
        for connection_type in self.connection_types:
            if not isinstance(connection_type, type):
                raise ConfigurationError(f"Connection family must be a class: {connection_type!r}")

    @classmethod
    def from_settings(cls, settings: Settings) -> ShapeProbe:
        return cls(wrapper_attribute=settings.wrapper_attribute, nodes_attribute=settings.nodes_attribute)

    def register_connection(self, connection_type: type) -> ShapeProbe:
        """Return a probe that also recognizes ``connection_type`` as a connection."""

        if connection_type in self.connection_types:
            return self
        return replace(self, connection_types=(*self.connection_types, connection_type))

    def is_future(self, raw: RawValue) -> bool:
        return inspect.isawaitable(raw)

    def is_connection(self, raw: RawValue) -> bool:
        return isinstance(raw, self.connection_types) and hasattr(raw, self.nodes_attribute)

    def is_sequence(self, raw: RawValue) -> bool:
        if isinstance(raw, _TEXT_TYPES):
            return False
        if isinstance(raw, Sequence):
            return True
        if isinstance(raw, Mapping):
            return False
        # Lazy collections (query sets, relation proxies) rarely register with the ABC.
        return all(hasattr(type(raw), name) for name in _SEQUENCE_PROTOCOL)

    def is_wrapper(self, raw: RawValue) -> bool:
        return hasattr(raw, self.wrapper_attribute)

    def classify(self, raw: RawValue) -> ShapeTag:
        if self.is_future(raw):
            return ShapeTag.FUTURE
        if self.is_connection(raw):
            return ShapeTag.CONNECTION
        if self.is_sequence(raw):
            return ShapeTag.SEQUENCE
        if self.is_wrapper(raw):
            return ShapeTag.WRAPPER
        return ShapeTag.SCALAR

    def inner(self, raw: RawValue) -> Any:
        return getattr(raw, self.wrapper_attribute)

    def nodes(self, raw: RawValue) -> Any:
        return getattr(raw, self.nodes_attribute)


DEFAULT_PROBE = ShapeProbe()


def classify(raw: RawValue, probe: ShapeProbe = DEFAULT_PROBE) -> ShapeTag:
    """Tag ``raw`` with the shape the deconstructor will reduce it as."""

    return probe.classify(raw)
