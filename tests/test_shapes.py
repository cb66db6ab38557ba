from __future__ import annotations

from typing import Any

import pytest
from support import CustomerType, Pending, resolve_later

from gqlcache import DEFAULT_PROBE, BaseConnection, ShapeProbe, ShapeTag, classify
from gqlcache.config import Settings
from gqlcache.errors import ConfigurationError


class IterableConnection(BaseConnection):
    def __iter__(self):
        return iter(self.nodes)


class Record:
    def __init__(self, record: Any) -> None:
        self.record = record


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("text", ShapeTag.SCALAR),
        (b"bytes", ShapeTag.SCALAR),
        (42, ShapeTag.SCALAR),
        (None, ShapeTag.SCALAR),
        ({"id": 1}, ShapeTag.SCALAR),
        ({1, 2}, ShapeTag.SCALAR),
        ([1, 2], ShapeTag.SEQUENCE),
        ((1, 2), ShapeTag.SEQUENCE),
        (range(3), ShapeTag.SEQUENCE),
        (BaseConnection([1]), ShapeTag.CONNECTION),
        (CustomerType("foo"), ShapeTag.WRAPPER),
        (Pending(), ShapeTag.FUTURE),
    ],
)
def test_classify(raw: Any, expected: ShapeTag) -> None:
    assert classify(raw) is expected


def test_classify_coroutine_as_future() -> None:
    coroutine = resolve_later(1)
    try:
        assert classify(coroutine) is ShapeTag.FUTURE
    finally:
        coroutine.close()


def test_iterable_connection_is_still_a_connection() -> None:
    assert classify(IterableConnection([1, 2])) is ShapeTag.CONNECTION


def test_list_of_wrappers_is_a_sequence() -> None:
    assert classify([CustomerType("foo")]) is ShapeTag.SEQUENCE


def test_classes_are_not_sequences() -> None:
    assert classify(list) is ShapeTag.SCALAR


def test_custom_wrapper_attribute() -> None:
    probe = ShapeProbe(wrapper_attribute="record")

    assert classify(Record("r1"), probe) is ShapeTag.WRAPPER
    assert classify(CustomerType("foo"), probe) is ShapeTag.SCALAR


def test_probe_from_settings() -> None:
    probe = ShapeProbe.from_settings(Settings(_env_file=None, wrapper_attribute="record", nodes_attribute="items"))

    assert probe.wrapper_attribute == "record"
    assert probe.nodes_attribute == "items"
    assert probe.connection_types == (BaseConnection,)


def test_register_connection_returns_new_probe() -> None:
    class Page:
        nodes: list[Any] = []

    probe = DEFAULT_PROBE.register_connection(Page)

    assert Page in probe.connection_types
    assert Page not in DEFAULT_PROBE.connection_types
    assert probe.register_connection(Page) is probe
    assert classify(Page(), probe) is ShapeTag.CONNECTION


def test_connection_without_nodes_accessor_is_not_a_connection() -> None:
    probe = ShapeProbe(nodes_attribute="items")
    assert classify(BaseConnection([1]), probe) is ShapeTag.SCALAR


@pytest.mark.parametrize("name", ["", "has space", "1st"])
def test_invalid_accessor_name_is_rejected(name: str) -> None:
    with pytest.raises(ConfigurationError, match="Invalid accessor name"):
        ShapeProbe(wrapper_attribute=name)


def test_connection_family_must_be_a_class() -> None:
    with pytest.raises(ConfigurationError, match="must be a class"):
        ShapeProbe(connection_types=("BaseConnection",))  # type: ignore[arg-type]
