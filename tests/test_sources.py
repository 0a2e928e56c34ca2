"""Flattening of classpath-like dependency sources."""

from __future__ import annotations

import pytest

from JavadocLinks.coordinates import Coordinate
from JavadocLinks.errors import InvalidCoordinateError
from JavadocLinks.sources import LazySource, UnionSource, flatten

SPRING = Coordinate("org.springframework", "spring-core", "5.3.0")
JETTY = Coordinate("org.eclipse.jetty", "jetty-server", "9.4.35")


def test_single_coordinate_and_notation():
    assert flatten(SPRING) == [SPRING]
    assert flatten("org.eclipse.jetty:jetty-server:9.4.35") == [JETTY]


def test_nested_union_and_lazy_sources_keep_encounter_order():
    source = UnionSource.of(
        [SPRING],
        LazySource(lambda: UnionSource.of("com.example:widget:1.0.0", None)),
        (JETTY,),
        {"group": "org.ow2.asm", "artifact": "asm", "version": "9.0"},
    )

    assert flatten(source) == [
        SPRING,
        Coordinate("com.example", "widget", "1.0.0"),
        JETTY,
        Coordinate("org.ow2.asm", "asm", "9.0"),
    ]


def test_lazy_source_is_evaluated_on_flatten_only():
    calls: list[int] = []

    def supplier():
        calls.append(1)
        return [SPRING]

    source = LazySource(supplier)
    assert calls == []

    assert flatten(source) == [SPRING]
    assert calls == [1]


def test_absent_lazy_source_contributes_nothing():
    assert flatten(UnionSource.of(LazySource(lambda: None), JETTY)) == [JETTY]


def test_unsupported_entries_are_ignored():
    assert flatten([SPRING, 42, object(), JETTY]) == [SPRING, JETTY]


def test_invalid_notation_raises():
    with pytest.raises(InvalidCoordinateError):
        flatten(["org.example:only-two"])


def test_duplicates_are_preserved():
    assert flatten([SPRING, SPRING]) == [SPRING, SPRING]


def test_mapping_entries_are_coordinates():
    entry = {"group": "org.ow2.asm", "artifact": "asm", "version": 9, "scope": "compile"}

    assert flatten([entry]) == [Coordinate("org.ow2.asm", "asm", "9")]


@pytest.mark.parametrize(
    "entry",
    [
        {"group": "org.ow2.asm", "artifact": "asm"},
        {"group": "org.ow2.asm", "version": "9.0"},
        {"artifact": "asm", "version": "9.0"},
        {"group": " ", "artifact": "asm", "version": "9.0"},
    ],
)
def test_incomplete_mapping_raises(entry):
    with pytest.raises(InvalidCoordinateError):
        flatten([entry])
