"""Flatten classpath-like inputs into a plain coordinate list.

Build tools hand over dependencies in several shapes: a resolved coordinate,
``group:artifact:version`` notation, a lazily evaluated provider, a union of
other sources, or any iterable mixing those. The engine only accepts a
sequence of :class:`Coordinate`, so callers run their input through
:func:`flatten` first.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, List, Mapping, Tuple

from JavadocLinks.coordinates import Coordinate
from JavadocLinks.errors import InvalidCoordinateError

__all__ = ["LazySource", "UnionSource", "flatten", "iter_coordinates"]

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class LazySource:
    """Source evaluated only when flattened; ``None`` means "not present"."""

    supplier: Callable[[], Any]

    def get(self) -> Any:
        return self.supplier()


@dataclass(frozen=True)
class UnionSource:
    """Concatenation of several sources, flattened in order."""

    sources: Tuple[Any, ...]

    @classmethod
    def of(cls, *sources: Any) -> "UnionSource":
        return cls(tuple(sources))


_MAPPING_KEYS = ("group", "artifact", "version")


def _from_mapping(source: Mapping) -> Coordinate:
    values = [str(source.get(key, "")).strip() for key in _MAPPING_KEYS]
    missing = [key for key, value in zip(_MAPPING_KEYS, values) if not value]
    if missing:
        raise InvalidCoordinateError(
            f"Dependency mapping {dict(source)!r} has no {', '.join(missing)}",
            notation=":".join(values),
        )
    return Coordinate(*values)


def iter_coordinates(source: Any) -> Iterator[Coordinate]:
    """Yield every coordinate reachable from ``source`` in encounter order.

    Raises:
        InvalidCoordinateError: For strings that are not coordinate notation and
            mappings lacking a group, artifact or version.
    """

    if source is None:
        return
    if isinstance(source, Coordinate):
        yield source
    elif isinstance(source, str):
        yield Coordinate.parse(source)
    elif isinstance(source, LazySource):
        yield from iter_coordinates(source.get())
    elif isinstance(source, UnionSource):
        for nested in source.sources:
            yield from iter_coordinates(nested)
    elif isinstance(source, Mapping):
        yield _from_mapping(source)
    elif isinstance(source, Iterable):
        for item in source:
            yield from iter_coordinates(item)
    else:
        LOGGER.debug("Ignoring unsupported dependency source %r", source)


def flatten(source: Any) -> List[Coordinate]:
    """Return :func:`iter_coordinates` as a list."""
    return list(iter_coordinates(source))
