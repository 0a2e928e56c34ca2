"""Dependency coordinate value type."""

from __future__ import annotations

from dataclasses import dataclass

from JavadocLinks.errors import InvalidCoordinateError

__all__ = ["Coordinate"]


@dataclass(frozen=True)
class Coordinate:
    """Identity of a resolved dependency.

    Attributes:
        group: Group id, e.g. ``org.springframework``.
        artifact: Artifact (module) name, e.g. ``spring-core``.
        version: Resolved version string, e.g. ``5.3.0``.

    Examples:
        >>> Coordinate.parse("org.springframework:spring-core:5.3.0").artifact
        'spring-core'
    """

    group: str
    artifact: str
    version: str

    @classmethod
    def parse(cls, notation: str) -> "Coordinate":
        """Build a coordinate from ``group:artifact:version`` notation.

        A trailing classifier or extension (``g:a:v:classifier``) is ignored,
        since documentation is published per version.

        Raises:
            InvalidCoordinateError: If any of the three parts is missing.
        """

        parts = [part.strip() for part in notation.strip().split(":")]
        if len(parts) < 3 or not all(parts[:3]):
            raise InvalidCoordinateError(
                f"Expected 'group:artifact:version', got {notation!r}", notation=notation
            )
        group, artifact, version = parts[:3]
        return cls(group=group, artifact=artifact, version=version)

    def __str__(self) -> str:
        return f"{self.group}:{self.artifact}:{self.version}"
