# === NAVMAP v1 ===
# {
#   "module": "JavadocLinks.errors",
#   "purpose": "Exception taxonomy for javadoc link resolution.",
#   "sections": [
#     {
#       "id": "javadoclinkserror",
#       "name": "JavadocLinksError",
#       "anchor": "class-javadoclinkserror",
#       "kind": "class"
#     },
#     {
#       "id": "invalidcoordinateerror",
#       "name": "InvalidCoordinateError",
#       "anchor": "class-invalidcoordinateerror",
#       "kind": "class"
#     },
#     {
#       "id": "invalidplatformversionerror",
#       "name": "InvalidPlatformVersionError",
#       "anchor": "class-invalidplatformversionerror",
#       "kind": "class"
#     },
#     {
#       "id": "malformedversionerror",
#       "name": "MalformedVersionError",
#       "anchor": "class-malformedversionerror",
#       "kind": "class"
#     },
#     {
#       "id": "configurationerror",
#       "name": "ConfigurationError",
#       "anchor": "class-configurationerror",
#       "kind": "class"
#     }
#   ]
# }
# === /NAVMAP ===

"""Exception taxonomy for javadoc link resolution.

Responsibilities
----------------
- Give callers a single base class (:class:`JavadocLinksError`) to catch.
- Separate input validation failures (bad coordinates, bad platform version,
  bad settings) from the per-rule :class:`MalformedVersionError`, which the
  well-known link table absorbs instead of propagating.

Lookup misses and failed reachability probes are ordinary outcomes and have
no exception type.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:  # pragma: no cover
    from JavadocLinks.coordinates import Coordinate

__all__ = (
    "JavadocLinksError",
    "InvalidCoordinateError",
    "InvalidPlatformVersionError",
    "MalformedVersionError",
    "ConfigurationError",
)


class JavadocLinksError(Exception):
    """Base class for errors raised by :mod:`JavadocLinks`."""


class InvalidCoordinateError(JavadocLinksError, ValueError):
    """Raised when ``group:artifact:version`` notation cannot be parsed."""

    def __init__(self, message: str, *, notation: str | None = None) -> None:
        super().__init__(message)
        self.notation = notation


class InvalidPlatformVersionError(JavadocLinksError, ValueError):
    """Raised when a platform version cannot be reduced to a major number."""

    def __init__(self, message: str, *, value: Any = None) -> None:
        super().__init__(message)
        self.value = value


class MalformedVersionError(JavadocLinksError):
    """Raised by a URL template that needs a longer version string."""

    def __init__(self, coordinate: "Coordinate", *, required_length: int) -> None:
        super().__init__(
            f"Version {coordinate.version!r} of {coordinate} is shorter than the "
            f"{required_length} characters required by the link template"
        )
        self.coordinate = coordinate
        self.required_length = required_length


class ConfigurationError(JavadocLinksError):
    """Raised when settings cannot be loaded or fail validation."""

    def __init__(self, message: str, *, source: str | None = None) -> None:
        super().__init__(message)
        self.source = source
