"""Java SE API documentation link for the platform running the documentation tool."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Union

from JavadocLinks.errors import InvalidPlatformVersionError

__all__ = [
    "MODERN_DOCS_MAJOR_VERSION",
    "PlatformVersion",
    "resolve_platform_link",
]

# Java 11 moved the API docs under /en/java/javase/.
MODERN_DOCS_MAJOR_VERSION = 11

_LEGACY_URL = "https://docs.oracle.com/javase/{major}/docs/api/"
_MODERN_URL = "https://docs.oracle.com/en/java/javase/{major}/docs/api/"

_VERSION_RE = re.compile(r"^\s*(\d+)(?:\.(\d+))?")

PlatformVersionLike = Union["PlatformVersion", str, int]


@dataclass(frozen=True)
class PlatformVersion:
    """Major version of the Java platform."""

    major: int

    @classmethod
    def parse(cls, value: PlatformVersionLike) -> "PlatformVersion":
        """Normalise ``value`` into a :class:`PlatformVersion`.

        Accepts integers and version strings such as ``"1.8"``, ``"8"``,
        ``"17.0.2"`` or ``"21-ea"``. Legacy ``1.x`` strings map to major ``x``.

        Raises:
            InvalidPlatformVersionError: If no major version can be derived.
        """

        if isinstance(value, PlatformVersion):
            return value
        if isinstance(value, bool):
            raise InvalidPlatformVersionError(f"Invalid platform version: {value!r}", value=value)
        if isinstance(value, int):
            major = value
        else:
            match = _VERSION_RE.match(str(value))
            if match is None:
                raise InvalidPlatformVersionError(
                    f"Invalid platform version: {value!r}", value=value
                )
            major = int(match.group(1))
            if major == 1 and match.group(2) is not None:
                major = int(match.group(2))
        if major < 1:
            raise InvalidPlatformVersionError(f"Invalid platform version: {value!r}", value=value)
        return cls(major=major)

    @property
    def is_modern(self) -> bool:
        return self.major >= MODERN_DOCS_MAJOR_VERSION

    def __str__(self) -> str:
        return str(self.major)


def resolve_platform_link(version: PlatformVersionLike) -> str:
    """Return the Java SE API base URL for ``version``.

    Examples:
        >>> resolve_platform_link("1.8")
        'https://docs.oracle.com/javase/8/docs/api/'
        >>> resolve_platform_link(17)
        'https://docs.oracle.com/en/java/javase/17/docs/api/'
    """

    platform = PlatformVersion.parse(version)
    template = _MODERN_URL if platform.is_modern else _LEGACY_URL
    return template.format(major=platform.major)
