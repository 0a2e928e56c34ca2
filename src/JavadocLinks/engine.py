# === NAVMAP v1 ===
# {
#   "module": "JavadocLinks.engine",
#   "purpose": "Resolve javadoc base URLs for dependency coordinates.",
#   "sections": [
#     {
#       "id": "outputlinkset",
#       "name": "OutputLinkSet",
#       "anchor": "class-outputlinkset",
#       "kind": "class"
#     },
#     {
#       "id": "linkresolutionengine",
#       "name": "LinkResolutionEngine",
#       "anchor": "class-linkresolutionengine",
#       "kind": "class"
#     }
#   ]
# }
# === /NAVMAP ===

"""Resolve javadoc base URLs for dependency coordinates.

For every coordinate the engine first consults the well-known link table. On
a miss it guesses the generic javadoc.io location and keeps it only if the
prober confirms a documentation index is served there. The platform (Java SE)
link always comes first in the result.

Coordinates are resolved on a thread pool, but results are appended in input
order so the output is reproducible. A failure while resolving one
coordinate is logged and costs only that coordinate's link.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, Iterator, List, Optional, Sequence

import httpx

from JavadocLinks.concurrency import create_executor
from JavadocLinks.coordinates import Coordinate
from JavadocLinks.platform_link import PlatformVersionLike, resolve_platform_link
from JavadocLinks.probe import Prober, ReachabilityProber
from JavadocLinks.settings import LinkResolverSettings
from JavadocLinks.well_known import DEFAULT_TABLE, WellKnownLinkTable

__all__ = ["LinkResolutionEngine", "OutputLinkSet"]

LOGGER = logging.getLogger(__name__)


class OutputLinkSet:
    """Insertion-ordered set of documentation base URLs."""

    def __init__(self, links: Iterable[str] = ()) -> None:
        self._links: Dict[str, None] = {}
        for link in links:
            self.add(link)

    def add(self, link: str) -> bool:
        """Append ``link`` unless already present; return whether it was added."""
        if link in self._links:
            LOGGER.debug("Link '%s' already resolved, not adding it twice", link, extra={"url": link})
            return False
        self._links[link] = None
        return True

    def as_list(self) -> List[str]:
        return list(self._links)

    def __contains__(self, link: object) -> bool:
        return link in self._links

    def __iter__(self) -> Iterator[str]:
        return iter(self._links)

    def __len__(self) -> int:
        return len(self._links)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, OutputLinkSet):
            return self.as_list() == other.as_list()
        return NotImplemented

    def __repr__(self) -> str:
        return f"OutputLinkSet({self.as_list()!r})"


class LinkResolutionEngine:
    """Turn dependency coordinates into an :class:`OutputLinkSet`.

    Args:
        prober: Reachability check used for generic javadoc.io guesses.
        table: Well-known link table consulted before any network access.
        settings: Generic hosting base URL and worker count.
    """

    def __init__(
        self,
        prober: Prober,
        *,
        table: WellKnownLinkTable = DEFAULT_TABLE,
        settings: Optional[LinkResolverSettings] = None,
    ) -> None:
        self.prober = prober
        self.table = table
        self.settings = settings or LinkResolverSettings()

    @classmethod
    def from_client(
        cls,
        client: httpx.Client,
        *,
        table: WellKnownLinkTable = DEFAULT_TABLE,
        settings: Optional[LinkResolverSettings] = None,
    ) -> "LinkResolutionEngine":
        """Build an engine probing through ``client``."""
        return cls(ReachabilityProber(client), table=table, settings=settings)

    def generic_link(self, coordinate: Coordinate) -> str:
        """Return the unverified javadoc.io-style URL for ``coordinate``."""
        return (
            f"{self.settings.generic_base_url}"
            f"{coordinate.group}/{coordinate.artifact}/{coordinate.version}/"
        )

    def resolve_coordinate(self, coordinate: Coordinate) -> Optional[str]:
        """Resolve a single coordinate, or return ``None`` when no link applies."""

        well_known = self.table.lookup(coordinate)
        if well_known is not None:
            LOGGER.info(
                "Using well known link '%s' for '%s'",
                well_known,
                coordinate,
                extra={"coordinate": coordinate, "url": well_known},
            )
            return well_known

        candidate = self.generic_link(coordinate)
        if self.prober.probe(candidate):
            LOGGER.info(
                "Using javadoc.io link for '%s'",
                coordinate,
                extra={"coordinate": coordinate, "url": candidate},
            )
            return candidate

        LOGGER.debug(
            "No javadoc found for '%s' at %s",
            coordinate,
            candidate,
            extra={"coordinate": coordinate, "url": candidate},
        )
        return None

    def _resolve_isolated(self, coordinate: Coordinate) -> Optional[str]:
        try:
            return self.resolve_coordinate(coordinate)
        except Exception:
            LOGGER.warning(
                "Unable to resolve javadoc link for '%s'",
                coordinate,
                exc_info=True,
                extra={"coordinate": coordinate},
            )
            return None

    def resolve(
        self,
        coordinates: Sequence[Coordinate],
        platform_version: PlatformVersionLike,
    ) -> OutputLinkSet:
        """Resolve the platform link plus one link per resolvable coordinate.

        Args:
            coordinates: Resolved dependencies, in the order links should appear.
            platform_version: Java platform version the docs are generated for.

        Returns:
            OutputLinkSet: Platform link first, then dependency links in input order.
        """

        links = OutputLinkSet()
        links.add(resolve_platform_link(platform_version))

        coordinates = list(coordinates)
        executor, needs_shutdown = create_executor(min(self.settings.max_workers, len(coordinates)))
        try:
            if executor is None:
                resolved = [self._resolve_isolated(coordinate) for coordinate in coordinates]
            else:
                resolved = list(executor.map(self._resolve_isolated, coordinates))
        finally:
            if needs_shutdown and executor is not None:
                executor.shutdown(wait=True)

        for link in resolved:
            if link is not None:
                links.add(link)
        return links
