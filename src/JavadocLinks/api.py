"""High-level entry points tying sources, engine and registration together."""

from __future__ import annotations

from typing import Any, Optional

import httpx

from JavadocLinks.engine import LinkResolutionEngine, OutputLinkSet
from JavadocLinks.network import create_http_client
from JavadocLinks.platform_link import PlatformVersionLike
from JavadocLinks.registrar import DocletOptions, register_links
from JavadocLinks.settings import LinkResolverSettings
from JavadocLinks.sources import flatten
from JavadocLinks.well_known import DEFAULT_TABLE, WellKnownLinkTable

__all__ = ["resolve_javadoc_links"]


def resolve_javadoc_links(
    source: Any,
    platform_version: PlatformVersionLike,
    options: Optional[DocletOptions] = None,
    *,
    settings: Optional[LinkResolverSettings] = None,
    client: Optional[httpx.Client] = None,
    table: WellKnownLinkTable = DEFAULT_TABLE,
) -> OutputLinkSet:
    """Resolve javadoc links for ``source`` and optionally register them.

    Args:
        source: Dependencies in any shape accepted by :func:`JavadocLinks.sources.flatten`.
        platform_version: Java platform version the docs are generated for.
        options: When given, resolved links are added to ``options.links``.
        settings: Link resolver settings; defaults when omitted.
        client: HTTP client for probes. A client built from ``settings`` is
            created and closed here when omitted.
        table: Well-known link table to consult.

    Returns:
        OutputLinkSet: The resolved links.
    """

    settings = settings or LinkResolverSettings()
    coordinates = flatten(source)

    owns_client = client is None
    http_client = client if client is not None else create_http_client(settings)
    try:
        engine = LinkResolutionEngine.from_client(http_client, table=table, settings=settings)
        links = engine.resolve(coordinates, platform_version)
    finally:
        if owns_client:
            http_client.close()

    if options is not None:
        register_links(options, links)
    return links
