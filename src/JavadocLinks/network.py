"""HTTPX client factory for reachability probes.

The client is built once per resolution run (or supplied by the caller) and
shared by every worker thread; ``httpx.Client`` is safe for concurrent use.

Configuration:
- Timeouts: bounded connect/read so an unresponsive host cannot stall a run
- Transport: no connection retries; the prober's two index files are the only fallback
- Redirects: followed, javadoc hosts commonly redirect to a canonical path
- TLS: certifi CA bundle unless verification is disabled
"""

from __future__ import annotations

import logging
import ssl
from typing import Optional, Union

import certifi
import httpx

from JavadocLinks.settings import LinkResolverSettings

__all__ = ["create_http_client"]

logger = logging.getLogger(__name__)


def _create_ssl_context(verify: bool) -> Union[ssl.SSLContext, bool]:
    if not verify:
        return False
    return ssl.create_default_context(cafile=certifi.where())


def create_http_client(
    settings: Optional[LinkResolverSettings] = None,
    *,
    transport: Optional[httpx.BaseTransport] = None,
) -> httpx.Client:
    """Create an HTTPX client configured from ``settings``.

    Args:
        settings: Link resolver settings; defaults are used when omitted.
        transport: Optional transport override (tests pass ``httpx.MockTransport``).

    Returns:
        httpx.Client: Client the caller is responsible for closing.
    """

    settings = settings or LinkResolverSettings()
    verify = _create_ssl_context(settings.verify_tls)
    if transport is None:
        transport = httpx.HTTPTransport(retries=0, verify=verify)

    client = httpx.Client(
        transport=transport,
        timeout=httpx.Timeout(
            connect=settings.connect_timeout_s,
            read=settings.probe_timeout_s,
            write=settings.probe_timeout_s,
            pool=settings.probe_timeout_s,
        ),
        limits=httpx.Limits(
            max_connections=max(settings.max_workers, 1) * 2,
            max_keepalive_connections=max(settings.max_workers, 1),
        ),
        headers={"User-Agent": settings.user_agent},
        follow_redirects=settings.follow_redirects,
        verify=verify,
    )

    logger.debug(
        "HTTPX client created",
        extra={
            "connect_timeout_s": settings.connect_timeout_s,
            "probe_timeout_s": settings.probe_timeout_s,
            "follow_redirects": settings.follow_redirects,
        },
    )
    return client
