# === NAVMAP v1 ===
# {
#   "module": "JavadocLinks.probe",
#   "purpose": "Reachability checks for guessed javadoc base URLs.",
#   "sections": [
#     {
#       "id": "prober",
#       "name": "Prober",
#       "anchor": "class-prober",
#       "kind": "class"
#     },
#     {
#       "id": "reachabilityprober",
#       "name": "ReachabilityProber",
#       "anchor": "class-reachabilityprober",
#       "kind": "class"
#     }
#   ]
# }
# === /NAVMAP ===

"""Reachability checks for guessed javadoc base URLs.

A javadoc base directory publishes an index of its packages: ``element-list``
since JDK 10, ``package-list`` before that. A base URL counts as reachable when
either index answers with a 2xx status. The response body is never inspected.

Network failures never escape :meth:`ReachabilityProber.probe`; they are
logged and reported as ``False``.
"""

from __future__ import annotations

import logging
from typing import Optional, Protocol, Tuple

import httpx

__all__ = ["INDEX_FILES", "Prober", "ReachabilityProber"]

LOGGER = logging.getLogger(__name__)

INDEX_FILES: Tuple[str, ...] = ("element-list", "package-list")


class Prober(Protocol):
    """Anything that can decide whether a documentation base URL is live."""

    def probe(self, base_url: str) -> bool: ...


class ReachabilityProber:
    """Probe ``element-list`` then ``package-list`` below a base URL."""

    def __init__(self, client: httpx.Client) -> None:
        self.client = client

    def probe(self, base_url: str) -> bool:
        """Return ``True`` when either documentation index is served under ``base_url``.

        Args:
            base_url: Candidate documentation directory, ending in ``/``.

        Returns:
            bool: Whether the candidate was verified reachable.
        """

        previous_error: Optional[httpx.HTTPError] = None
        last = len(INDEX_FILES) - 1
        for position, index_file in enumerate(INDEX_FILES):
            url = base_url + index_file
            try:
                response = self.client.get(url)
            except httpx.HTTPError as exc:
                if previous_error is not None:
                    _chain_previous_error(exc, previous_error)
                if position < last:
                    previous_error = exc
                    LOGGER.debug("Request to %s failed: %s", url, exc, extra={"url": url})
                    continue
                if previous_error is not None:
                    LOGGER.warning(
                        "Failed to access %s (after %s)",
                        url,
                        previous_error,
                        exc_info=exc,
                        extra={"url": url},
                    )
                else:
                    LOGGER.warning("Failed to access %s", url, exc_info=exc, extra={"url": url})
                return False
            if response.is_success:
                return True
            LOGGER.debug("%s answered HTTP %s", url, response.status_code, extra={"url": url})
        return False

    __call__ = probe


def _chain_previous_error(exc: BaseException, previous: BaseException) -> None:
    """Attach ``previous`` at the end of the implicit context chain of ``exc``.

    httpx raises its transport errors from the underlying httpcore/socket
    exception, so ``exc.__context__`` is usually taken; the earlier failure is
    hung off the innermost exception instead.
    """

    seen = {id(exc)}
    tail = exc
    while tail.__context__ is not None:
        if tail.__context__ is previous or id(tail.__context__) in seen:
            return
        tail = tail.__context__
        seen.add(id(tail))
    tail.__context__ = previous
