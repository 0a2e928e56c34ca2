"""Register resolved links with a documentation tool's options."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Protocol

__all__ = ["DocletOptions", "JavadocOptions", "register_links"]

LOGGER = logging.getLogger(__name__)


class DocletOptions(Protocol):
    """Options object holding the ``-link`` entries of a javadoc invocation."""

    links: Optional[List[str]]


@dataclass
class JavadocOptions:
    """Minimal :class:`DocletOptions` implementation."""

    links: Optional[List[str]] = field(default_factory=list)

    def to_args(self) -> List[str]:
        """Render the links as javadoc command line arguments."""
        args: List[str] = []
        for link in self.links or ():
            args.extend(("-link", link))
        return args


def register_links(options: DocletOptions, links: Iterable[str]) -> List[str]:
    """Append each link to ``options.links`` unless it is already there.

    Returns:
        List[str]: The links that were actually added, in order.
    """

    if options.links is None:
        options.links = []

    added: List[str] = []
    for link in links:
        if link in options.links:
            LOGGER.info("Not adding '%s' to %r because it's already present", link, options)
            continue
        LOGGER.debug("Adding '%s' to %r", link, options)
        options.links.append(link)
        added.append(link)
    return added
