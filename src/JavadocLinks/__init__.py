"""
Resolve external javadoc links for resolved dependencies.

Given dependency coordinates and a Java platform version, produce the
ordered, de-duplicated documentation base URLs to pass to javadoc as
``-link`` entries.

Usage:
    >>> from JavadocLinks import Coordinate, resolve_javadoc_links
    >>> links = resolve_javadoc_links(["org.springframework:spring-core:5.3.0"], "17")
"""

from JavadocLinks.api import resolve_javadoc_links
from JavadocLinks.coordinates import Coordinate
from JavadocLinks.engine import LinkResolutionEngine, OutputLinkSet
from JavadocLinks.errors import (
    ConfigurationError,
    InvalidCoordinateError,
    InvalidPlatformVersionError,
    JavadocLinksError,
    MalformedVersionError,
)
from JavadocLinks.logging_utils import setup_logging
from JavadocLinks.network import create_http_client
from JavadocLinks.platform_link import PlatformVersion, resolve_platform_link
from JavadocLinks.probe import ReachabilityProber
from JavadocLinks.registrar import JavadocOptions, register_links
from JavadocLinks.settings import PACKAGE_VERSION, LinkResolverSettings, load_settings
from JavadocLinks.sources import LazySource, UnionSource, flatten
from JavadocLinks.well_known import DEFAULT_TABLE, LinkRule, WellKnownLinkTable, lookup, rule

__all__ = [
    "ConfigurationError",
    "Coordinate",
    "DEFAULT_TABLE",
    "InvalidCoordinateError",
    "InvalidPlatformVersionError",
    "JavadocLinksError",
    "JavadocOptions",
    "LazySource",
    "LinkResolutionEngine",
    "LinkResolverSettings",
    "LinkRule",
    "MalformedVersionError",
    "OutputLinkSet",
    "PlatformVersion",
    "ReachabilityProber",
    "UnionSource",
    "WellKnownLinkTable",
    "create_http_client",
    "flatten",
    "load_settings",
    "lookup",
    "register_links",
    "resolve_javadoc_links",
    "resolve_platform_link",
    "rule",
    "setup_logging",
]

__version__ = PACKAGE_VERSION
