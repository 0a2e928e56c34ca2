# === NAVMAP v1 ===
# {
#   "module": "JavadocLinks.well_known",
#   "purpose": "Curated table of javadoc hosting conventions keyed by coordinate patterns.",
#   "sections": [
#     {
#       "id": "linkrule",
#       "name": "LinkRule",
#       "anchor": "class-linkrule",
#       "kind": "class"
#     },
#     {
#       "id": "rule",
#       "name": "rule",
#       "anchor": "function-rule",
#       "kind": "function"
#     },
#     {
#       "id": "default-rules",
#       "name": "DEFAULT_RULES",
#       "anchor": "constant-default-rules",
#       "kind": "constant"
#     },
#     {
#       "id": "wellknownlinktable",
#       "name": "WellKnownLinkTable",
#       "anchor": "class-wellknownlinktable",
#       "kind": "class"
#     },
#     {
#       "id": "lookup",
#       "name": "lookup",
#       "anchor": "function-lookup",
#       "kind": "function"
#     }
#   ]
# }
# === /NAVMAP ===

"""Curated table of javadoc hosting conventions.

Each :class:`LinkRule` pairs a predicate over a :class:`Coordinate` with a URL
template. Rules are evaluated top to bottom and the first match wins, so the
table stays auditable rule by rule and new entries can be slotted in without
touching the others.

Templates are :meth:`str.format` strings with these fields:

``{group}``, ``{artifact}``, ``{version}``
    The coordinate parts, verbatim.
``{major}``
    ``version[0:1]``, used by Java EE.
``{series}``
    ``version[0:3]``, the ``major.minor`` path segment used by Hibernate and
    Tomcat.

``{major}`` and ``{series}`` raise :class:`MalformedVersionError` when the
version is too short. :meth:`WellKnownLinkTable.lookup` logs and skips such a
rule, so a version like ``"5"`` falls through to later rules (and eventually
to the javadoc.io probe) instead of aborting the run.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Callable, Iterable, Iterator, Mapping, Optional, Sequence, Tuple, Union

from JavadocLinks.coordinates import Coordinate
from JavadocLinks.errors import MalformedVersionError

__all__ = [
    "DEFAULT_RULES",
    "DEFAULT_TABLE",
    "LinkRule",
    "WellKnownLinkTable",
    "lookup",
    "rule",
]

LOGGER = logging.getLogger(__name__)

Names = Union[str, Sequence[str]]


@dataclass(frozen=True)
class LinkRule:
    """A single hosting convention.

    Attributes:
        name: Short identifier used in logs and diagnostics.
        predicate: Returns ``True`` when the rule applies to a coordinate.
        template: Builds the documentation base URL for a matching coordinate.
    """

    name: str
    predicate: Callable[[Coordinate], bool]
    template: Callable[[Coordinate], str]

    def matches(self, coordinate: Coordinate) -> bool:
        return self.predicate(coordinate)

    def build(self, coordinate: Coordinate) -> str:
        return self.template(coordinate)


class _TemplateFields(Mapping[str, str]):
    """Lazy ``str.format_map`` namespace over a coordinate."""

    _PREFIXES = {"major": 1, "series": 3}

    def __init__(self, coordinate: Coordinate) -> None:
        self._coordinate = coordinate

    def __getitem__(self, key: str) -> str:
        if key in self._PREFIXES:
            length = self._PREFIXES[key]
            version = self._coordinate.version
            if len(version) < length:
                raise MalformedVersionError(self._coordinate, required_length=length)
            return version[:length]
        if key in ("group", "artifact", "version"):
            return getattr(self._coordinate, key)
        raise KeyError(key)

    def __iter__(self) -> Iterator[str]:
        return iter(("group", "artifact", "version", *self._PREFIXES))

    def __len__(self) -> int:
        return 3 + len(self._PREFIXES)


def _as_tuple(value: Optional[Names]) -> Optional[Tuple[str, ...]]:
    if value is None:
        return None
    if isinstance(value, str):
        return (value,)
    return tuple(value)


def rule(
    name: str,
    url: str,
    *,
    group: Optional[Names] = None,
    group_prefix: Optional[str] = None,
    artifact: Optional[Names] = None,
    artifact_prefix: Optional[str] = None,
    version: Optional[str] = None,
) -> LinkRule:
    """Declare a :class:`LinkRule` from exact/prefix conditions and a URL template.

    Args:
        name: Rule identifier.
        url: Template string (see module docstring for fields).
        group: Exact group id, or several alternatives.
        group_prefix: Required group id prefix.
        artifact: Exact artifact name, or several alternatives.
        artifact_prefix: Required artifact prefix.
        version: Regular expression the whole version must match.

    Returns:
        LinkRule: Rule whose predicate requires every given condition.
    """

    groups = _as_tuple(group)
    artifacts = _as_tuple(artifact)
    version_pattern = re.compile(version) if version is not None else None

    def predicate(coordinate: Coordinate) -> bool:
        if groups is not None and coordinate.group not in groups:
            return False
        if group_prefix is not None and not coordinate.group.startswith(group_prefix):
            return False
        if artifacts is not None and coordinate.artifact not in artifacts:
            return False
        if artifact_prefix is not None and not coordinate.artifact.startswith(artifact_prefix):
            return False
        if version_pattern is not None and not version_pattern.fullmatch(coordinate.version):
            return False
        return True

    def template(coordinate: Coordinate) -> str:
        return url.format_map(_TemplateFields(coordinate))

    return LinkRule(name=name, predicate=predicate, template=template)


# Order matters: first match wins.
DEFAULT_RULES: Tuple[LinkRule, ...] = (
    rule(
        "javaee-legacy",
        "https://docs.oracle.com/javaee/{major}/api/",
        group="javax",
        artifact="javaee-api",
        version=r"[567]\..*",
    ),
    rule(
        "javaee-8",
        "https://javaee.github.io/javaee-spec/javadocs/",
        group="javax",
        artifact="javaee-api",
        version=r"8.*",
    ),
    rule(
        "spring-framework",
        "https://docs.spring.io/spring/docs/{version}/javadoc-api/",
        group="org.springframework",
        artifact_prefix="spring-",
    ),
    rule(
        "spring-boot",
        "https://docs.spring.io/spring-boot/docs/{version}/api/",
        group="org.springframework.boot",
        artifact_prefix="spring-boot",
    ),
    rule(
        "spring-security",
        "https://docs.spring.io/spring-security/site/docs/{version}/api/",
        group="org.springframework.security",
        artifact_prefix="spring-security",
    ),
    rule(
        "spring-data-jpa",
        "https://docs.spring.io/spring-data/jpa/docs/{version}/api/",
        group="org.springframework.data",
        artifact="spring-data-jpa",
    ),
    rule(
        "spring-webflow",
        "https://docs.spring.io/spring-webflow/docs/{version}/api/",
        group="org.springframework.webflow",
        artifact="spring-webflow",
    ),
    rule(
        "okio-1",
        "https://square.github.io/okio/1.x/{artifact}/",
        group="com.squareup.okio",
        version=r"1\..*",
    ),
    rule(
        "okhttp3",
        "https://square.github.io/okhttp/3.x/{artifact}/",
        group="com.squareup.okhttp3",
    ),
    rule(
        "retrofit-1",
        "https://square.github.io/retrofit/1.x/retrofit/",
        group="com.squareup.retrofit",
    ),
    rule(
        "retrofit-2",
        "https://square.github.io/retrofit/2.x/{artifact}/",
        group="com.squareup.retrofit2",
    ),
    rule(
        "hibernate-orm",
        "https://docs.jboss.org/hibernate/orm/{series}/javadocs/",
        group="org.hibernate",
        artifact="hibernate-core",
    ),
    rule(
        "hibernate-validator",
        "https://docs.jboss.org/hibernate/validator/{series}/api/",
        group=("org.hibernate", "org.hibernate.validator"),
        artifact="hibernate-validator",
    ),
    rule(
        "primefaces",
        "https://www.primefaces.org/docs/api/{version}/",
        group="org.primefaces",
        artifact="primefaces",
    ),
    rule(
        "jetty",
        "https://www.eclipse.org/jetty/javadoc/{version}/",
        group="org.eclipse.jetty",
    ),
    rule(
        "asm",
        "https://asm.ow2.io/javadoc/",
        group="org.ow2.asm",
    ),
    rule(
        "joinfaces",
        "https://docs.joinfaces.org/{version}/api/",
        group="org.joinfaces",
    ),
    rule(
        "tomcat",
        "https://tomcat.apache.org/tomcat-{series}-doc/api/",
        group_prefix="org.apache.tomcat",
    ),
)


class WellKnownLinkTable:
    """Ordered, immutable sequence of :class:`LinkRule` entries.

    Lookups are pure: no I/O, deterministic for a given coordinate.
    """

    def __init__(self, rules: Iterable[LinkRule] = DEFAULT_RULES) -> None:
        self._rules: Tuple[LinkRule, ...] = tuple(rules)

    @property
    def rules(self) -> Tuple[LinkRule, ...]:
        return self._rules

    def __iter__(self) -> Iterator[LinkRule]:
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def extend(self, rules: Iterable[LinkRule]) -> "WellKnownLinkTable":
        """Return a new table with ``rules`` evaluated after the current ones."""
        return WellKnownLinkTable((*self._rules, *rules))

    def prepend(self, rules: Iterable[LinkRule]) -> "WellKnownLinkTable":
        """Return a new table with ``rules`` evaluated before the current ones."""
        return WellKnownLinkTable((*rules, *self._rules))

    def match(self, coordinate: Coordinate) -> Optional[LinkRule]:
        """Return the first rule whose predicate accepts ``coordinate``."""
        for candidate in self._rules:
            if candidate.matches(coordinate):
                return candidate
        return None

    def lookup(self, coordinate: Coordinate) -> Optional[str]:
        """Return the documentation URL of the first usable rule, or ``None``.

        A matching rule whose template rejects the version (see
        :class:`MalformedVersionError`) is skipped with a warning and the
        search continues with the next rule.
        """

        for candidate in self._rules:
            if not candidate.matches(coordinate):
                continue
            try:
                return candidate.build(coordinate)
            except MalformedVersionError as exc:
                LOGGER.warning(
                    "Skipping well known rule '%s' for '%s': %s",
                    candidate.name,
                    coordinate,
                    exc,
                    extra={"rule": candidate.name, "coordinate": coordinate},
                )
        return None


DEFAULT_TABLE = WellKnownLinkTable()


def lookup(coordinate: Coordinate) -> Optional[str]:
    """Look ``coordinate`` up in :data:`DEFAULT_TABLE`."""
    return DEFAULT_TABLE.lookup(coordinate)
