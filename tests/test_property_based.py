# === NAVMAP v1 ===
# {
#   "module": "tests.test_property_based",
#   "purpose": "Pytest coverage for property based scenarios",
#   "sections": [
#     {
#       "id": "test-output-link-set-preserves-first-occurrence",
#       "name": "test_output_link_set_preserves_first_occurrence",
#       "anchor": "function-test-output-link-set-preserves-first-occurrence",
#       "kind": "function"
#     },
#     {
#       "id": "test-lookup-is-pure",
#       "name": "test_lookup_is_pure",
#       "anchor": "function-test-lookup-is-pure",
#       "kind": "function"
#     },
#     {
#       "id": "test-resolve-invariants",
#       "name": "test_resolve_invariants",
#       "anchor": "function-test-resolve-invariants",
#       "kind": "function"
#     }
#   ]
# }
# === /NAVMAP ===

"""Property-based tests covering de-duplication, table purity and resolve invariants."""

from __future__ import annotations

from typing import List

from hypothesis import given, settings
from hypothesis import strategies as st

from JavadocLinks.coordinates import Coordinate
from JavadocLinks.engine import LinkResolutionEngine, OutputLinkSet
from JavadocLinks.settings import LinkResolverSettings
from JavadocLinks.well_known import DEFAULT_TABLE

_segment = st.text(alphabet="abcdefghijklmnopqrstuvwxyz0123456789.-", min_size=1, max_size=12)

coordinates = st.builds(
    Coordinate,
    group=st.one_of(
        _segment,
        st.sampled_from(
            [
                "javax",
                "org.springframework",
                "org.springframework.boot",
                "com.squareup.okhttp3",
                "com.squareup.okio",
                "org.hibernate",
                "org.eclipse.jetty",
                "org.apache.tomcat.embed",
                "org.ow2.asm",
            ]
        ),
    ),
    artifact=st.one_of(
        _segment, st.sampled_from(["javaee-api", "spring-core", "spring-boot", "hibernate-core"])
    ),
    version=st.text(alphabet="0123456789.", min_size=1, max_size=8),
)


@given(st.lists(st.sampled_from(["https://a.example/", "https://b.example/", "https://c.example/"])))
def test_output_link_set_preserves_first_occurrence(values: List[str]) -> None:
    links = OutputLinkSet(values)

    expected: List[str] = []
    for value in values:
        if value not in expected:
            expected.append(value)
    assert links.as_list() == expected


@given(coordinates)
def test_lookup_is_pure(coordinate: Coordinate) -> None:
    first = DEFAULT_TABLE.lookup(coordinate)

    assert DEFAULT_TABLE.lookup(coordinate) == first
    if first is not None:
        assert first.startswith("https://")
        assert first.endswith("/")


class _DeterministicProber:
    def probe(self, base_url: str) -> bool:
        return len(base_url) % 2 == 0


@settings(max_examples=50, deadline=None)
@given(st.lists(coordinates, max_size=10), st.integers(min_value=6, max_value=25))
def test_resolve_invariants(inputs: List[Coordinate], major: int) -> None:
    engine = LinkResolutionEngine(_DeterministicProber(), settings=LinkResolverSettings(max_workers=4))

    first = engine.resolve(inputs, major)
    second = engine.resolve(inputs, major)

    assert first == second
    listed = first.as_list()
    assert len(listed) == len(set(listed))
    assert listed[0].endswith(f"/{major}/docs/api/")
    for link in listed[1:]:
        assert link.endswith("/")
