"""
Pytest Configuration

Shared fixtures for the JavadocLinks suite: a MockTransport-backed javadoc
index server and stand-in probers for engine tests that must not touch HTTP.
"""

from __future__ import annotations

import os
import threading
from typing import Callable, Union

import pytest

from JavadocLinks.settings import LinkResolverSettings

from tests.fixtures.http_mocking import (  # noqa: F401
    MockIndexServer,
    index_client,
    index_server,
)


class StubProber:
    """Prober returning a fixed or computed answer and recording every call."""

    def __init__(self, answer: Union[bool, Callable[[str], bool]] = True) -> None:
        self._answer = answer
        self._lock = threading.Lock()
        self.calls: list[str] = []

    def probe(self, base_url: str) -> bool:
        with self._lock:
            self.calls.append(base_url)
        if callable(self._answer):
            return self._answer(base_url)
        return self._answer


class ForbiddenProber:
    """Prober that fails the test when invoked."""

    def probe(self, base_url: str) -> bool:
        pytest.fail(f"unexpected reachability probe for {base_url}")


@pytest.fixture
def settings(monkeypatch: pytest.MonkeyPatch) -> LinkResolverSettings:
    """Default settings isolated from JAVADOC_LINKS_* variables in the environment."""
    for name in list(os.environ):
        if name.upper().startswith("JAVADOC_LINKS_"):
            monkeypatch.delenv(name)
    return LinkResolverSettings()
