"""
Pytest fixtures for the JavadocLinks test suite.

Fixtures are organized by subsystem:
- http_mocking: javadoc index server stand-in built on HTTPX MockTransport
"""
