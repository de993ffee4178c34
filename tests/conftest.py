"""Test-layer conftest: marker registration."""

from __future__ import annotations


def pytest_configure(config):
    """Register custom markers so --strict-markers does not complain."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated)")
    config.addinivalue_line("markers", "e2e: End-to-end Playwright journeys against the storefront")
    config.addinivalue_line("markers", "slow: Slow-running tests")
