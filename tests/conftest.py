"""Pytest configuration and fixtures for sshmon-check-postgres tests."""

from unittest.mock import AsyncMock

import pytest


# Markers for test categorization
def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests (deselect with '-m \"not integration\"')"
    )


@pytest.fixture
def conn():
    """A stand-in connection whose fetchval results are set per test."""
    conn = AsyncMock()
    conn.fetchval.return_value = "test"
    return conn


def pytest_collection_modifyitems(config, items):
    """Run integration tests last."""
    items.sort(key=lambda item: item.get_closest_marker("integration") is not None)
