"""
Pytest configuration for adbtoken tests.
"""

import os

import pytest

from .testhelp import RecordingLogger


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "integration: marks tests as integration tests")
    config.addinivalue_line(
        "markers", "requires_database: marks tests that need a live Autonomous Database"
    )


def pytest_collection_modifyitems(config, items):
    """Mark integration tests and skip them when no database is configured."""
    for item in items:
        if "test_integration" in item.nodeid:
            item.add_marker(pytest.mark.integration)

        if item.get_closest_marker("requires_database") and not os.environ.get(
            "ADBTOKEN_TEST_CONNECT_STRING"
        ):
            item.add_marker(pytest.mark.skip(reason="ADBTOKEN_TEST_CONNECT_STRING not set"))


@pytest.fixture
def logger():
    return RecordingLogger()


@pytest.fixture(autouse=True)
def _no_debugging(monkeypatch):
    monkeypatch.delenv("ADBTOKEN_DEBUGGING", raising=False)
