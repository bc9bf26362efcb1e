# ABOUTME: Benchmark test configuration for pipeline execution
# ABOUTME: Provides pytest-benchmark marker setup and shared middleware fixtures

import pytest


def pytest_collection_modifyitems(config, items):
    """Add benchmark marker to all tests in benchmark directory."""
    for item in items:
        if "benchmark" in str(item.fspath):
            item.add_marker(pytest.mark.benchmark)


@pytest.fixture
def increments():
    """A long chain of trivial synchronous middleware."""
    return [lambda x: x + 1 for _ in range(100)]
