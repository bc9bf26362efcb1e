# ABOUTME: pytest configuration for monopipe tests
# ABOUTME: Configures timeouts, settings isolation and a loguru capture fixture

import pytest
from loguru import logger

from monopipe.config import get_settings


def pytest_configure(config):
    """Configure pytest for monopipe tests."""
    config.addinivalue_line("markers", "unit: Unit tests with 20-second timeout")
    config.addinivalue_line("markers", "integration: Integration tests with 60-second timeout")
    config.addinivalue_line("markers", "contract: Contract tests with 60-second timeout")
    config.addinivalue_line("markers", "benchmark: Benchmark tests with 60-second timeout")
    config.addinivalue_line("markers", "config: Configuration tests")


def pytest_collection_modifyitems(config, items):
    """Modify test items to add appropriate timeouts based on test type."""
    for item in items:
        # Respect explicit timeout markers
        if item.get_closest_marker("timeout"):
            continue

        if item.get_closest_marker("unit"):
            item.add_marker(pytest.mark.timeout(20))
        elif any(item.get_closest_marker(mark) for mark in ["integration", "contract", "benchmark"]):
            item.add_marker(pytest.mark.timeout(60))
        # Other tests use the global default from pyproject.toml


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Make every test read settings from the environment it sets up."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def log_records():
    """Collect loguru records emitted under the monopipe namespace."""
    records = []
    logger.enable("monopipe")
    handler_id = logger.add(lambda message: records.append(message.record), level="TRACE", format="{message}")
    yield records
    logger.remove(handler_id)
    logger.disable("monopipe")
