"""
Shared fixtures for filtering benchmarks
"""

import pytest


def pytest_configure(config):
    config.addinivalue_line(
        "markers", "performance: mark test as performance benchmark"
    )


def pytest_collection_modifyitems(config, items):
    for item in items:
        if "performance" in str(item.fspath):
            item.add_marker(pytest.mark.performance)


@pytest.fixture(scope="session")
def performance_config():
    """Minimum throughputs for admission checks"""
    return {
        "min_checks_cached": 50000,  # FilteringSink.check, names already cached
        "min_checks_threaded": 20000,  # FilteringSink.write from 4 workers
        "min_records_filtered": 10000,  # records through FilteringHandler
    }
