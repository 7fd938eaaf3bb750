import pytest
from sitefetch.core import config

@pytest.fixture(autouse=True)
def setup_test_environment():
    """Pin settings for tests: mock fetchers, no artificial latency, short timeout"""
    # Store original values
    original_use_mock = config.settings.USE_MOCK
    original_delay = config.settings.MOCK_DELAY_MS
    original_timeout = config.settings.REQUEST_TIMEOUT

    # Never hit the network from tests
    config.settings.USE_MOCK = True
    config.settings.MOCK_DELAY_MS = 0
    config.settings.REQUEST_TIMEOUT = 5

    yield

    # Restore original values
    config.settings.USE_MOCK = original_use_mock
    config.settings.MOCK_DELAY_MS = original_delay
    config.settings.REQUEST_TIMEOUT = original_timeout

@pytest.fixture
def abc_bodies():
    """Three mock sites with bodies of 10, 0 and 25 characters"""
    return {
        "https://a.test/": "a" * 10,
        "https://b.test/": "",
        "https://c.test/": "c" * 25,
    }
