import pytest
from django.core.cache import cache


@pytest.fixture(autouse=True)
def clear_cache():
    """Responses and rate-limit counters live in the cache; start every test empty."""
    cache.clear()
    yield
    cache.clear()


@pytest.fixture(autouse=True)
def rate_limits_off(settings):
    settings.RATELIMIT_ENABLE = False
