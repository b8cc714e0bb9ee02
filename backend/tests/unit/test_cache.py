"""Unit tests for the Redis cache helpers."""

import pytest
import redis

from jobmatch.core import cache


class FakeRedis:
    """In-memory stand-in for the few client calls the cache makes."""

    def __init__(self):
        self.store = {}
        self.calls = []

    def get(self, key):
        self.calls.append(("get", key))
        return self.store.get(key)

    def setex(self, key, ttl, value):
        self.calls.append(("setex", key, ttl))
        self.store[key] = value

    def delete(self, key):
        self.calls.append(("delete", key))
        self.store.pop(key, None)


class BrokenRedis:
    def get(self, key):
        raise redis.ConnectionError("connection refused")

    def setex(self, key, ttl, value):
        raise redis.ConnectionError("connection refused")

    def delete(self, key):
        raise redis.ConnectionError("connection refused")


@pytest.fixture
def fake_redis(monkeypatch):
    client = FakeRedis()
    monkeypatch.setattr(cache, "redis_client", client)
    monkeypatch.setattr(cache.settings, "CACHE_ENABLED", True)
    return client


@pytest.mark.unit
def test_set_and_get(fake_redis):
    """Test values are pickled in and out."""
    assert cache.set_cache("k", [{"name": "Acme"}])
    assert cache.get_cache("k") == [{"name": "Acme"}]


@pytest.mark.unit
def test_default_expiry(fake_redis):
    """Test the configured TTL is used when none is given."""
    cache.set_cache("k", 1)
    cache.set_cache("j", 1, expire=10)
    assert ("setex", "k", cache.settings.CACHE_EXPIRE_SECONDS) in fake_redis.calls
    assert ("setex", "j", 10) in fake_redis.calls


@pytest.mark.unit
def test_invalidate_companies(fake_redis):
    """Test the company directory key is dropped."""
    cache.set_cache(cache.COMPANIES_CACHE_KEY, ["Acme"])
    cache.invalidate_companies()
    assert cache.get_cache(cache.COMPANIES_CACHE_KEY) is None


@pytest.mark.unit
def test_disabled_cache_never_touches_redis(monkeypatch):
    """Test that a disabled cache is a no-op."""
    client = FakeRedis()
    monkeypatch.setattr(cache, "redis_client", client)
    monkeypatch.setattr(cache.settings, "CACHE_ENABLED", False)

    assert cache.set_cache("k", 1) is False
    assert cache.get_cache("k") is None
    assert cache.delete_cache("k") is False
    assert client.calls == []


@pytest.mark.unit
def test_redis_errors_degrade_to_misses(monkeypatch):
    """Test that an unreachable Redis does not break callers."""
    monkeypatch.setattr(cache, "redis_client", BrokenRedis())
    monkeypatch.setattr(cache.settings, "CACHE_ENABLED", True)

    assert cache.get_cache("k") is None
    assert cache.set_cache("k", 1) is False
    assert cache.delete_cache("k") is False
