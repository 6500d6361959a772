"""
Unit tests for the Redis cache client.
"""
from datetime import timedelta
from unittest.mock import MagicMock, patch

import pytest
from fastapi.testclient import TestClient

from auth_service.cache import RedisCache
from auth_service.errors import BadValueTypeError, CacheError, KeyExistsError, KeyNotFoundError
from auth_service.main import create_app


@pytest.fixture
def mock_client():
    return MagicMock()


@pytest.fixture
def cache(mock_client):
    return RedisCache("redis://localhost:6379/0", client=mock_client)


def test_connect_builds_client_from_url():
    with patch("auth_service.cache.redis.Redis.from_url") as from_url:
        cache = RedisCache("redis://user:pw@cache:6379/2", pool_size=7)
        client = cache.connect()

        from_url.assert_called_once_with(
            "redis://user:pw@cache:6379/2", max_connections=7, decode_responses=True
        )
        assert client is from_url.return_value
        # connect is idempotent
        assert cache.connect() is client
        assert from_url.call_count == 1


def test_close_releases_client(cache, mock_client):
    cache.close()
    mock_client.close.assert_called_once()

    with pytest.raises(CacheError):
        cache.get_value("k")


def test_use_before_connect_fails():
    cache = RedisCache("redis://localhost:6379/0")
    with pytest.raises(CacheError):
        cache.set_value("k", "v")


def test_get_value(cache, mock_client):
    mock_client.get.return_value = "v"
    assert cache.get_value("k") == "v"
    mock_client.get.assert_called_once_with("k")


def test_get_missing_value(cache, mock_client):
    mock_client.get.return_value = None
    with pytest.raises(KeyNotFoundError):
        cache.get_value("missing")


def test_set_value_overwrites_by_default(cache, mock_client):
    cache.set_value("k", "v", expire=60)
    mock_client.set.assert_called_once_with("k", "v", ex=60, nx=False)


def test_set_value_without_overwrite(cache, mock_client):
    mock_client.set.return_value = True
    cache.set_value("k", "v", overwrite=False, expire=timedelta(minutes=5))
    mock_client.set.assert_called_once_with("k", "v", ex=timedelta(minutes=5), nx=True)


def test_set_value_existing_key_without_overwrite(cache, mock_client):
    mock_client.set.return_value = None
    with pytest.raises(KeyExistsError):
        cache.set_value("k", "v", overwrite=False)


def test_incr_value(cache, mock_client):
    cache.incr_value("counter")
    mock_client.incr.assert_called_once_with("counter")

    cache.incr_value("counter", 5)
    mock_client.incrby.assert_called_once_with("counter", 5)

    cache.incr_value("score", 0.5)
    mock_client.incrbyfloat.assert_called_once_with("score", 0.5)


@pytest.mark.parametrize("amount", ["1", None, True, [1]])
def test_incr_value_rejects_other_types(cache, mock_client, amount):
    with pytest.raises(BadValueTypeError):
        cache.incr_value("counter", amount)
    mock_client.incr.assert_not_called()


def test_decr_value(cache, mock_client):
    cache.decr_value("counter")
    mock_client.decr.assert_called_once_with("counter")

    cache.decr_value("counter", 3)
    mock_client.decrby.assert_called_once_with("counter", 3)


def test_app_lifespan_owns_cache(test_settings):
    test_settings.REDIS_URL = "redis://localhost:6379/0"
    with patch("auth_service.cache.redis.Redis.from_url") as from_url:
        with TestClient(create_app(test_settings)) as c:
            assert isinstance(c.app.state.cache, RedisCache)
        from_url.return_value.close.assert_called_once()


def test_app_without_cache(client):
    assert client.app.state.cache is None
