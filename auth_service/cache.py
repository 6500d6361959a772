"""
Key-value cache client backed by Redis.

The client is an explicit object: build it, connect() it, pass it to whoever
needs it and close() it on shutdown. There is no module level connection.
"""
import logging
from datetime import timedelta
from typing import Any, Optional, Union

import redis

from .errors import BadValueTypeError, CacheError, KeyExistsError, KeyNotFoundError

logger = logging.getLogger(__name__)

Expiry = Union[int, timedelta, None]


class RedisCache:
    def __init__(self, url: str, pool_size: int = 10, client: Optional[redis.Redis] = None):
        self.url = url
        self.pool_size = pool_size
        self._client = client

    def connect(self) -> redis.Redis:
        """Create the underlying client if needed and return it."""
        if self._client is None:
            self._client = redis.Redis.from_url(
                self.url, max_connections=self.pool_size, decode_responses=True
            )
            logger.info("Redis client created (pool_size=%s)", self.pool_size)
        return self._client

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None
            logger.info("Redis client closed")

    @property
    def client(self) -> redis.Redis:
        if self._client is None:
            raise CacheError("cache is not connected")
        return self._client

    def get_value(self, key: str) -> Any:
        value = self.client.get(key)
        if value is None:
            raise KeyNotFoundError(f"can not find the key {key!r}")
        return value

    def set_value(self, key: str, value: Any, overwrite: bool = True, expire: Expiry = None) -> None:
        """
        Set key to value.

        Args:
            overwrite: When False only a missing key is set
            expire: Seconds or timedelta until the key expires, None keeps it
        Raises:
            KeyExistsError: If overwrite is False and the key already exists
        """
        ok = self.client.set(key, value, ex=expire, nx=not overwrite)
        if not overwrite and not ok:
            raise KeyExistsError(f"key {key!r} already exists")

    def incr_value(self, key: str, amount: Union[int, float] = 1) -> Union[int, float]:
        # bool is an int subclass but never a sensible increment
        if isinstance(amount, bool):
            raise BadValueTypeError()
        if isinstance(amount, int):
            if amount == 1:
                return self.client.incr(key)
            return self.client.incrby(key, amount)
        if isinstance(amount, float):
            return self.client.incrbyfloat(key, amount)
        raise BadValueTypeError()

    def decr_value(self, key: str, amount: int = 1) -> int:
        if amount == 1:
            return self.client.decr(key)
        return self.client.decrby(key, amount)
