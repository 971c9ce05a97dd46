"""Redis implementation of the expiring key-value store port.

Usage counters are plain Redis strings holding an integer. TTL handling
maps directly onto Redis primitives:

    set     SET key value EX ttl
    get     GET key
    update  SET key value KEEPTTL XX
    delete  DEL key

``XX`` makes update() a no-op for a key that expired or was deleted
after the caller read it, so a consumed token is never recreated
without a TTL.

Every redis-py failure is translated to StorageError at this boundary.
"""

from __future__ import annotations

from typing import Any

import structlog
from redis.asyncio import Redis
from redis.exceptions import RedisError

from access_token_api.config.access_token_config import DEFAULT_REDIS_KEY_PREFIX
from access_token_api.domain.errors import StorageError

logger = structlog.get_logger(__name__)


class RedisExpiringStore:
    """ExpiringKeyValueStorePort backed by ``redis.asyncio``.

    Keys are namespaced with a prefix; the prefix is not part of the
    digest and does not count against the service's key-length limit.

    Example:
        >>> client = Redis.from_url("redis://localhost:6379/0")
        >>> store = RedisExpiringStore(client)
        >>> await store.set("5d41402abc4b2a76b9719d911017c592", -2, 300)
    """

    def __init__(
        self,
        client: Redis,  # type: ignore[type-arg]
        key_prefix: str = DEFAULT_REDIS_KEY_PREFIX,
    ) -> None:
        """Initialize the Redis store.

        Args:
            client: Connected ``redis.asyncio.Redis`` client.
            key_prefix: Namespace prepended to every key.
        """
        self._client = client
        self._prefix = key_prefix
        self._log = logger.bind(component="redis_expiring_store")

    @classmethod
    def from_url(
        cls, url: str, key_prefix: str = DEFAULT_REDIS_KEY_PREFIX
    ) -> RedisExpiringStore:
        """Create a store with a client built from a Redis URL."""
        return cls(Redis.from_url(url), key_prefix=key_prefix)

    def _name(self, key: str) -> str:
        return f"{self._prefix}{key}"

    def _failed(self, operation: str, key: str, error: Exception) -> StorageError:
        self._log.warning(
            "redis_operation_failed",
            operation=operation,
            key=key,
            error=str(error),
        )
        return StorageError(operation, key, str(error))

    async def set(self, key: str, value: int, ttl_seconds: int) -> None:
        """SET with EX, resetting the TTL."""
        try:
            await self._client.set(self._name(key), value, ex=ttl_seconds)
        except RedisError as e:
            raise self._failed("set", key, e) from e

    async def get(self, key: str) -> int | None:
        """GET and parse the stored integer."""
        try:
            raw: Any = await self._client.get(self._name(key))
        except RedisError as e:
            raise self._failed("get", key, e) from e

        if raw is None:
            return None
        if isinstance(raw, bytes):
            raw = raw.decode("ascii", errors="replace")
        try:
            return int(raw)
        except ValueError as e:
            raise StorageError("get", key, f"stored value {raw!r} is not an integer") from e

    async def update(self, key: str, value: int) -> None:
        """SET with KEEPTTL and XX, leaving the TTL and absent keys alone."""
        try:
            await self._client.set(self._name(key), value, keepttl=True, xx=True)
        except RedisError as e:
            raise self._failed("update", key, e) from e

    async def delete(self, key: str) -> None:
        """DEL the key. Redis ignores absent keys."""
        try:
            await self._client.delete(self._name(key))
        except RedisError as e:
            raise self._failed("delete", key, e) from e

    async def aclose(self) -> None:
        """Close the underlying client connection pool."""
        await self._client.aclose()
