"""Adapters backed by real infrastructure."""

from access_token_api.infrastructure.adapters.redis_expiring_store import (
    DEFAULT_REDIS_KEY_PREFIX,
    RedisExpiringStore,
)

__all__: list[str] = ["DEFAULT_REDIS_KEY_PREFIX", "RedisExpiringStore"]
