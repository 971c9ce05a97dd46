"""Access token service configuration.

This module defines the immutable configuration of the token service with
environment variable overrides for deployment tuning.

Environment Variables:
- ACCESS_TOKEN_DIGEST_ALGORITHM: hashlib algorithm for keys and tokens (default: md5)
- ACCESS_TOKEN_MAX_KEY_LENGTH: Store key-length limit (default: 45)
- ACCESS_TOKEN_DEFAULT_TTL_MINUTES: TTL used when issue() omits it (default: 5)
- ACCESS_TOKEN_DEFAULT_RETRIES: Retries used when issue() omits them (default: 0)
- ACCESS_TOKEN_REDIS_URL: Redis connection URL; unset selects the in-memory store
- ACCESS_TOKEN_REDIS_KEY_PREFIX: Namespace prepended to Redis keys (default: access_token:)
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from access_token_api.domain.models.access_token import (
    DEFAULT_DIGEST_ALGORITHM,
    DEFAULT_MAX_KEY_LENGTH,
)

DEFAULT_REDIS_KEY_PREFIX = "access_token:"


def _get_int_env(key: str, default: int) -> int:
    """Get integer environment variable with default.

    Args:
        key: Environment variable name.
        default: Default value if not set or invalid.

    Returns:
        Parsed integer value or default.
    """
    value = os.environ.get(key)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _get_str_env(key: str, default: str | None) -> str | None:
    """Get a stripped string environment variable, treating blank as unset."""
    value = os.environ.get(key)
    if value is None or not value.strip():
        return default
    return value.strip()


@dataclass(frozen=True)
class AccessTokenConfig:
    """Configuration for the access token service.

    Attributes:
        digest_algorithm: hashlib algorithm used for storage keys and token
                          sizing. Its hex output must fit max_key_length.
        max_key_length: Longest key the backing store accepts.
                        Default: 45 characters.
        default_ttl_minutes: Token lifetime when issue() is not given one.
                             Default: 5 minutes.
        default_retries: Permitted validations when issue() is not given a
                         count. Default: 0 (unlimited until expiry).
        redis_url: Redis connection URL, or None for the in-memory store.
        redis_key_prefix: Namespace for keys written to Redis. Not counted
                          against max_key_length.
    """

    digest_algorithm: str = DEFAULT_DIGEST_ALGORITHM
    max_key_length: int = DEFAULT_MAX_KEY_LENGTH
    default_ttl_minutes: int = 5
    default_retries: int = 0
    redis_url: str | None = None
    redis_key_prefix: str = DEFAULT_REDIS_KEY_PREFIX

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if not self.digest_algorithm:
            raise ValueError("digest_algorithm must not be empty")
        if self.max_key_length < 1:
            raise ValueError(
                f"max_key_length must be positive, got {self.max_key_length}"
            )
        if self.default_ttl_minutes < 1:
            raise ValueError(
                f"default_ttl_minutes must be positive, got {self.default_ttl_minutes}"
            )
        if self.default_retries < 0:
            raise ValueError(
                f"default_retries must be non-negative, got {self.default_retries}"
            )

    @classmethod
    def from_environment(cls) -> "AccessTokenConfig":
        """Create config from environment variables with defaults.

        Returns:
            AccessTokenConfig with values from environment or defaults.
        """
        return cls(
            digest_algorithm=_get_str_env(
                "ACCESS_TOKEN_DIGEST_ALGORITHM", DEFAULT_DIGEST_ALGORITHM
            )
            or DEFAULT_DIGEST_ALGORITHM,
            max_key_length=_get_int_env(
                "ACCESS_TOKEN_MAX_KEY_LENGTH", DEFAULT_MAX_KEY_LENGTH
            ),
            default_ttl_minutes=_get_int_env("ACCESS_TOKEN_DEFAULT_TTL_MINUTES", 5),
            default_retries=_get_int_env("ACCESS_TOKEN_DEFAULT_RETRIES", 0),
            redis_url=_get_str_env("ACCESS_TOKEN_REDIS_URL", None),
            redis_key_prefix=_get_str_env(
                "ACCESS_TOKEN_REDIS_KEY_PREFIX", DEFAULT_REDIS_KEY_PREFIX
            )
            or DEFAULT_REDIS_KEY_PREFIX,
        )


# Default config (not read from environment)
DEFAULT_ACCESS_TOKEN_CONFIG = AccessTokenConfig()

# Testing config with short lifetimes for unit tests
TEST_ACCESS_TOKEN_CONFIG = AccessTokenConfig(
    default_ttl_minutes=1,
    default_retries=1,
)
