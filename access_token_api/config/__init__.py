"""Configuration for the access token API."""

from access_token_api.config.access_token_config import (
    DEFAULT_ACCESS_TOKEN_CONFIG,
    DEFAULT_REDIS_KEY_PREFIX,
    TEST_ACCESS_TOKEN_CONFIG,
    AccessTokenConfig,
)

__all__ = [
    "AccessTokenConfig",
    "DEFAULT_ACCESS_TOKEN_CONFIG",
    "DEFAULT_REDIS_KEY_PREFIX",
    "TEST_ACCESS_TOKEN_CONFIG",
]
