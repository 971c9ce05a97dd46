"""Domain value objects for access tokens."""

from access_token_api.domain.models.access_token import (
    DEFAULT_DIGEST_ALGORITHM,
    DEFAULT_MAX_KEY_LENGTH,
    MIN_ACTION_LENGTH,
    KeyDerivation,
    require_action,
    require_retries,
    require_token,
    require_ttl_minutes,
)
from access_token_api.domain.models.usage_counter import (
    UNLIMITED_RETRIES,
    CounterTransition,
    UsageCounter,
)

__all__: list[str] = [
    "DEFAULT_DIGEST_ALGORITHM",
    "DEFAULT_MAX_KEY_LENGTH",
    "MIN_ACTION_LENGTH",
    "UNLIMITED_RETRIES",
    "CounterTransition",
    "KeyDerivation",
    "UsageCounter",
    "require_action",
    "require_retries",
    "require_token",
    "require_ttl_minutes",
]
