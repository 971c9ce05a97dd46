"""Access Token Service implementation.

Service for issuing, validating and revoking short-lived access tokens
scoped to a named action.

Each token is stored as a single signed usage counter under the key
``digest(action + ":" + token)`` in an expiring key-value store. The
service itself holds only immutable configuration, so one instance can
be shared by any number of concurrent callers.

Developer Golden Rules:
1. Tokens are OPAQUE to clients and never logged
2. All token state lives in the store - nothing is cached here
3. validate() never extends a token's TTL
4. Errors propagate - never log and swallow
"""

from __future__ import annotations

import structlog

from access_token_api.application.ports.access_token_service import (
    AccessTokenServiceProtocol,
)
from access_token_api.application.ports.expiring_key_value_store import (
    ExpiringKeyValueStorePort,
)
from access_token_api.config.access_token_config import (
    DEFAULT_ACCESS_TOKEN_CONFIG,
    AccessTokenConfig,
)
from access_token_api.domain.errors import StorageConsistencyError
from access_token_api.domain.models.access_token import (
    KeyDerivation,
    require_action,
    require_retries,
    require_token,
    require_ttl_minutes,
)
from access_token_api.domain.models.usage_counter import (
    CounterTransition,
    UsageCounter,
)

logger = structlog.get_logger(__name__)

SECONDS_PER_MINUTE = 60


class AccessTokenService(AccessTokenServiceProtocol):
    """Stateless facade over an expiring key-value store.

    This service handles:
    - Token issuance: writes ``-retries`` with a TTL of ttl_minutes
    - Token validation: reads the counter and consumes one use
    - Token revocation: deletes the counter and confirms its absence

    Concurrency:
        validate() reads, decides and writes in separate store calls.
        Two callers validating the same token at once can both read the
        same counter, so one use may go uncounted. Callers that need
        exact counts under concurrent use must serialize per token.

    Example:
        >>> service = AccessTokenService(store=ExpiringKeyValueStoreStub())
        >>> token = await service.issue("checkout", ttl_minutes=5, retries=2)
        >>> await service.validate("checkout", token)
        True
    """

    def __init__(
        self,
        store: ExpiringKeyValueStorePort,
        config: AccessTokenConfig | None = None,
    ) -> None:
        """Initialize the access token service.

        Args:
            store: Expiring key-value store holding usage counters.
            config: Service configuration. Defaults to
                DEFAULT_ACCESS_TOKEN_CONFIG.

        Raises:
            ConfigurationError: If the digest algorithm is unknown or its
                output does not fit the store's key-length limit.
        """
        self._config = config or DEFAULT_ACCESS_TOKEN_CONFIG
        self._store = store
        self._keys = KeyDerivation(
            algorithm=self._config.digest_algorithm,
            max_key_length=self._config.max_key_length,
        )
        self._log = logger.bind(
            component="access_token_service",
            digest_algorithm=self._keys.algorithm,
        )

    @property
    def config(self) -> AccessTokenConfig:
        """The configuration this service was built with."""
        return self._config

    def derive_key(self, action: str, token: str) -> str:
        """Return the storage key for an (action, token) pair.

        Args:
            action: Action the token is scoped to.
            token: Token issued for the action.

        Returns:
            Hex digest of ``action + ":" + token``.
        """
        return self._keys.derive_key(action, token)

    async def issue(
        self,
        action: str,
        ttl_minutes: int | None = None,
        retries: int | None = None,
    ) -> str:
        """Issue a new token for an action.

        Args:
            action: Action the token authorizes (at least 4 chars trimmed).
            ttl_minutes: Lifetime in minutes. Defaults to
                config.default_ttl_minutes.
            retries: Permitted validations, 0 for unlimited until expiry.
                Defaults to config.default_retries.

        Returns:
            The opaque token. Together with ``action`` it is the only
            credential that can validate or revoke this grant.

        Raises:
            InvalidArgumentError: If any argument violates its precondition.
            StorageError: If the store write fails.
        """
        require_action(action)
        ttl_minutes = require_ttl_minutes(
            self._config.default_ttl_minutes if ttl_minutes is None else ttl_minutes
        )
        retries = require_retries(
            self._config.default_retries if retries is None else retries
        )

        token = self._keys.new_token()
        key = self._keys.derive_key(action, token)
        counter = UsageCounter.for_retries(retries)

        await self._store.set(
            key, counter.value, ttl_seconds=ttl_minutes * SECONDS_PER_MINUTE
        )

        self._log.info(
            "access_token_issued",
            action=action,
            ttl_minutes=ttl_minutes,
            retries=retries,
        )
        return token

    async def validate(self, action: str, token: str) -> bool:
        """Validate a token against its action, consuming one use.

        Absent keys (expired, revoked, consumed or never issued) are
        indistinguishable and all return False without touching the store
        again.

        Args:
            action: Action the token was issued for.
            token: Token to validate.

        Returns:
            True if the token was valid for this call, False otherwise.

        Raises:
            InvalidArgumentError: If action or token are malformed.
            StorageError: If a store read or write fails.
        """
        require_action(action)
        require_token(token)

        key = self._keys.derive_key(action, token)
        value = await self._store.get(key)
        if value is None:
            self._log.debug("access_token_rejected", action=action)
            return False

        transition, remaining = UsageCounter(value=value).consume()
        if transition is CounterTransition.DELETE:
            await self._store.delete(key)
        elif transition is CounterTransition.UPDATE:
            assert remaining is not None
            await self._store.update(key, remaining.value)

        self._log.debug(
            "access_token_consumed",
            action=action,
            transition=transition.value,
            remaining_uses=remaining.remaining_uses if remaining else 0,
        )
        return True

    async def revoke(self, action: str, token: str) -> bool:
        """Remove a token before it expires.

        The removal is confirmed by validating the token again; since the
        key should be absent, that validation performs no writes.

        Args:
            action: Action the token was issued for.
            token: Token to remove.

        Returns:
            True once the token is confirmed absent. Revoking a token that
            is already gone also returns True.

        Raises:
            InvalidArgumentError: If action or token are malformed.
            StorageConsistencyError: If the token still validates afterwards.
            StorageError: If a store operation fails.
        """
        require_action(action)
        require_token(token)

        key = self._keys.derive_key(action, token)
        await self._store.delete(key)

        if await self.validate(action, token):
            self._log.error("access_token_revoke_failed", action=action, key=key)
            raise StorageConsistencyError(action=action, key=key)

        self._log.info("access_token_revoked", action=action)
        return True

    async def aclose(self) -> None:
        """Close the underlying store.

        Call once at shutdown. A Redis-backed store returns its
        connection pool here.
        """
        await self._store.aclose()
        self._log.info("access_token_service_closed")
