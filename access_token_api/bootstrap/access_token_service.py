"""Bootstrap wiring for the access token service.

Builds a service with an explicitly chosen store. There is no module
level instance: callers construct one per configuration and pass it to
whatever needs it.
"""

from __future__ import annotations

import structlog

from access_token_api.application.ports.expiring_key_value_store import (
    ExpiringKeyValueStorePort,
)
from access_token_api.application.ports.time_authority import TimeAuthorityProtocol
from access_token_api.application.services.access_token_service import (
    AccessTokenService,
)
from access_token_api.config.access_token_config import AccessTokenConfig
from access_token_api.infrastructure.adapters.redis_expiring_store import (
    RedisExpiringStore,
)
from access_token_api.infrastructure.stubs.expiring_key_value_store_stub import (
    ExpiringKeyValueStoreStub,
)

logger = structlog.get_logger(__name__)


def create_expiring_store(
    config: AccessTokenConfig,
    time_authority: TimeAuthorityProtocol | None = None,
) -> ExpiringKeyValueStorePort:
    """Select the store for a configuration.

    Args:
        config: Service configuration.
        time_authority: Clock for the in-memory store.

    Returns:
        A Redis store when config.redis_url is set, else the in-memory stub.
    """
    if config.redis_url:
        logger.info("access_token_store_selected", store="redis")
        return RedisExpiringStore.from_url(
            config.redis_url, key_prefix=config.redis_key_prefix
        )

    logger.warning(
        "access_token_store_selected",
        store="memory",
        message="Tokens are process-local; set ACCESS_TOKEN_REDIS_URL to share them",
    )
    return ExpiringKeyValueStoreStub(time_authority=time_authority)


def create_access_token_service(
    config: AccessTokenConfig | None = None,
    store: ExpiringKeyValueStorePort | None = None,
) -> AccessTokenService:
    """Create an access token service.

    Args:
        config: Service configuration. Read from the environment if None.
        store: Store to use. Selected from config if None.

    Returns:
        A ready AccessTokenService.

    Raises:
        ConfigurationError: If the digest algorithm does not fit the
            store's key-length limit.
    """
    config = config or AccessTokenConfig.from_environment()
    if store is None:
        store = create_expiring_store(config)
    return AccessTokenService(store=store, config=config)
