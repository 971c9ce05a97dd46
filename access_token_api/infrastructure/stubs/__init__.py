"""In-memory implementations of application ports."""

from access_token_api.infrastructure.stubs.expiring_key_value_store_stub import (
    ExpiringKeyValueStoreStub,
)

__all__: list[str] = ["ExpiringKeyValueStoreStub"]
