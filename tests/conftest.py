"""
Pytest configuration and shared fixtures for access token API tests.

Testing Standards:
- Async tests use pytest.mark.asyncio (auto mode enabled in pyproject.toml)
- Use AsyncMock for async function mocking
- Unit tests go in tests/unit/
- Integration tests go in tests/integration/ and need Docker
"""

import pytest

from access_token_api.application.services.access_token_service import (
    AccessTokenService,
)
from access_token_api.config.access_token_config import AccessTokenConfig
from access_token_api.infrastructure.stubs.expiring_key_value_store_stub import (
    ExpiringKeyValueStoreStub,
)
from tests.helpers import FakeTimeAuthority


@pytest.fixture
def project_version() -> str:
    """Provide the current project version for tests."""
    from access_token_api import __version__

    return __version__


@pytest.fixture
def fake_time_authority() -> FakeTimeAuthority:
    """Controllable clock frozen at 2026-01-01T00:00:00 UTC."""
    return FakeTimeAuthority()


@pytest.fixture
def memory_store(fake_time_authority: FakeTimeAuthority) -> ExpiringKeyValueStoreStub:
    """In-memory store driven by the fake clock."""
    return ExpiringKeyValueStoreStub(time_authority=fake_time_authority)


@pytest.fixture
def access_token_config() -> AccessTokenConfig:
    """Default configuration (md5, 45-character keys)."""
    return AccessTokenConfig()


@pytest.fixture
def token_service(
    memory_store: ExpiringKeyValueStoreStub,
    access_token_config: AccessTokenConfig,
) -> AccessTokenService:
    """Service over the in-memory store."""
    return AccessTokenService(store=memory_store, config=access_token_config)
