"""Application ports - Abstract interfaces for infrastructure adapters.

This module defines the contracts that infrastructure adapters must implement.
Ports enable dependency inversion and make the application layer testable.

Available ports:
- ExpiringKeyValueStorePort: Per-key TTL storage for usage counters
- AccessTokenServiceProtocol: Token issue / validate / revoke
- TimeAuthorityProtocol: Clock access
"""

from access_token_api.application.ports.access_token_service import (
    AccessTokenServiceProtocol,
)
from access_token_api.application.ports.expiring_key_value_store import (
    ExpiringKeyValueStorePort,
)
from access_token_api.application.ports.time_authority import TimeAuthorityProtocol

__all__: list[str] = [
    "AccessTokenServiceProtocol",
    "ExpiringKeyValueStorePort",
    "TimeAuthorityProtocol",
]
