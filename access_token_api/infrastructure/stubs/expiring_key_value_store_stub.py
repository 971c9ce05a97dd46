"""Expiring Key-Value Store stub for development and testing.

In-memory implementation of ExpiringKeyValueStorePort. Entries carry a
deadline on the injected time authority's monotonic clock and are
purged lazily when accessed after it. Suitable for a single process;
production deployments use RedisExpiringStore.

Developer Golden Rules:
1. Inject FakeTimeAuthority in tests - never sleep to expire entries
2. update() keeps the original deadline
3. Failure injection raises the same StorageError a real backend would
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

import structlog

from access_token_api.application.ports.time_authority import TimeAuthorityProtocol
from access_token_api.application.services.time_authority_service import (
    TimeAuthorityService,
)
from access_token_api.domain.errors import StorageError

logger = structlog.get_logger(__name__)


@dataclass
class StoreEntry:
    """Stored value with its expiry deadline.

    Attributes:
        value: Stored integer.
        expires_at: Monotonic clock reading at which the entry expires.
    """

    value: int
    expires_at: float


class ExpiringKeyValueStoreStub:
    """Stub implementation of ExpiringKeyValueStorePort.

    Provides control over store behavior for testing scenarios:
    - TTL expiry driven by an injected time authority
    - Backend failures for selected operations (fail_on)
    - A delete that silently does nothing (ignore_deletes)

    Attributes:
        _entries: Live entries keyed by storage key.
        _time: Clock used to compute and check deadlines.
    """

    def __init__(
        self,
        time_authority: TimeAuthorityProtocol | None = None,
        *,
        fail_on: Iterable[str] = (),
        ignore_deletes: bool = False,
    ) -> None:
        """Initialize the in-memory store.

        Args:
            time_authority: Clock for expiry. Defaults to the host clock.
            fail_on: Operation names (get, set, update, delete) that raise
                StorageError instead of running.
            ignore_deletes: When True, delete() returns without removing.
        """
        self._entries: dict[str, StoreEntry] = {}
        self._time = time_authority or TimeAuthorityService()
        self.fail_on: set[str] = set(fail_on)
        self.ignore_deletes = ignore_deletes

    def _check_failure(self, operation: str, key: str) -> None:
        if operation in self.fail_on:
            logger.warning("store_failure_injected", operation=operation, key=key)
            raise StorageError(operation, key, "injected failure")

    def _live_entry(self, key: str) -> StoreEntry | None:
        entry = self._entries.get(key)
        if entry is None:
            return None
        if self._time.monotonic() >= entry.expires_at:
            del self._entries[key]
            logger.debug("store_entry_expired", key=key)
            return None
        return entry

    async def set(self, key: str, value: int, ttl_seconds: int) -> None:
        """Create or overwrite an entry with a fresh deadline."""
        self._check_failure("set", key)
        self._entries[key] = StoreEntry(
            value=value,
            expires_at=self._time.monotonic() + ttl_seconds,
        )

    async def get(self, key: str) -> int | None:
        """Return the live value, or None if absent or expired."""
        self._check_failure("get", key)
        entry = self._live_entry(key)
        return entry.value if entry is not None else None

    async def update(self, key: str, value: int) -> None:
        """Overwrite a live entry's value, keeping its deadline."""
        self._check_failure("update", key)
        entry = self._live_entry(key)
        if entry is not None:
            entry.value = value

    async def delete(self, key: str) -> None:
        """Remove an entry. Absent keys are ignored."""
        self._check_failure("delete", key)
        if self.ignore_deletes:
            return
        self._entries.pop(key, None)

    async def aclose(self) -> None:
        """Nothing to release; entries stay readable for assertions."""

    # Test helpers

    def ttl_remaining(self, key: str) -> float | None:
        """Seconds until a live entry expires, None if absent."""
        entry = self._live_entry(key)
        if entry is None:
            return None
        return entry.expires_at - self._time.monotonic()

    def clear(self) -> None:
        """Remove all entries."""
        self._entries.clear()

    def __len__(self) -> int:
        now = self._time.monotonic()
        return sum(1 for entry in self._entries.values() if now < entry.expires_at)
